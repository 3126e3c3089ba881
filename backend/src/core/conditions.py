from __future__ import annotations

from enum import Enum
from typing import Literal

DayClass = Literal["weekday", "weekend"]


class Day(str, Enum):
    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"
    SUNDAY = "Sunday"


class WeatherCondition(str, Enum):
    CLEAR = "Clear"
    RAINY = "Rainy"
    WINDY = "Windy"


WEEKEND_DAYS = frozenset({Day.SATURDAY, Day.SUNDAY})

HOURS = range(24)


def day_class(day: Day) -> DayClass:
    if day in WEEKEND_DAYS:
        return "weekend"
    return "weekday"


def is_valid_hour(hour: int) -> bool:
    return hour in HOURS
