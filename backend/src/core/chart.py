from __future__ import annotations

from dataclasses import dataclass

from .catalog import Station
from .conditions import Day


@dataclass(frozen=True)
class ChartPoint:
    hour: str
    avg_bikes: int


def hour_label(hour: int) -> str:
    return f"{hour:02d}:00"


def chart_data(station: Station, day: Day) -> list[ChartPoint]:
    table = station.historical_data.for_day(day)
    return [
        ChartPoint(hour=hour_label(hour), avg_bikes=bikes)
        for hour, bikes in enumerate(table)
    ]
