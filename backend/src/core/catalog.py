from __future__ import annotations

import random
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Literal

from ..errors import UnknownStationError
from .conditions import HOURS, Day, DayClass, day_class
from .inventory import clamp_inventory

Pattern = Literal[
    "commuter_am_out",
    "commuter_pm_in",
    "city_centre",
    "residential",
    "stable",
]

HISTORICAL_CEILING = 20
NOISE_SPAN = 2


@dataclass(frozen=True)
class HistoricalData:
    weekday: tuple[int, ...]
    weekend: tuple[int, ...]

    def for_day(self, day: Day) -> tuple[int, ...]:
        return self.for_class(day_class(day))

    def for_class(self, kind: DayClass) -> tuple[int, ...]:
        if kind == "weekend":
            return self.weekend
        return self.weekday


@dataclass(frozen=True)
class Station:
    id: int
    api_id: str
    name: str
    total_docks: int
    historical_data: HistoricalData


@dataclass(frozen=True)
class StationDefinition:
    id: int
    api_id: str
    name: str
    total_docks: int
    weekday_pattern: Pattern
    weekend_pattern: Pattern


STATION_DEFINITIONS: tuple[StationDefinition, ...] = (
    StationDefinition(
        id=1,
        api_id="a9853a4e2353e62e49c5e7b458d3434d",
        name="City Hall",
        total_docks=25,
        weekday_pattern="commuter_pm_in",
        weekend_pattern="city_centre",
    ),
    StationDefinition(
        id=2,
        api_id="d2b5134707f71b489a117b4478175d26",
        name="Botanic Gardens",
        total_docks=20,
        weekday_pattern="residential",
        weekend_pattern="city_centre",
    ),
    StationDefinition(
        id=3,
        api_id="23c10a4025d507a2a16d8e2e2c07659b",
        name="Lanyon Place Station",
        total_docks=30,
        weekday_pattern="commuter_am_out",
        weekend_pattern="stable",
    ),
    StationDefinition(
        id=4,
        api_id="18501da8695f2e91244e83f733804369",
        name="Titanic Quarter",
        total_docks=22,
        weekday_pattern="commuter_pm_in",
        weekend_pattern="city_centre",
    ),
    StationDefinition(
        id=5,
        api_id="e63450a80e649514742a77f2452c66d8",
        name="Queen's University",
        total_docks=28,
        weekday_pattern="commuter_pm_in",
        weekend_pattern="residential",
    ),
)


def baseline_bikes(pattern: Pattern, hour: int) -> int:
    if pattern == "commuter_am_out":
        # riders leave in the morning and come back in the evening
        if 7 <= hour <= 9:
            return 2
        if 17 <= hour <= 19:
            return 15
        return 10
    if pattern == "commuter_pm_in":
        if 7 <= hour <= 9:
            return 18
        if 17 <= hour <= 19:
            return 5
        return 10
    if pattern == "city_centre":
        return 6 if 9 <= hour <= 17 else 12
    if pattern == "residential":
        return 8 if 8 <= hour <= 18 else 16
    return 10


def generate_hourly_data(
    pattern: Pattern,
    rng: random.Random,
    capacity: int = HISTORICAL_CEILING,
) -> tuple[int, ...]:
    ceiling = min(HISTORICAL_CEILING, capacity)
    return tuple(
        clamp_inventory(
            baseline_bikes(pattern, hour) + rng.randint(-NOISE_SPAN, NOISE_SPAN),
            ceiling,
        )
        for hour in HOURS
    )


def build_station(definition: StationDefinition, rng: random.Random) -> Station:
    return Station(
        id=definition.id,
        api_id=definition.api_id,
        name=definition.name,
        total_docks=definition.total_docks,
        historical_data=HistoricalData(
            weekday=generate_hourly_data(
                definition.weekday_pattern, rng, definition.total_docks
            ),
            weekend=generate_hourly_data(
                definition.weekend_pattern, rng, definition.total_docks
            ),
        ),
    )


class StationCatalog:
    """Ordered, read-only set of stations built once per application."""

    def __init__(self, stations: Sequence[Station]) -> None:
        if not stations:
            raise ValueError("a catalog needs at least one station")
        self._stations = tuple(stations)
        self._by_id = {station.id: station for station in self._stations}

    def __iter__(self) -> Iterator[Station]:
        return iter(self._stations)

    def __len__(self) -> int:
        return len(self._stations)

    @property
    def stations(self) -> tuple[Station, ...]:
        return self._stations

    @property
    def default(self) -> Station:
        return self._stations[0]

    def get(self, station_id: int) -> Station:
        try:
            return self._by_id[station_id]
        except KeyError:
            raise UnknownStationError(station_id) from None


def build_catalog(
    rng: random.Random | None = None,
    definitions: Sequence[StationDefinition] = STATION_DEFINITIONS,
) -> StationCatalog:
    rng = rng or random.Random()
    return StationCatalog([build_station(definition, rng) for definition in definitions])
