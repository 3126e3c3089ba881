from __future__ import annotations

import random

import pytest

from bikecast.core.catalog import (
    HISTORICAL_CEILING,
    STATION_DEFINITIONS,
    StationDefinition,
    baseline_bikes,
    build_catalog,
    generate_hourly_data,
)
from bikecast.errors import UnknownStationError

PATTERNS = ["commuter_am_out", "commuter_pm_in", "city_centre", "residential", "stable"]


@pytest.mark.parametrize("pattern", PATTERNS)
def test_generated_values_stay_in_band(pattern: str) -> None:
    rng = random.Random(7)
    for _ in range(50):
        table = generate_hourly_data(pattern, rng)  # type: ignore[arg-type]
        assert len(table) == 24
        assert all(0 <= value <= HISTORICAL_CEILING for value in table)


@pytest.mark.parametrize("pattern", PATTERNS)
def test_generated_values_stay_near_baseline(pattern: str) -> None:
    table = generate_hourly_data(pattern, random.Random(3))  # type: ignore[arg-type]
    for hour, value in enumerate(table):
        base = baseline_bikes(pattern, hour)  # type: ignore[arg-type]
        assert abs(value - base) <= 2


def test_small_station_never_exceeds_its_docks() -> None:
    # the commuter inflow peak (18 +/- 2) would overflow a 12-dock station
    definition = StationDefinition(
        id=9,
        api_id="small",
        name="Small Station",
        total_docks=12,
        weekday_pattern="commuter_pm_in",
        weekend_pattern="residential",
    )
    catalog = build_catalog(random.Random(1), definitions=[definition])
    station = catalog.get(9)

    for table in (station.historical_data.weekday, station.historical_data.weekend):
        assert max(table) <= station.total_docks


def test_baselines_follow_pattern_peaks() -> None:
    assert baseline_bikes("commuter_am_out", 8) == 2
    assert baseline_bikes("commuter_am_out", 18) == 15
    assert baseline_bikes("commuter_pm_in", 8) == 18
    assert baseline_bikes("commuter_pm_in", 18) == 5
    assert baseline_bikes("city_centre", 12) == 6
    assert baseline_bikes("city_centre", 22) == 12
    assert baseline_bikes("residential", 3) == 16
    assert baseline_bikes("stable", 8) == 10


def test_catalog_is_ordered_and_complete() -> None:
    catalog = build_catalog(random.Random(0))

    assert [station.id for station in catalog] == [d.id for d in STATION_DEFINITIONS]
    assert catalog.default.name == "City Hall"
    assert catalog.get(3).total_docks == 30


def test_seeded_catalogs_are_reproducible() -> None:
    first = build_catalog(random.Random(42))
    second = build_catalog(random.Random(42))

    assert first.stations == second.stations


def test_unknown_station_raises() -> None:
    catalog = build_catalog(random.Random(0))

    with pytest.raises(UnknownStationError):
        catalog.get(99)
