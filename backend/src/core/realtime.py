from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from ..errors import ParseError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LiveStationDatum:
    free_bikes: int
    empty_slots: int


def network_stations(payload: Any) -> list[dict[str, Any]]:
    if not isinstance(payload, dict):
        raise ParseError("live data payload is not an object")
    network = payload.get("network")
    if not isinstance(network, dict):
        raise ParseError("live data payload has no 'network' object")
    stations = network.get("stations")
    if not isinstance(stations, list):
        raise ParseError("live data payload has no 'network.stations' list")
    return [row for row in stations if isinstance(row, dict)]


def live_station_map(payload: Any) -> dict[str, LiveStationDatum]:
    output: dict[str, LiveStationDatum] = {}
    skipped = 0
    for row in network_stations(payload):
        datum = _station_datum(row)
        if datum is None:
            skipped += 1
            continue
        output[str(row["id"])] = datum
    if skipped:
        logger.debug("Skipped %d live station entries with missing fields", skipped)
    return output


def _station_datum(row: dict[str, Any]) -> LiveStationDatum | None:
    if not row.get("id"):
        return None
    free_bikes = _count(row.get("free_bikes"))
    empty_slots = _count(row.get("empty_slots"))
    if free_bikes is None or empty_slots is None:
        return None
    return LiveStationDatum(free_bikes=free_bikes, empty_slots=empty_slots)


def _count(value: object) -> int | None:
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    if value < 0:
        return None
    return value
