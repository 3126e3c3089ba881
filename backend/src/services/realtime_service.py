from __future__ import annotations

from collections.abc import Callable
from typing import Any

from ..clients.citybikes import fetch_network
from ..core.realtime import LiveStationDatum, live_station_map

NetworkFetcher = Callable[[], Any]


def fetch_realtime_data(
    fetch: NetworkFetcher = fetch_network,
) -> dict[str, LiveStationDatum]:
    return live_station_map(fetch())
