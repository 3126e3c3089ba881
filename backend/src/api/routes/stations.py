from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, HTTPException

from ...app.controller import DashboardController
from ...core.chart import chart_data
from ...core.conditions import Day, day_class
from ...errors import UnknownStationError
from ..deps import get_controller
from ..schemas.stations import Station, StationHistory


router = APIRouter()


@router.get("/stations", response_model=list[Station])
def list_stations(
    controller: DashboardController = Depends(get_controller),
) -> list[dict[str, Any]]:
    return [
        {
            "id": station.id,
            "api_id": station.api_id,
            "name": station.name,
            "total_docks": station.total_docks,
        }
        for station in controller.catalog
    ]


@router.get("/stations/{station_id}/history", response_model=StationHistory)
def get_history(
    station_id: int,
    day: Day = Day.MONDAY,
    controller: DashboardController = Depends(get_controller),
) -> dict[str, Any]:
    try:
        station = controller.catalog.get(station_id)
    except UnknownStationError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return {
        "station_id": station.id,
        "day": day,
        "day_class": day_class(day),
        "points": [
            {"hour": point.hour, "avg_bikes": point.avg_bikes}
            for point in chart_data(station, day)
        ],
    }
