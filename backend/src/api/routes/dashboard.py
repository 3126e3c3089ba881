from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException

from ...app.controller import DashboardController, Selection
from ...core.conditions import HOURS, Day, WeatherCondition
from ...errors import UnknownStationError
from ..deps import get_controller
from ..schemas.dashboard import (
    DashboardResponse,
    Options,
    PredictionResponse,
    SelectionUpdate,
)
from ..schemas.dashboard import Selection as SelectionSchema
from .state import operation_status


router = APIRouter()


def selection_payload(selection: Selection) -> dict[str, Any]:
    return {
        "station_id": selection.station_id,
        "day": selection.day,
        "weather": selection.weather,
        "hour": selection.hour,
    }


def apply_update(controller: DashboardController, update: SelectionUpdate) -> Selection:
    try:
        return controller.select(
            station_id=update.station_id,
            day=update.day,
            weather=update.weather,
            hour=update.hour,
        )
    except UnknownStationError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


@router.get("/options", response_model=Options)
def get_options() -> dict[str, Any]:
    return {
        "days": list(Day),
        "weather": list(WeatherCondition),
        "min_hour": HOURS.start,
        "max_hour": HOURS.stop - 1,
    }


@router.get("/selection", response_model=SelectionSchema)
def get_selection(
    controller: DashboardController = Depends(get_controller),
) -> dict[str, Any]:
    return selection_payload(controller.selection)


@router.put("/selection", response_model=SelectionSchema)
def put_selection(
    update: SelectionUpdate,
    controller: DashboardController = Depends(get_controller),
) -> dict[str, Any]:
    return selection_payload(apply_update(controller, update))


@router.post("/predict", response_model=PredictionResponse)
def predict(
    update: SelectionUpdate | None = Body(default=None),
    controller: DashboardController = Depends(get_controller),
) -> dict[str, Any]:
    if update is not None:
        apply_update(controller, update)
    outcome = controller.predict()
    return {
        **operation_status(outcome.state),
        "predicted_bikes": outcome.predicted_bikes,
        "selection": selection_payload(outcome.selection),
    }


@router.get("/dashboard", response_model=DashboardResponse)
def get_dashboard(
    controller: DashboardController = Depends(get_controller),
) -> dict[str, Any]:
    view = controller.view()
    live = view.live_datum
    return {
        "selection": selection_payload(view.selection),
        "station": {
            "id": view.station.id,
            "api_id": view.station.api_id,
            "name": view.station.name,
            "total_docks": view.station.total_docks,
        },
        "chart": [
            {"hour": point.hour, "avg_bikes": point.avg_bikes} for point in view.chart
        ],
        "live": (
            {"free_bikes": live.free_bikes, "empty_slots": live.empty_slots}
            if live is not None
            else None
        ),
        "realtime": operation_status(view.realtime),
        "live_station_count": view.live_station_count,
        "prediction": operation_status(view.prediction),
        "predicted_bikes": view.predicted_bikes,
    }
