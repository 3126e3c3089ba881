from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from ...app.controller import DashboardController, OperationState
from ..deps import get_controller
from ..schemas.dashboard import RealtimeResponse


router = APIRouter()


def operation_status(state: OperationState) -> dict[str, Any]:
    return {
        "status": state.status,
        "is_loading": state.is_loading,
        "error": state.error,
    }


def realtime_payload(controller: DashboardController) -> dict[str, Any]:
    return {
        **operation_status(controller.realtime_state),
        "stations": {
            api_id: {"free_bikes": datum.free_bikes, "empty_slots": datum.empty_slots}
            for api_id, datum in controller.live_data().items()
        },
    }


@router.get("/realtime", response_model=RealtimeResponse)
def get_realtime(
    controller: DashboardController = Depends(get_controller),
) -> dict[str, Any]:
    return realtime_payload(controller)


@router.post("/realtime/refresh", response_model=RealtimeResponse)
def refresh_realtime(
    controller: DashboardController = Depends(get_controller),
) -> dict[str, Any]:
    controller.load_realtime()
    return realtime_payload(controller)
