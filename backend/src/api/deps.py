from __future__ import annotations

from fastapi import Request

from ..app.controller import DashboardController


def get_controller(request: Request) -> DashboardController:
    return request.app.state.controller
