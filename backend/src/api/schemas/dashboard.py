from __future__ import annotations

from pydantic import BaseModel, Field

from ...core.conditions import Day, WeatherCondition
from .common import OperationStatus
from .stations import ChartPoint, LiveStation, Station


class Selection(BaseModel):
    station_id: int
    day: Day
    weather: WeatherCondition
    hour: int


class SelectionUpdate(BaseModel):
    station_id: int | None = None
    day: Day | None = None
    weather: WeatherCondition | None = None
    hour: int | None = Field(default=None, ge=0, le=23)


class Options(BaseModel):
    days: list[Day]
    weather: list[WeatherCondition]
    min_hour: int = 0
    max_hour: int = 23


class RealtimeResponse(OperationStatus):
    stations: dict[str, LiveStation]


class PredictionResponse(OperationStatus):
    predicted_bikes: int | None = None
    selection: Selection


class DashboardResponse(BaseModel):
    selection: Selection
    station: Station
    chart: list[ChartPoint]
    live: LiveStation | None = None
    realtime: OperationStatus
    live_station_count: int
    prediction: OperationStatus
    predicted_bikes: int | None = None
