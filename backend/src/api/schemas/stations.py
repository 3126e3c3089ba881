from __future__ import annotations

from pydantic import BaseModel

from ...core.conditions import Day, DayClass


class Station(BaseModel):
    id: int
    api_id: str
    name: str
    total_docks: int


class ChartPoint(BaseModel):
    hour: str
    avg_bikes: int


class StationHistory(BaseModel):
    station_id: int
    day: Day
    day_class: DayClass
    points: list[ChartPoint]


class LiveStation(BaseModel):
    free_bikes: int
    empty_slots: int
