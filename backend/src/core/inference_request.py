"""Typed construction of the payload sent to the inference endpoint.

A :class:`PredictionRequest` captures everything the model is told about one
user action. :func:`build_inference_payload` turns it into an
:class:`InferencePayload`, pairing the rendered prompt with the response
schema the endpoint must honour.
"""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .catalog import Station
from .conditions import Day, DayClass, WeatherCondition, day_class
from .prompt import render_prompt
from .realtime import LiveStationDatum

PREDICTION_FIELD = "predictedBikes"

PREDICTION_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        PREDICTION_FIELD: {
            "type": "integer",
            "description": "The predicted number of available bikes as a whole number.",
        },
    },
    "required": [PREDICTION_FIELD],
    "additionalProperties": False,
}


class PredictionRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    network_name: str
    station_name: str
    total_docks: int = Field(gt=0)
    day: Day
    hour: int = Field(ge=0, le=23)
    weather: WeatherCondition
    day_class: DayClass
    historical: tuple[int, ...] = Field(min_length=24, max_length=24)
    current_free_bikes: int | None = Field(default=None, ge=0)

    @model_validator(mode="after")
    def _check_day_class(self) -> PredictionRequest:
        if self.day_class != day_class(self.day):
            raise ValueError(f"{self.day.value} does not belong to the {self.day_class} table")
        return self

    def historical_by_hour(self) -> dict[str, int]:
        return {str(hour): bikes for hour, bikes in enumerate(self.historical)}


class InferencePayload(BaseModel):
    model_config = ConfigDict(frozen=True)

    model: str
    prompt: str
    response_schema: dict[str, Any]
    schema_name: str = "bike_availability_prediction"


def build_prediction_request(
    station: Station,
    day: Day,
    hour: int,
    weather: WeatherCondition,
    live_datum: LiveStationDatum | None = None,
    network_name: str = "Belfast Bikes",
) -> PredictionRequest:
    return PredictionRequest(
        network_name=network_name,
        station_name=station.name,
        total_docks=station.total_docks,
        day=day,
        hour=hour,
        weather=weather,
        day_class=day_class(day),
        historical=station.historical_data.for_day(day),
        current_free_bikes=live_datum.free_bikes if live_datum else None,
    )


def build_inference_payload(request: PredictionRequest, model: str) -> InferencePayload:
    return InferencePayload(
        model=model,
        prompt=render_prompt(request),
        response_schema=PREDICTION_SCHEMA,
    )
