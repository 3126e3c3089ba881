from __future__ import annotations

import pydantic
import pytest

from bikecast.core.catalog import StationCatalog
from bikecast.core.conditions import Day, WeatherCondition
from bikecast.core.inference_request import (
    PREDICTION_SCHEMA,
    PredictionRequest,
    build_inference_payload,
    build_prediction_request,
)
from bikecast.core.realtime import LiveStationDatum


def test_builder_selects_table_for_day_class(catalog: StationCatalog) -> None:
    station = catalog.get(2)

    request = build_prediction_request(station, Day.SATURDAY, 10, WeatherCondition.CLEAR)

    assert request.day_class == "weekend"
    assert request.historical == station.historical_data.weekend
    assert request.current_free_bikes is None


def test_builder_carries_live_free_bikes(catalog: StationCatalog) -> None:
    request = build_prediction_request(
        catalog.get(2),
        Day.MONDAY,
        10,
        WeatherCondition.WINDY,
        LiveStationDatum(free_bikes=4, empty_slots=16),
    )

    assert request.current_free_bikes == 4


def test_hour_out_of_range_is_rejected(catalog: StationCatalog) -> None:
    with pytest.raises(pydantic.ValidationError):
        build_prediction_request(catalog.get(1), Day.MONDAY, 24, WeatherCondition.CLEAR)


def test_mismatched_day_class_is_rejected(catalog: StationCatalog) -> None:
    request = build_prediction_request(catalog.get(1), Day.MONDAY, 8, WeatherCondition.CLEAR)

    with pytest.raises(pydantic.ValidationError):
        PredictionRequest(**{**request.model_dump(), "day_class": "weekend"})


def test_payload_pairs_prompt_with_schema(catalog: StationCatalog) -> None:
    request = build_prediction_request(catalog.get(1), Day.MONDAY, 8, WeatherCondition.CLEAR)

    payload = build_inference_payload(request, model="gemini-2.5-flash")

    assert payload.model == "gemini-2.5-flash"
    assert payload.response_schema == PREDICTION_SCHEMA
    assert payload.response_schema["properties"]["predictedBikes"]["type"] == "integer"
    assert "City Hall" in payload.prompt
