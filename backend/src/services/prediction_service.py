from __future__ import annotations

import json
import logging
import math

from ..clients.inference import InferenceClient, OpenAIInferenceClient
from ..config import inference_model, network_name
from ..core.catalog import Station
from ..core.conditions import Day, WeatherCondition
from ..core.inference_request import (
    PREDICTION_FIELD,
    build_inference_payload,
    build_prediction_request,
)
from ..core.inventory import clamp_prediction
from ..core.realtime import LiveStationDatum
from ..errors import InferenceError, ValidationError

logger = logging.getLogger(__name__)


class PredictionGateway:
    def __init__(
        self,
        client: InferenceClient | None = None,
        model: str | None = None,
        network: str | None = None,
    ) -> None:
        self._client = client or OpenAIInferenceClient()
        self._model = model or inference_model()
        self._network = network or network_name()

    def predict(
        self,
        station: Station,
        day: Day,
        hour: int,
        weather: WeatherCondition,
        live_datum: LiveStationDatum | None = None,
    ) -> int:
        request = build_prediction_request(
            station, day, hour, weather, live_datum, network_name=self._network
        )
        payload = build_inference_payload(request, self._model)
        try:
            text = self._client.generate(payload)
        except InferenceError:
            raise
        except Exception as exc:
            logger.error("Inference client raised unexpectedly: %s", exc)
            raise InferenceError("Inference endpoint call failed") from exc
        return parse_prediction(text, station.total_docks)


def parse_prediction(text: str, total_docks: int) -> int:
    try:
        parsed = json.loads(_strip_code_fence(text))
    except ValueError as exc:
        logger.error("Inference response is not JSON: %r", text[:200])
        raise InferenceError("Inference endpoint returned a malformed body") from exc

    if not isinstance(parsed, dict) or PREDICTION_FIELD not in parsed:
        raise ValidationError(f"Response is missing '{PREDICTION_FIELD}'")
    value = parsed[PREDICTION_FIELD]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"'{PREDICTION_FIELD}' is not numeric: {value!r}")
    if isinstance(value, float) and not math.isfinite(value):
        raise ValidationError(f"'{PREDICTION_FIELD}' is not finite: {value!r}")
    return clamp_prediction(value, total_docks)


def _strip_code_fence(text: str) -> str:
    content = text.strip()
    if content.startswith("```json"):
        content = content[7:]
    elif content.startswith("```"):
        content = content[3:]
    else:
        return content
    if content.endswith("```"):
        content = content[:-3]
    return content.strip()
