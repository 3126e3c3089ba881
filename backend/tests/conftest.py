from __future__ import annotations

import random

import pytest

from bikecast.core.catalog import StationCatalog, build_catalog
from bikecast.core.inference_request import InferencePayload
from bikecast.errors import InferenceError


class StubInferenceClient:
    """Returns canned response text and records every payload it receives."""

    def __init__(self, *responses: str | Exception) -> None:
        self.responses = list(responses)
        self.payloads: list[InferencePayload] = []

    def generate(self, payload: InferencePayload) -> str:
        self.payloads.append(payload)
        response = self.responses.pop(0) if len(self.responses) > 1 else self.responses[0]
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "LIVE_DATA_RELAY_URL",
        "LIVE_DATA_TIMEOUT",
        "CITYBIKES_NETWORK_URL",
        "INFERENCE_MODEL",
        "NETWORK_NAME",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def catalog() -> StationCatalog:
    return build_catalog(random.Random(11))


@pytest.fixture
def inference_failure() -> InferenceError:
    return InferenceError("endpoint unreachable")
