from __future__ import annotations

import logging
from typing import Any, Protocol

from openai import OpenAI, OpenAIError

from ..config import inference_api_key, inference_base_url
from ..core.inference_request import InferencePayload
from ..errors import InferenceError

logger = logging.getLogger(__name__)


class InferenceClient(Protocol):
    def generate(self, payload: InferencePayload) -> str: ...


class OpenAIInferenceClient:
    """Structured-output completions against an OpenAI-compatible endpoint.

    The underlying client is created on first use so an application without
    a configured credential can still start and serve everything but
    predictions.
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url
        self._timeout = timeout
        self._client: OpenAI | None = None

    def _get_client(self) -> OpenAI:
        if self._client is None:
            try:
                api_key = self._api_key or inference_api_key()
            except ValueError as exc:
                raise InferenceError("No inference API key configured") from exc
            options: dict[str, Any] = {}
            if self._timeout is not None:
                options["timeout"] = self._timeout
            self._client = OpenAI(
                api_key=api_key,
                base_url=self._base_url or inference_base_url(),
                **options,
            )
        return self._client

    def generate(self, payload: InferencePayload) -> str:
        client = self._get_client()
        try:
            response = client.chat.completions.create(
                model=payload.model,
                messages=[{"role": "user", "content": payload.prompt}],
                response_format={
                    "type": "json_schema",
                    "json_schema": {
                        "name": payload.schema_name,
                        "schema": payload.response_schema,
                        "strict": True,
                    },
                },
            )
        except OpenAIError as exc:
            logger.error("Inference call failed: %s", exc)
            raise InferenceError("Inference endpoint call failed") from exc

        if not response.choices:
            raise InferenceError("Inference endpoint returned no choices")
        return response.choices[0].message.content or ""
