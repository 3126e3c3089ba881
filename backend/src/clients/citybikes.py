from __future__ import annotations

import json
import logging
from http.client import HTTPException
from typing import Any
from urllib.error import HTTPError
from urllib.request import urlopen

from ..config import live_data_timeout, live_data_url
from ..errors import NetworkError, ParseError, ServiceError

logger = logging.getLogger(__name__)


def fetch_network(url: str | None = None, timeout: float | None = None) -> Any:
    if timeout is None:
        timeout = live_data_timeout()
    return _fetch_json(url or live_data_url(), timeout)


def _fetch_json(url: str, timeout: float) -> Any:
    try:
        with urlopen(url, timeout=timeout) as response:
            payload = response.read()
    except HTTPError as exc:
        logger.error("Live data request failed: %s %s", exc.code, exc.reason)
        raise ServiceError(exc.code, str(exc.reason or "")) from exc
    except (OSError, HTTPException, ValueError) as exc:
        logger.error("Live data request could not complete: %s", exc)
        raise NetworkError(
            "Network connection failed. Please check your internet connection."
        ) from exc

    try:
        return json.loads(payload)
    except ValueError as exc:
        logger.error("Live data body is not valid JSON: %s", exc)
        raise ParseError(
            "Failed to parse live station data. The format might be incorrect."
        ) from exc
