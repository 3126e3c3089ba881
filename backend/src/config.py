from __future__ import annotations

import os


def _get_env(name: str, default: str | None = None) -> str:
    value = os.getenv(name, default)
    if value is None:
        raise ValueError(f"Missing required environment variable: {name}")
    return value


def citybikes_network_url() -> str:
    return _get_env(
        "CITYBIKES_NETWORK_URL",
        "https://api.citybik.es/v2/networks/belfast-bikes",
    )


def live_data_relay_url() -> str:
    return _get_env("LIVE_DATA_RELAY_URL", "")


def live_data_url() -> str:
    relay = live_data_relay_url()
    target = citybikes_network_url()
    if not relay:
        return target
    return f"{relay.rstrip('/')}/{target}"


def live_data_timeout() -> float:
    return float(_get_env("LIVE_DATA_TIMEOUT", "30"))


def inference_api_key() -> str:
    for name in ("INFERENCE_API_KEY", "GEMINI_API_KEY"):
        value = os.getenv(name)
        if value:
            return value
    return _get_env("API_KEY")


def inference_base_url() -> str:
    return _get_env(
        "INFERENCE_BASE_URL",
        "https://generativelanguage.googleapis.com/v1beta/openai/",
    )


def inference_model() -> str:
    return _get_env("INFERENCE_MODEL", "gemini-2.5-flash")


def network_name() -> str:
    return _get_env("NETWORK_NAME", "Belfast Bikes")


def catalog_seed() -> int | None:
    value = os.getenv("CATALOG_SEED")
    if not value:
        return None
    return int(value)


def cors_origins() -> list[str]:
    raw = _get_env("CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def log_level() -> str:
    return _get_env("LOG_LEVEL", "INFO").upper()
