from __future__ import annotations

import pytest

from bikecast import config


def test_live_data_url_is_direct_without_relay() -> None:
    assert config.live_data_url() == "https://api.citybik.es/v2/networks/belfast-bikes"


def test_inference_key_falls_back_through_names(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("INFERENCE_API_KEY", raising=False)
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.setenv("API_KEY", "legacy-key")

    assert config.inference_api_key() == "legacy-key"

    monkeypatch.setenv("GEMINI_API_KEY", "gemini-key")
    assert config.inference_api_key() == "gemini-key"


def test_missing_inference_key_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("INFERENCE_API_KEY", "GEMINI_API_KEY", "API_KEY"):
        monkeypatch.delenv(name, raising=False)

    with pytest.raises(ValueError):
        config.inference_api_key()


def test_cors_origins_are_split(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CORS_ORIGINS", "https://a.example, https://b.example,")

    assert config.cors_origins() == ["https://a.example", "https://b.example"]


def test_catalog_seed_is_optional(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CATALOG_SEED", raising=False)
    assert config.catalog_seed() is None

    monkeypatch.setenv("CATALOG_SEED", "17")
    assert config.catalog_seed() == 17
