"""Tests for settings validation."""

import pytest
from pydantic import ValidationError

from raise_datasets.config import Settings


def test_defaults():
    settings = Settings(_env_file=None)
    assert settings.marketplace_endpoint == "https://api.portal.raise-science.eu/dataset/marketplace"
    assert settings.request_timeout == 15.0
    assert settings.cache_ttl_seconds == 300
    assert settings.default_per_page == 10
    assert settings.max_per_page == 50
    assert settings.user_agent.startswith("Raise-Datasets-Proxy/")


def test_environment_override(monkeypatch):
    monkeypatch.setenv("RAISE_DATASETS_CACHE_TTL_SECONDS", "60")
    monkeypatch.setenv("RAISE_DATASETS_ALLOWED_ORIGINS", "https://a.test, https://b.test")
    settings = Settings(_env_file=None)
    assert settings.cache_ttl_seconds == 60
    assert settings.origins == ["https://a.test", "https://b.test"]


@pytest.mark.parametrize(
    "overrides",
    [
        {"request_timeout": 0},
        {"cache_ttl_seconds": -1},
        {"max_per_page": 51},
        {"default_per_page": 0},
        {"default_per_page": 20, "max_per_page": 10},
    ],
)
def test_invalid_settings_are_rejected(overrides):
    with pytest.raises(ValidationError):
        Settings(_env_file=None, **overrides)
