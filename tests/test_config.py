"""Unit tests for core.config."""
import dataclasses

import pytest

from core.config import ServiceConfig, load_config


def test_defaults(monkeypatch):
    for var in ("NWS_API_BASE", "NWS_USER_AGENT", "NOTIFICATION_API_BASE"):
        monkeypatch.delenv(var, raising=False)

    config = load_config()

    assert config == ServiceConfig()
    assert config.nws_api_base == "https://api.weather.gov"
    assert config.notification_api_base == "http://localhost:3001"
    assert config.nws_headers == {"User-Agent": "weather-app/1.0", "Accept": "application/geo+json"}
    assert config.notification_headers == {"Content-Type": "application/json"}


def test_env_overrides_strip_trailing_slash(monkeypatch):
    monkeypatch.setenv("NWS_API_BASE", "https://nws.example/")
    monkeypatch.setenv("NOTIFICATION_API_BASE", "http://alerts:8080/")
    monkeypatch.setenv("NWS_USER_AGENT", "my-app/2.0")

    config = load_config()

    assert config.nws_api_base == "https://nws.example"
    assert config.notification_api_base == "http://alerts:8080"
    assert config.nws_headers["User-Agent"] == "my-app/2.0"


def test_config_is_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        ServiceConfig().nws_api_base = "https://elsewhere"
