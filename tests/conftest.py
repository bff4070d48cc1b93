"""Pytest config: PYTHONPATH, a neutral environment, and shared fixtures."""
import os
import sys
from pathlib import Path

import pytest

root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(root))

# Tests mock the default upstream URLs; make sure a developer .env can't move them
for _var in ("NWS_API_BASE", "NWS_USER_AGENT", "NOTIFICATION_API_BASE"):
    os.environ.pop(_var, None)

from core.config import ServiceConfig  # noqa: E402


@pytest.fixture
def config():
    return ServiceConfig()


@pytest.fixture
def points_payload():
    return {
        "properties": {
            "forecast": "https://api.weather.gov/gridpoints/MTR/85,105/forecast",
        }
    }


@pytest.fixture
def forecast_payload():
    return {
        "properties": {
            "periods": [
                {
                    "name": "Tonight",
                    "temperature": 40,
                    "temperatureUnit": "F",
                    "windSpeed": "5 mph",
                    "shortForecast": "Clear",
                },
                {
                    "name": "Wednesday",
                    "temperature": 61,
                    "temperatureUnit": "F",
                    "windSpeed": "5 to 10 mph",
                    "windDirection": "NW",
                    "shortForecast": "Sunny",
                },
            ]
        }
    }
