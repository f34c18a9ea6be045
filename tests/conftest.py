import json
from pathlib import Path
from typing import Any

import pytest

from barometer.weather.api import OpenWeatherMapClient
from barometer.weather.models import WeatherReport

DATA_DIR = Path(__file__).parent / "data"

TEST_BASE_URL = "http://owm.test/data/2.5"


@pytest.fixture
def austin_json() -> str:
    return (DATA_DIR / "weather_austin.json").read_text()


@pytest.fixture
def austin_raw(austin_json: str) -> dict[str, Any]:
    return json.loads(austin_json)


@pytest.fixture
def austin_report(austin_json: str) -> WeatherReport:
    return WeatherReport.model_validate_json(austin_json)


@pytest.fixture
def client() -> OpenWeatherMapClient:
    owm = OpenWeatherMapClient("Test")
    owm.base_url = TEST_BASE_URL
    return owm
