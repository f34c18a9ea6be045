"""Weather package - holds API client, models, and custom errors."""

from .api import OpenWeatherMapClient
from .errors import (
    DecodeError,
    RequestBuildError,
    RequestTimeoutError,
    TransportError,
    WeatherClientError,
)
from .models import (
    Condition,
    Coordinates,
    Precipitation,
    RegionInfo,
    Temperature,
    WeatherReport,
    Wind,
)
from .protocols import WeatherLookup
from .timestamp import decode_timestamp

# Define what gets imported with: from barometer.weather import *
__all__ = [
    "Condition",
    "Coordinates",
    "DecodeError",
    "OpenWeatherMapClient",
    "Precipitation",
    "RegionInfo",
    "RequestBuildError",
    "RequestTimeoutError",
    "Temperature",
    "TransportError",
    "WeatherClientError",
    "WeatherLookup",
    "WeatherReport",
    "Wind",
    "decode_timestamp",
]
