"""Client library for the OpenWeatherMap current weather API."""

from barometer.constants import VERSION as __version__
from barometer.settings import ClientSettings
from barometer.weather import (
    DecodeError,
    OpenWeatherMapClient,
    RequestBuildError,
    RequestTimeoutError,
    TransportError,
    WeatherClientError,
    WeatherLookup,
    WeatherReport,
    decode_timestamp,
)

__all__ = [
    "ClientSettings",
    "DecodeError",
    "OpenWeatherMapClient",
    "RequestBuildError",
    "RequestTimeoutError",
    "TransportError",
    "WeatherClientError",
    "WeatherLookup",
    "WeatherReport",
    "__version__",
    "decode_timestamp",
]
