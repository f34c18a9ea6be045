# src/barometer/weather/protocols.py
from __future__ import annotations

from typing import Protocol, runtime_checkable

from barometer.weather.models import WeatherReport


@runtime_checkable
class WeatherLookup(Protocol):
    """Protocol defining the current-weather lookups an application may use.

    OpenWeatherMapClient implements it; callers that only need a report for
    a place can depend on this instead of the concrete client, which keeps
    a fake easy to drop in.
    """

    def by_city_name(self, city: str) -> WeatherReport:
        """Look up current weather for a free-text city name.

        Args:
            city: City name, optionally followed by state and country codes
        """
        ...

    def by_zip_code(
        self, zip_code: str, country_code: str | None = None
    ) -> WeatherReport:
        """Look up current weather for a ZIP or postal code.

        Args:
            zip_code: Postal code
            country_code: ISO 3166 country code (upstream assumes US if omitted)
        """
        ...

    def by_coordinates(self, lat: float, lon: float) -> WeatherReport:
        """Look up current weather for a latitude/longitude pair."""
        ...
