"""Typed models for OpenWeatherMap current weather (2.5) responses.

Each upstream block becomes its own immutable value object; fields keep
the meaning of the wire key they are read from. Every field is optional
on the wire and falls back to its zero value.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import AliasPath, Field, field_validator

from barometer.models.base import TimeStampModel, WireModel
from barometer.utils.time import TimeUtils
from barometer.weather.utils import UnitConverter

# ─────────────────────────── primitives ──────────────────────────────────────


class Coordinates(WireModel):
    """Geographic coordinates in decimal degrees."""

    longitude: float = Field(0.0, alias="lon")
    latitude: float = Field(0.0, alias="lat")


class Condition(WireModel):
    """One weather condition reported for the location."""

    condition_id: int = Field(0, alias="id")
    category: str = Field("", alias="main")
    description: str = ""
    icon_code: str = Field("", alias="icon")

    @property
    def is_day(self) -> bool:
        """Check if this icon represents daytime conditions.

        Returns:
            True for daytime, False for nighttime
        """
        return not self.icon_code.endswith("n")

    @property
    def is_clear(self) -> bool:
        """Check if this condition represents clear weather.

        Returns:
            True for clear sky conditions
        """
        return self.condition_id == 800

    @property
    def is_rain(self) -> bool:
        """Check if this condition represents rain or drizzle.

        Returns:
            True for rain conditions
        """
        return 300 <= self.condition_id < 600

    @property
    def is_snow(self) -> bool:
        """Check if this condition represents snow."""
        return 600 <= self.condition_id < 700


class Temperature(WireModel):
    """Temperatures in Kelvin, as OpenWeatherMap reports them by default."""

    current: float = Field(0.0, alias="temp")
    feels_like: float = 0.0
    min: float = Field(0.0, alias="temp_min")
    max: float = Field(0.0, alias="temp_max")

    @property
    def range(self) -> float:
        """Spread between the max and min temperatures."""
        return self.max - self.min

    @property
    def current_celsius(self) -> float:
        return UnitConverter.kelvin_to_celsius(self.current)


class Wind(WireModel):
    """Wind speed and bearing."""

    speed_meters_per_second: float = Field(0.0, alias="speed")
    direction_degrees: int = Field(0, alias="deg")
    gust_meters_per_second: float = Field(0.0, alias="gust")

    @property
    def cardinal_direction(self) -> str:
        """16-point compass direction the wind blows from."""
        return UnitConverter.deg_to_cardinal(self.direction_degrees)

    @property
    def beaufort(self) -> int:
        """Beaufort force for the sustained speed."""
        return UnitConverter.beaufort_from_speed(
            UnitConverter.mps_to_mph(self.speed_meters_per_second)
        )


class Precipitation(WireModel):
    """Rain or snow volume in millimetres."""

    last_hour: float = Field(0.0, alias="1h")
    last_three_hours: float = Field(0.0, alias="3h")

    @property
    def has_any(self) -> bool:
        return self.last_hour > 0 or self.last_three_hours > 0


# ─────────────────────────── composite blocks ────────────────────────────────


class RegionInfo(TimeStampModel):
    """Country and sun times for the location."""

    country_code: str = Field("", alias="country")
    sunrise: datetime | None = None
    sunset: datetime | None = None

    _validate_sunrise = TimeStampModel.timestamp_validator("sunrise")
    _validate_sunset = TimeStampModel.timestamp_validator("sunset")

    @property
    def daylight_hours(self) -> float:
        """Calculate the number of daylight hours.

        Returns:
            Hours of daylight as a float, 0.0 when either time is missing
        """
        if self.sunrise is None or self.sunset is None:
            return 0.0
        delta = self.sunset - self.sunrise
        return delta.total_seconds() / 3600


# ─────────────────────────── top-level response ──────────────────────────────


class WeatherReport(TimeStampModel):
    """Current weather for one location, decoded from ``GET /weather``.

    The ``main`` and ``clouds`` blocks are split across the value objects
    and scalar fields they describe, so ``pressure_hpa`` and
    ``humidity_percent`` are read from ``main`` alongside ``temperature``.
    Conditions keep the order the service sent them in.
    """

    location_id: int = Field(0, alias="id")
    location_name: str = Field("", alias="name")
    observed_at: datetime | None = Field(None, alias="dt")
    visibility_meters: int = Field(0, alias="visibility")
    timezone_offset_seconds: int = Field(0, alias="timezone")
    coordinates: Coordinates = Field(default_factory=Coordinates, alias="coord")
    conditions: tuple[Condition, ...] = Field((), alias="weather")
    temperature: Temperature = Field(default_factory=Temperature, alias="main")
    pressure_hpa: int = Field(0, validation_alias=AliasPath("main", "pressure"))
    humidity_percent: int = Field(0, validation_alias=AliasPath("main", "humidity"))
    wind: Wind = Field(default_factory=Wind)
    cloud_coverage_percent: int = Field(0, validation_alias=AliasPath("clouds", "all"))
    rain: Precipitation = Field(default_factory=Precipitation)
    snow: Precipitation = Field(default_factory=Precipitation)
    region: RegionInfo = Field(default_factory=RegionInfo, alias="sys")

    _validate_observed_at = TimeStampModel.timestamp_validator("observed_at")

    @field_validator("conditions", mode="before")
    @classmethod
    def null_condition_is_empty(cls, v: Any) -> Any:
        if isinstance(v, list):
            return [{} if item is None else item for item in v]
        return v

    @property
    def primary_condition(self) -> Condition | None:
        """Get the primary weather condition.

        Returns:
            First weather condition in the list or None if not available
        """
        return self.conditions[0] if self.conditions else None

    def observed_at_local(self, timezone_name: str = "UTC") -> datetime | None:
        """Observation time converted to the named timezone."""
        if self.observed_at is None:
            return None
        return TimeUtils.to_local_datetime(self.observed_at, timezone_name)
