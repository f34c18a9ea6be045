"""Tests for weather report models and response parsing.

These tests verify that:
1. The reference payload decodes to exactly the expected values
2. Missing, null and unknown fields never cause a failure
3. Timestamp fields only accept integer epoch seconds
4. Decoded reports are immutable
"""

import json
from datetime import UTC, datetime
from typing import Any

import pytest
from pydantic import ValidationError

from barometer.weather.models import (
    Condition,
    Coordinates,
    Precipitation,
    RegionInfo,
    Temperature,
    WeatherReport,
    Wind,
)


def test_reference_payload_fields(austin_report: WeatherReport) -> None:
    wx = austin_report

    assert wx.location_id == 4671654
    assert wx.location_name == "Austin"
    assert wx.observed_at == datetime.fromtimestamp(1511561700, tz=UTC)
    assert wx.visibility_meters == 11265
    assert wx.coordinates == Coordinates(longitude=-97.74, latitude=30.27)
    assert wx.conditions == (
        Condition(
            condition_id=800, category="Clear", description="clear sky", icon_code="01d"
        ),
    )
    assert wx.temperature.current == 296.82
    assert wx.temperature.min == 296.15
    assert wx.temperature.max == 298.15
    assert wx.pressure_hpa == 1012
    assert wx.humidity_percent == 25
    assert wx.wind == Wind(
        speed_meters_per_second=6.2, direction_degrees=200, gust_meters_per_second=9.3
    )
    assert wx.cloud_coverage_percent == 1
    assert wx.region.country_code == "US"
    assert wx.region.sunrise == datetime.fromtimestamp(1511528705, tz=UTC)
    assert wx.region.sunset == datetime.fromtimestamp(1511566248, tz=UTC)


def test_reference_payload_equals_constructed_report(
    austin_report: WeatherReport,
) -> None:
    expected = WeatherReport(
        location_id=4671654,
        location_name="Austin",
        observed_at=1511561700,
        visibility_meters=11265,
        coordinates=Coordinates(longitude=-97.74, latitude=30.27),
        conditions=[
            Condition(
                condition_id=800,
                category="Clear",
                description="clear sky",
                icon_code="01d",
            )
        ],
        temperature=Temperature(current=296.82, min=296.15, max=298.15),
        pressure_hpa=1012,
        humidity_percent=25,
        wind=Wind(
            speed_meters_per_second=6.2,
            direction_degrees=200,
            gust_meters_per_second=9.3,
        ),
        cloud_coverage_percent=1,
        region=RegionInfo(country_code="US", sunrise=1511528705, sunset=1511566248),
    )
    assert austin_report == expected


def test_absent_precipitation_is_zero(austin_report: WeatherReport) -> None:
    assert austin_report.snow == Precipitation()
    assert austin_report.snow.last_three_hours == 0.0
    assert austin_report.rain.has_any is False


def test_precipitation_volumes() -> None:
    wx = WeatherReport.model_validate({"rain": {"1h": 0.4, "3h": 1.25}, "snow": {"3h": 2}})
    assert wx.rain.last_hour == 0.4
    assert wx.rain.last_three_hours == 1.25
    assert wx.snow.last_three_hours == 2.0
    assert wx.snow.has_any is True


def test_empty_object_decodes_to_zero_values() -> None:
    wx = WeatherReport.model_validate_json("{}")

    assert wx.location_id == 0
    assert wx.location_name == ""
    assert wx.observed_at is None
    assert wx.conditions == ()
    assert wx.temperature == Temperature()
    assert wx.pressure_hpa == 0
    assert wx.cloud_coverage_percent == 0
    assert wx.region.sunrise is None
    assert wx.primary_condition is None
    assert wx.region.daylight_hours == 0.0


def test_null_fields_are_treated_as_absent() -> None:
    wx = WeatherReport.model_validate_json(
        '{"name": null, "dt": null, "main": {"temp": null, "pressure": null},'
        ' "sys": {"country": "US", "sunrise": null}, "weather": [{"id": 500, "icon": null}]}'
    )
    assert wx.location_name == ""
    assert wx.observed_at is None
    assert wx.temperature.current == 0.0
    assert wx.pressure_hpa == 0
    assert wx.region.country_code == "US"
    assert wx.region.sunrise is None
    assert wx.conditions[0].icon_code == ""


def test_unknown_fields_are_ignored(austin_raw: dict[str, Any]) -> None:
    austin_raw["unexpected"] = {"nested": [1, 2, 3]}
    austin_raw["main"]["sea_level"] = 1013
    wx = WeatherReport.model_validate(austin_raw)
    assert wx.location_name == "Austin"
    assert not hasattr(wx, "unexpected")


def test_conditions_keep_received_order() -> None:
    wx = WeatherReport.model_validate(
        {
            "weather": [
                {"id": 741, "main": "Fog", "description": "fog", "icon": "50n"},
                {"id": 500, "main": "Rain", "description": "light rain", "icon": "10n"},
            ]
        }
    )
    assert [c.category for c in wx.conditions] == ["Fog", "Rain"]
    assert wx.primary_condition is not None
    assert wx.primary_condition.category == "Fog"
    assert wx.conditions[1].is_rain is True
    assert wx.conditions[0].is_day is False


@pytest.mark.parametrize(
    "payload",
    [
        {"dt": "1511561700"},
        {"dt": "2017-11-24T22:15:00Z"},
        {"dt": 1511561700.5},
        {"dt": True},
        {"sys": {"sunrise": "abc"}},
        {"sys": {"sunset": 1.0}},
    ],
)
def test_timestamps_must_be_integers(payload: dict[str, Any]) -> None:
    with pytest.raises(ValidationError):
        WeatherReport.model_validate_json(json.dumps(payload))


def test_wrong_shape_fails_validation() -> None:
    with pytest.raises(ValidationError):
        WeatherReport.model_validate_json('{"weather": "clear"}')


def test_report_is_immutable(austin_report: WeatherReport) -> None:
    with pytest.raises(ValidationError):
        austin_report.location_name = "Dallas"  # type: ignore[misc]
    with pytest.raises(ValidationError):
        austin_report.wind.direction_degrees = 10  # type: ignore[misc]


def test_region_daylight_hours(austin_report: WeatherReport) -> None:
    hours = austin_report.region.daylight_hours
    assert hours == pytest.approx((1511566248 - 1511528705) / 3600)


def test_wind_and_temperature_helpers(austin_report: WeatherReport) -> None:
    assert austin_report.wind.cardinal_direction == "SSW"
    assert austin_report.wind.beaufort == 4
    assert austin_report.temperature.range == pytest.approx(2.0)
    assert austin_report.temperature.current_celsius == 23.67


def test_observed_at_local(austin_report: WeatherReport) -> None:
    local = austin_report.observed_at_local("America/Chicago")
    assert local is not None
    assert local.hour == 16
    assert local == austin_report.observed_at
    assert WeatherReport().observed_at_local("America/Chicago") is None


def test_condition_flags() -> None:
    assert Condition(condition_id=800, icon_code="01d").is_clear is True
    assert Condition(condition_id=601).is_snow is True
    assert Condition(condition_id=301).is_rain is True
    assert Condition(condition_id=800).is_rain is False


def test_dump_then_validate_round_trip(austin_report: WeatherReport) -> None:
    restored = WeatherReport.model_validate(austin_report.model_dump())
    assert restored == austin_report
    assert restored.observed_at == datetime(2017, 11, 24, 22, 15, tzinfo=UTC)


def test_build_report_from_datetimes() -> None:
    sunrise = datetime(2017, 11, 24, 13, 5, 5, tzinfo=UTC)
    wx = WeatherReport(
        location_name="Austin",
        observed_at=datetime(2017, 11, 24, 22, 15, tzinfo=UTC),
        region=RegionInfo(country_code="US", sunrise=sunrise),
    )
    assert wx.observed_at is not None
    assert wx.observed_at.timestamp() == 1511561700
    assert wx.region.sunrise == sunrise


def test_naive_datetime_is_rejected() -> None:
    with pytest.raises(ValidationError):
        WeatherReport(observed_at=datetime(2017, 11, 24, 22, 15))


def test_null_condition_decodes_to_zero_value() -> None:
    wx = WeatherReport.model_validate_json(
        '{"weather": [null, {"id": 701, "main": "Mist"}]}'
    )
    assert wx.conditions == (Condition(), Condition(condition_id=701, category="Mist"))
