# src/barometer/utils/time.py
"""Time and date handling utilities."""

from __future__ import annotations

from datetime import UTC, datetime
from zoneinfo import ZoneInfo


class TimeUtils:
    """Time-related utility functions.

    OpenWeatherMap sends observation, sunrise and sunset times as integer
    seconds since the Unix epoch; these helpers keep the conversion in one
    place and always hand back timezone-aware values.
    """

    @staticmethod
    def epoch_to_datetime(timestamp: int) -> datetime:
        """Convert UNIX timestamp to UTC datetime with timezone information.

        Args:
            timestamp: UNIX timestamp (seconds since epoch)

        Returns:
            Timezone-aware datetime object in UTC
        """
        return datetime.fromtimestamp(timestamp, tz=UTC)

    @staticmethod
    def datetime_to_epoch(dt: datetime) -> int:
        """Convert datetime to epoch seconds.

        Args:
            dt: Datetime object (assumes UTC timezone if not specified)

        Returns:
            Epoch seconds as integer
        """
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=UTC)
        return int(dt.timestamp())

    @staticmethod
    def to_local_datetime(dt: datetime, timezone_name: str = "UTC") -> datetime:
        """Convert an aware datetime to the named timezone.

        Args:
            dt: Datetime to convert (naive values are taken as UTC)
            timezone_name: IANA timezone name

        Returns:
            Localized datetime object
        """
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=UTC)
        return dt.astimezone(ZoneInfo(timezone_name))
