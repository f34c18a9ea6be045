"""Common utility functions and helpers for the barometer package."""

from barometer.utils.time import TimeUtils

__all__ = [
    "TimeUtils",
]
