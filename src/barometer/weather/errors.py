"""Exception classes for OpenWeatherMap client interactions.

This module defines the hierarchy of exception classes raised by the
client. Each failure carries the exception that caused it, both as
``original_error`` and as ``__cause__``.
"""

from __future__ import annotations

from typing import Optional


class WeatherClientError(Exception):
    """Error while building, sending or decoding an OpenWeatherMap request."""

    def __init__(
        self, message: str, original_error: Optional[BaseException] = None
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message
            original_error: The exception that caused this one, if any
        """
        super().__init__(message)
        self.message: str = message
        self.original_error: Optional[BaseException] = original_error


class RequestBuildError(WeatherClientError):
    """Raised when a request cannot be built (bad base URL or body)."""

    pass


class TransportError(WeatherClientError):
    """Raised when a network issue prevents API communication."""

    @property
    def is_timeout(self) -> bool:
        """Check if the round trip exceeded the configured timeout."""
        return False


class RequestTimeoutError(TransportError):
    """Raised when the request does not complete within the timeout."""

    @property
    def is_timeout(self) -> bool:
        return True


class DecodeError(WeatherClientError):
    """Raised when a response body or timestamp token cannot be decoded."""

    pass
