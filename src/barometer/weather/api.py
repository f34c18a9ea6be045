"""OpenWeatherMap current weather API client."""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Callable, Mapping
from contextlib import closing
from datetime import timedelta
from typing import TYPE_CHECKING, Any, Final, TypeVar
from urllib.parse import urlsplit, urlunsplit

import requests
from pydantic import BaseModel, ValidationError
from urllib3.exceptions import ReadTimeoutError

from barometer.constants import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, DEFAULT_USER_AGENT
from barometer.weather.errors import (
    DecodeError,
    RequestBuildError,
    RequestTimeoutError,
    TransportError,
)
from barometer.weather.models import WeatherReport

if TYPE_CHECKING:
    from barometer.settings.user import ClientSettings

logger: Final = logging.getLogger(__name__)

WEATHER_PATH: Final = "/weather"

_API_KEY_PARAM: Final = re.compile(r"(APPID=)[^&]*")

M = TypeVar("M", bound=BaseModel)


class OpenWeatherMapClient:
    """OpenWeatherMap client for the current weather endpoint.

    Builds authenticated requests, sends them and decodes the JSON body
    into typed models. The client only holds configuration: every call
    opens its own session, so one instance can serve concurrent callers.

    ``base_url``, ``user_agent`` and ``timeout`` may be reassigned after
    construction (e.g. to point at a local test server). The API key is
    fixed for the lifetime of the client.

    HTTP status codes are not inspected; an error payload is decoded like
    any other body.
    """

    def __init__(
        self,
        api_key: str,
        session_factory: Callable[[], requests.Session] = requests.Session,
    ) -> None:
        """Initialize the client.

        Args:
            api_key: OpenWeatherMap API key, sent as the APPID parameter
            session_factory: Callable returning a fresh session per request
        """
        self._api_key = api_key
        self.base_url: str = DEFAULT_BASE_URL
        self.user_agent: str = DEFAULT_USER_AGENT
        self.timeout: timedelta | float = DEFAULT_TIMEOUT
        self.session_factory = session_factory

    @classmethod
    def from_settings(cls, settings: ClientSettings) -> OpenWeatherMapClient:
        """Create a client configured from loaded settings."""
        client = cls(settings.api_key)
        client.base_url = settings.base_url
        client.user_agent = settings.user_agent
        client.timeout = settings.timeout
        return client

    @property
    def api_key(self) -> str:
        return self._api_key

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(base_url={self.base_url!r}, "
            f"user_agent={self.user_agent!r}, timeout={self.timeout!r})"
        )

    # ── lookups ─────────────────────────────────────────────────────────────

    def by_city_name(self, city: str) -> WeatherReport:
        """Get current weather for a city name.

        The service decides which location an ambiguous name refers to.

        Args:
            city: City name, e.g. "Austin" or "Austin,TX,US"

        Returns:
            Decoded WeatherReport

        Raises:
            RequestBuildError: When the base URL is malformed
            TransportError: When the round trip fails or times out
            DecodeError: When the body is not a valid weather payload
        """
        return self._current_weather({"q": city})

    def by_zip_code(
        self, zip_code: str, country_code: str | None = None
    ) -> WeatherReport:
        """Get current weather for a ZIP or postal code.

        Args:
            zip_code: Postal code, e.g. "78704"
            country_code: Optional ISO 3166 country code appended as "zip,cc"

        Returns:
            Decoded WeatherReport
        """
        value = f"{zip_code},{country_code}" if country_code else zip_code
        return self._current_weather({"zip": value})

    def by_coordinates(self, lat: float, lon: float) -> WeatherReport:
        """Get current weather for a latitude/longitude pair.

        Args:
            lat: Latitude in decimal degrees
            lon: Longitude in decimal degrees

        Returns:
            Decoded WeatherReport
        """
        return self._current_weather({"lat": f"{lat:f}", "lon": f"{lon:f}"})

    def _current_weather(self, query: Mapping[str, str]) -> WeatherReport:
        params = {**query, "APPID": self._api_key}
        request = self.build_request("GET", WEATHER_PATH, params=params)
        return self.execute(request, WeatherReport)

    # ── request pipeline ────────────────────────────────────────────────────

    def build_request(
        self,
        method: str,
        path: str,
        body: Any = None,
        params: Mapping[str, str] | None = None,
    ) -> requests.PreparedRequest:
        """Build a request against the configured base URL.

        Args:
            method: HTTP method
            path: Path relative to the base URL
            body: Optional JSON-serializable request body
            params: Optional query parameters

        Returns:
            Prepared request, not yet sent

        Raises:
            RequestBuildError: When the base URL is malformed or the body
                cannot be serialized
        """
        url = self._resolve(path)

        headers = {"Accept": "application/json"}
        if self.user_agent:
            headers["User-Agent"] = self.user_agent

        data: str | None = None
        if body is not None:
            try:
                data = json.dumps(body)
            except (TypeError, ValueError) as exc:
                raise RequestBuildError(
                    f"Could not serialize request body: {exc}", exc
                ) from exc
            headers["Content-Type"] = "application/json"

        try:
            prepared = requests.Request(
                method, url, headers=headers, params=params, data=data
            ).prepare()
        except (requests.RequestException, ValueError) as exc:
            raise RequestBuildError(f"Could not build request: {exc}", exc) from exc

        logger.debug("Prepared %s %s", prepared.method, _redact(prepared.url))
        return prepared

    def execute(self, request: requests.PreparedRequest, model: type[M]) -> M:
        """Send a prepared request and decode the JSON body into ``model``.

        The response is always closed, whether decoding succeeds or not.

        Args:
            request: Request returned by build_request
            model: Pydantic model the body is validated against

        Returns:
            Instance of ``model``

        Raises:
            RequestTimeoutError: When the timeout elapses
            TransportError: On any other network failure
            DecodeError: When the body is not valid JSON for ``model``
        """
        timeout = self._timeout_seconds()
        try:
            with closing(self.session_factory()) as session:
                with closing(
                    session.send(request, timeout=timeout, stream=True)
                ) as response:
                    body = response.content
                    logger.debug(
                        "Received HTTP %s (%d bytes) for %s",
                        response.status_code,
                        len(body),
                        _redact(request.url),
                    )
                    return self._decode(body, model)
        except requests.Timeout as exc:
            raise RequestTimeoutError(
                f"Request timed out after {timeout:g}s", exc
            ) from exc
        except requests.RequestException as exc:
            if _is_body_read_timeout(exc):
                raise RequestTimeoutError(
                    f"Request timed out after {timeout:g}s", exc
                ) from exc
            raise TransportError(f"Network error: {exc}", exc) from exc

    # Private helper methods
    def _resolve(self, path: str) -> str:
        """Join ``path`` under the base URL's own path."""
        try:
            parts = urlsplit(self.base_url)
            parts.port  # raises ValueError for a non-numeric port
        except (TypeError, ValueError) as exc:
            raise RequestBuildError(
                f"Malformed base URL {self.base_url!r}: {exc}", exc
            ) from exc

        if parts.scheme not in ("http", "https") or not parts.hostname:
            raise RequestBuildError(f"Malformed base URL {self.base_url!r}")

        joined = parts.path.rstrip("/") + "/" + path.lstrip("/")
        return urlunsplit(parts._replace(path=joined))

    def _timeout_seconds(self) -> float:
        if isinstance(self.timeout, timedelta):
            return self.timeout.total_seconds()
        return float(self.timeout)

    @staticmethod
    def _decode(body: bytes, model: type[M]) -> M:
        try:
            return model.model_validate_json(body)
        except ValidationError as exc:
            raise DecodeError(
                f"Could not decode response as {model.__name__}: {exc}", exc
            ) from exc


def _redact(url: str | None) -> str:
    return _API_KEY_PARAM.sub(r"\1***", url or "")


def _is_body_read_timeout(exc: requests.RequestException) -> bool:
    # requests reports a stalled body read as ConnectionError(ReadTimeoutError)
    return isinstance(exc, requests.ConnectionError) and any(
        isinstance(arg, ReadTimeoutError) for arg in exc.args
    )
