from __future__ import annotations

from typing import Any


class WeatherSensorError(Exception):
    """Base class for every error raised by the weather sensor."""


class ValidationError(WeatherSensorError):
    """A required configuration attribute is missing or has the wrong type."""

    def __init__(self, message: str, *, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


class WeatherAPIError(WeatherSensorError):
    """Base class for failures talking to the weather API."""


class TransportError(WeatherAPIError):
    """The request never produced an HTTP response (connection error, timeout)."""


class DecodeError(WeatherAPIError):
    """The response body is not JSON or does not have the expected shape."""


class UnexpectedStatusError(WeatherAPIError):
    """Non-200 response whose body lacks the ``code``/``message`` pair."""

    def __init__(self, message: str, *, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


class APIError(WeatherAPIError):
    """Non-200 response carrying an error code and message from the API."""

    def __init__(self, *, status_code: int, code: Any, message: Any, body: dict[str, Any]) -> None:
        super().__init__(f"error fetching weather info, code: {code}, message: {message}")
        self.status_code = status_code
        self.code = code
        self.message = message
        self.body = body


class DependencyError(WeatherSensorError):
    """The temperature sensor dependency is missing or its reading failed."""
