"""Error hierarchy shared by the providers, the service and the HTTP layer."""
from __future__ import annotations

from typing import Dict


class WeatherSummaryError(RuntimeError):
    """Base error; every subclass knows its HTTP status and JSON body."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def as_payload(self) -> Dict[str, str]:
        return {"error": self.message}


class InvalidInput(WeatherSummaryError):
    """Raised when neither a city nor a usable coordinate pair was supplied."""

    status_code = 400

    def __init__(self, message: str = "Provide ?city=Name or ?lat=..&lon=..") -> None:
        super().__init__(message)


class MethodNotAllowed(WeatherSummaryError):
    status_code = 405

    def __init__(self, method: str = "") -> None:
        super().__init__("Method Not Allowed")
        self.method = method


class NotFound(WeatherSummaryError):
    """Raised when the geocoder has no match for the requested city."""

    status_code = 404

    def __init__(self, city: str) -> None:
        super().__init__(f"City not found: {city}")
        self.city = city


class UpstreamFailure(WeatherSummaryError):
    """Raised for transport errors, non-2xx statuses and unusable payloads."""

    status_code = 502

    def __init__(self, detail: str) -> None:
        super().__init__("Upstream failure")
        self.detail = detail

    def __str__(self) -> str:
        return self.detail

    def as_payload(self) -> Dict[str, str]:
        return {"error": self.message, "detail": self.detail}


__all__ = [
    "WeatherSummaryError",
    "InvalidInput",
    "MethodNotAllowed",
    "NotFound",
    "UpstreamFailure",
]
