"""Framework-free HTTP surface for ``GET /weather-summary``.

The Django view and the tests both go through :class:`SummaryAPI`, so the
status codes and JSON bodies are decided in exactly one place.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping

from weather_summary.core.errors import MethodNotAllowed, UpstreamFailure, WeatherSummaryError
from weather_summary.core.services.summary_service import SummaryQuery, WeatherSummaryService


logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}


@dataclass
class Response:
    status_code: int
    payload: Dict[str, Any]
    headers: Mapping[str, str] = field(default_factory=lambda: dict(JSON_HEADERS))

    @property
    def body(self) -> str:
        return json.dumps(self.payload)


class SummaryAPI:
    """Validate the query, run the summary service, map errors to responses."""

    def __init__(self, service: WeatherSummaryService) -> None:
        self._service = service

    @property
    def service(self) -> WeatherSummaryService:
        return self._service

    def handle_request(self, method: str, query: Mapping[str, Any]) -> Response:
        try:
            if method.upper() != "GET":
                raise MethodNotAllowed(method)
            summary_query = SummaryQuery.from_params(query or {})
            payload = self._service.summarize(summary_query)
        except UpstreamFailure as exc:
            logger.warning("Upstream failure: %s", exc.detail)
            return Response(status_code=exc.status_code, payload=exc.as_payload())
        except WeatherSummaryError as exc:
            return Response(status_code=exc.status_code, payload=exc.as_payload())
        return Response(status_code=200, payload=payload)


__all__ = ["Response", "SummaryAPI"]
