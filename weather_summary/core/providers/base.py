from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, Optional

import requests
from requests import Response

from ..errors import UpstreamFailure


logger = logging.getLogger(__name__)


@dataclass
class RequestConfig:
    # Passed straight to requests; None leaves the transport default.
    timeout: Optional[float] = 10.0


class HttpProvider:
    """Base class for the Open-Meteo clients.

    Every transport problem, non-2xx status or undecodable body surfaces as
    :class:`UpstreamFailure`. Requests are made exactly once.
    """

    name = "http"
    failure_prefix = "Request failed"

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        request_config: Optional[RequestConfig] = None,
    ) -> None:
        self.request_config = request_config or RequestConfig()
        self.session = session or requests.Session()
        self._log = logging.getLogger(f"{self.__module__}.{self.__class__.__name__}")
        self._testing_mode = os.environ.get("TESTING_MODE", "0") == "1"

    def _get_json(self, url: str, params: dict) -> Any:
        try:
            response = self.session.get(
                url,
                params=params,
                headers={"Accept": "application/json"},
                timeout=self.request_config.timeout,
            )
        except requests.RequestException as exc:
            self._log.warning("%s request to %s failed: %s", self.name, url, exc)
            raise UpstreamFailure(f"{self.failure_prefix}: {exc}") from exc
        self._log_response(response)
        self._handle_response(response)
        try:
            return response.json()
        except ValueError as exc:
            self._log.error("Failed to decode JSON from %s", url, exc_info=exc)
            raise UpstreamFailure(f"{self.failure_prefix}: invalid json") from exc

    def _handle_response(self, response: Response) -> Response:
        if not response.ok:
            self._log.warning("%s returned %s: %s", self.name, response.status_code, response.text[:200])
            raise UpstreamFailure(f"{self.failure_prefix}: {response.status_code}")
        return response

    def _log_response(self, response: Response) -> None:
        if not self._testing_mode:
            return
        logger.info(
            "%s response",
            self.name,
            extra={"url": response.url, "status": response.status_code, "body": response.text[:500]},
        )


__all__ = ["HttpProvider", "RequestConfig"]
