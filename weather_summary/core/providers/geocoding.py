"""Open-Meteo geocoding client."""
from __future__ import annotations

import math
from typing import Optional

from ..entities import Location
from ..errors import UpstreamFailure
from .base import HttpProvider


class OpenMeteoGeocoder(HttpProvider):
    """Look up a city name and return the first match."""

    name = "open-meteo-geocoding"
    failure_prefix = "Geocoding failed"
    base_url = "https://geocoding-api.open-meteo.com/v1/search"

    def __init__(self, base_url: Optional[str] = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.base_url = base_url or self.base_url

    def geocode(self, city: str) -> Optional[Location]:
        """Return the best match for ``city`` or ``None`` when nothing matches."""
        params = {"name": city, "count": 1, "language": "en"}
        data = self._get_json(self.base_url, params)
        if not isinstance(data, dict):
            raise UpstreamFailure(f"{self.failure_prefix}: malformed response")

        results = data.get("results")
        if not results:
            return None
        if not isinstance(results, list) or not isinstance(results[0], dict):
            raise UpstreamFailure(f"{self.failure_prefix}: malformed response")

        first = results[0]
        latitude = _coordinate(first.get("latitude"))
        longitude = _coordinate(first.get("longitude"))
        if latitude is None or longitude is None:
            raise UpstreamFailure(f"{self.failure_prefix}: result without coordinates")
        return Location(latitude=latitude, longitude=longitude, resolved_name=first.get("name") or None)


def _coordinate(value: object) -> Optional[float]:
    if isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


__all__ = ["OpenMeteoGeocoder"]
