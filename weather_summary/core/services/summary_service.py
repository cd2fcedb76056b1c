"""Read-through summary service: resolve, fetch, classify and cache."""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from ..cache import SummaryCache
from ..classifier import classify
from ..entities import Location, Observation, SummaryPolicy
from ..errors import InvalidInput, NotFound
from ..providers.geocoding import OpenMeteoGeocoder
from ..providers.openmeteo import OpenMeteoProvider


logger = logging.getLogger(__name__)

COORDINATE_PRECISION = 4


def parse_coordinate(raw: Any) -> Optional[float]:
    """Parse a query value into a finite float, or ``None``."""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, str):
        raw = raw.strip()
        if not raw:
            return None
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return None
    return value if math.isfinite(value) else None


def _normalize_coordinate(value: float) -> str:
    # Adding 0.0 folds -0.0 into 0.0 so both render the same way.
    return f"{round(value, COORDINATE_PRECISION) + 0.0:.{COORDINATE_PRECISION}f}"


def _coordinate_label(value: float) -> str:
    return str(int(value)) if value.is_integer() else repr(value)


@dataclass(frozen=True)
class SummaryQuery:
    """A validated inbound request."""

    city: str = ""
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    @classmethod
    def from_params(cls, params: Mapping[str, Any]) -> "SummaryQuery":
        city = str(params.get("city") or "").strip()
        latitude = parse_coordinate(params.get("lat"))
        longitude = parse_coordinate(params.get("lon"))
        query = cls(city=city, latitude=latitude, longitude=longitude)
        if not (query.city or query.has_coordinates):
            raise InvalidInput()
        return query

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    @property
    def cache_key(self) -> str:
        if self.has_coordinates:
            key = f"coord:{_normalize_coordinate(self.latitude)},{_normalize_coordinate(self.longitude)}"
            if self.city:
                key = f"{key}|city:{self.city.lower()}"
            return key
        return f"city:{self.city.lower()}"


class WeatherSummaryService:
    """Turn a :class:`SummaryQuery` into the public response payload."""

    def __init__(
        self,
        *,
        geocoder: OpenMeteoGeocoder,
        provider: OpenMeteoProvider,
        cache: SummaryCache,
        policy: Optional[SummaryPolicy] = None,
    ) -> None:
        self.geocoder = geocoder
        self.provider = provider
        self.cache = cache
        self.policy = policy or SummaryPolicy()

    # Public API ---------------------------------------------------------
    def resolve(
        self,
        city: str = "",
        latitude: Optional[float] = None,
        longitude: Optional[float] = None,
    ) -> Location:
        if parse_coordinate(latitude) is not None and parse_coordinate(longitude) is not None:
            return Location(latitude=float(latitude), longitude=float(longitude))
        if not city:
            raise InvalidInput()
        location = self.geocoder.geocode(city)
        if location is None:
            logger.info("No geocoding match for %r", city)
            raise NotFound(city)
        return location

    def fetch_observation(self, latitude: float, longitude: float) -> Observation:
        return self.provider.current(latitude, longitude)

    def summarize(self, query: SummaryQuery) -> Dict[str, Any]:
        cache_key = query.cache_key
        cached = self.cache.get(cache_key)
        if cached is not None:
            logger.debug("Summary cache hit for %s", cache_key)
            return cached

        logger.debug("Summary cache miss for %s", cache_key)
        location = self.resolve(query.city, query.latitude, query.longitude)
        observation = self.fetch_observation(location.latitude, location.longitude)
        payload = self._build_payload(query, location, observation)
        self.cache.put(cache_key, payload)
        return payload

    # Helpers ------------------------------------------------------------
    def _build_payload(self, query: SummaryQuery, location: Location, observation: Observation) -> Dict[str, Any]:
        summary = classify(
            observation.temperature_c,
            observation.wind_speed_kph,
            observation.weather_code,
            observation.precipitation_mm,
            precipitation_aware=self.policy.precipitation_aware,
        )
        payload: Dict[str, Any] = {
            "city": self._display_name(query, location),
            "lat": location.latitude,
            "lon": location.longitude,
            "temp_c": observation.temperature_c,
            "wind_kph": observation.wind_speed_kph,
        }
        if self.policy.precipitation_aware:
            payload["precip_mm"] = observation.precipitation_mm
            payload["weather_code"] = observation.weather_code
        payload["summary"] = summary
        return payload

    def _display_name(self, query: SummaryQuery, location: Location) -> str:
        if self.policy.echo_resolved_name and location.resolved_name:
            return location.resolved_name
        if query.city:
            return query.city
        return f"{_coordinate_label(location.latitude)},{_coordinate_label(location.longitude)}"


__all__ = ["SummaryQuery", "WeatherSummaryService", "parse_coordinate"]
