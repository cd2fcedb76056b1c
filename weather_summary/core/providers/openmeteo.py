from __future__ import annotations

import math
from typing import Optional

from ..entities import Observation
from ..errors import UpstreamFailure
from .base import HttpProvider


CURRENT_FIELDS = ("temperature_2m", "wind_speed_10m", "precipitation", "weather_code")


class OpenMeteoProvider(HttpProvider):
    """Current conditions from the Open-Meteo forecast endpoint."""

    name = "open-meteo"
    failure_prefix = "Weather failed"
    base_url = "https://api.open-meteo.com/v1/forecast"

    def __init__(self, base_url: Optional[str] = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.base_url = base_url or self.base_url

    def current(self, latitude: float, longitude: float) -> Observation:
        params = {
            "latitude": str(latitude),
            "longitude": str(longitude),
            "current": ",".join(CURRENT_FIELDS),
            "temperature_unit": "celsius",
            "wind_speed_unit": "kmh",
            "timezone": "auto",
        }
        data = self._get_json(self.base_url, params)
        if not isinstance(data, dict):
            raise UpstreamFailure("Missing current weather")

        current = data.get("current")
        if isinstance(current, dict):
            return self._observation(
                current.get("temperature_2m"),
                current.get("wind_speed_10m"),
                precipitation=current.get("precipitation"),
                weather_code=current.get("weather_code"),
            )

        # Legacy shape never carries precipitation or a weather code.
        legacy = data.get("current_weather")
        if isinstance(legacy, dict):
            self._log.debug("Using legacy current_weather section for %s,%s", latitude, longitude)
            return self._observation(legacy.get("temperature"), legacy.get("windspeed"))

        raise UpstreamFailure("Missing current weather")

    # helpers ------------------------------------------------------------
    def _observation(
        self,
        temperature: object,
        wind_speed: object,
        *,
        precipitation: object = None,
        weather_code: object = None,
    ) -> Observation:
        temperature_c = _safe_float(temperature)
        wind_speed_kph = _safe_float(wind_speed)
        if temperature_c is None or wind_speed_kph is None:
            raise UpstreamFailure("Incomplete current weather")
        return Observation(
            temperature_c=temperature_c,
            wind_speed_kph=wind_speed_kph,
            precipitation_mm=_safe_float(precipitation) or 0.0,
            weather_code=int(_safe_float(weather_code) or 0),
        )


def _safe_float(value: Optional[object]) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


__all__ = ["OpenMeteoProvider"]
