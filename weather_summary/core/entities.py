from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Location:
    """Coordinates a summary is computed for.

    ``resolved_name`` is the display name returned by the geocoder and is
    ``None`` whenever the caller supplied explicit coordinates.
    """

    latitude: float
    longitude: float
    resolved_name: Optional[str] = None


@dataclass(frozen=True)
class Observation:
    """Current conditions in metric units.

    - temperature in Celsius
    - wind speed in kilometres per hour
    - precipitation in millimetres
    - weather code as a WMO present-weather integer
    """

    temperature_c: float
    wind_speed_kph: float
    precipitation_mm: float = 0.0
    weather_code: int = 0


@dataclass(frozen=True)
class SummaryPolicy:
    """Switches between the basic and the precipitation-aware behaviour."""

    precipitation_aware: bool = True
    echo_resolved_name: bool = True


__all__ = ["Location", "Observation", "SummaryPolicy"]
