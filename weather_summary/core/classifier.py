"""Map current readings to a two-word summary such as ``"Mild + Breezy"``."""
from __future__ import annotations

from typing import Optional, Sequence, Tuple


# (inclusive lower bound, word), checked in order
TEMPERATURE_WORDS: Sequence[Tuple[float, str]] = (
    (30.0, "Hot"),
    (22.0, "Warm"),
    (15.0, "Mild"),
    (8.0, "Cool"),
)
COLDEST_WORD = "Cold"

WIND_WORDS: Sequence[Tuple[float, str]] = (
    (30.0, "Windy"),
    (15.0, "Breezy"),
)
CALMEST_WORD = "Calm"

# WMO present-weather bands (inclusive), checked high to low
PRECIPITATION_BANDS: Sequence[Tuple[int, int, str]] = (
    (95, 99, "Thunderstorm"),
    (85, 86, "Snow"),  # snow showers
    (80, 82, "Rain"),  # rain showers
    (71, 77, "Snow"),
    (51, 67, "Rain"),  # drizzle and rain
)
MEASURED_PRECIPITATION_LABEL = "Rain"

SEPARATOR = " + "


def temperature_word(temp_c: float) -> str:
    for threshold, word in TEMPERATURE_WORDS:
        if temp_c >= threshold:
            return word
    return COLDEST_WORD


def wind_word(wind_kph: float) -> str:
    for threshold, word in WIND_WORDS:
        if wind_kph >= threshold:
            return word
    return CALMEST_WORD


def precipitation_label(weather_code: int) -> Optional[str]:
    """Return the precipitation label for a weather code, if it has one."""
    for low, high, label in PRECIPITATION_BANDS:
        if low <= weather_code <= high:
            return label
    return None


def classify(
    temp_c: float,
    wind_kph: float,
    weather_code: int = 0,
    precip_mm: float = 0.0,
    *,
    precipitation_aware: bool = True,
) -> str:
    """Build the summary label.

    With ``precipitation_aware`` a precipitation band code or strictly
    positive ``precip_mm`` replaces the wind word and leads the label.
    Otherwise the label is always temperature plus wind.
    """
    if precipitation_aware:
        label = precipitation_label(weather_code)
        if label is None and precip_mm > 0:
            label = MEASURED_PRECIPITATION_LABEL
        if label is not None:
            return SEPARATOR.join((label, temperature_word(temp_c)))
    return SEPARATOR.join((temperature_word(temp_c), wind_word(wind_kph)))


__all__ = ["classify", "precipitation_label", "temperature_word", "wind_word"]
