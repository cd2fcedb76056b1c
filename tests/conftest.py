from __future__ import annotations

import pytest

from weather_summary.core.cache import SummaryCache
from weather_summary.core.entities import SummaryPolicy
from weather_summary.core.providers.geocoding import OpenMeteoGeocoder
from weather_summary.core.providers.openmeteo import OpenMeteoProvider
from weather_summary.core.services.summary_service import WeatherSummaryService


GEOCODING_URL = "https://geocoding.test/v1/search"
FORECAST_URL = "https://forecast.test/v1/forecast"


class TimeController:
    def __init__(self) -> None:
        self.now = 1000.0

    def advance(self, seconds: float) -> None:
        self.now += seconds

    def __call__(self) -> float:
        return self.now


@pytest.fixture()
def clock() -> TimeController:
    return TimeController()


@pytest.fixture()
def make_service(clock):
    def _make(policy: SummaryPolicy | None = None, ttl: float = 60.0) -> WeatherSummaryService:
        return WeatherSummaryService(
            geocoder=OpenMeteoGeocoder(base_url=GEOCODING_URL),
            provider=OpenMeteoProvider(base_url=FORECAST_URL),
            cache=SummaryCache(ttl=ttl, time_func=clock),
            policy=policy,
        )

    return _make
