"""REST API view for weather summaries."""
from __future__ import annotations

from functools import lru_cache

from django.conf import settings
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from weather_summary.app.api import SummaryAPI
from weather_summary.core.cache import SummaryCache
from weather_summary.core.entities import SummaryPolicy
from weather_summary.core.providers.base import RequestConfig
from weather_summary.core.providers.geocoding import OpenMeteoGeocoder
from weather_summary.core.providers.openmeteo import OpenMeteoProvider
from weather_summary.core.services.summary_service import WeatherSummaryService


def build_summary_service() -> WeatherSummaryService:
    request_config = RequestConfig(timeout=settings.WEATHER_HTTP_TIMEOUT)
    return WeatherSummaryService(
        geocoder=OpenMeteoGeocoder(base_url=settings.WEATHER_GEOCODING_URL, request_config=request_config),
        provider=OpenMeteoProvider(base_url=settings.WEATHER_FORECAST_URL, request_config=request_config),
        cache=SummaryCache(ttl=settings.WEATHER_SUMMARY_CACHE_TTL),
        policy=SummaryPolicy(
            precipitation_aware=settings.WEATHER_SUMMARY_PRECIPITATION_AWARE,
            echo_resolved_name=settings.WEATHER_SUMMARY_ECHO_RESOLVED_NAME,
        ),
    )


@lru_cache(maxsize=1)
def get_summary_api() -> SummaryAPI:
    """Process-wide handler; owns the single summary cache."""
    return SummaryAPI(build_summary_service())


class WeatherSummaryView(APIView):
    """Summarize current weather for ``?city=`` or ``?lat=&lon=``."""

    authentication_classes: list = []
    permission_classes = [AllowAny]

    def get(self, request, *args, **kwargs):  # noqa: D401
        """Return the summary payload or a JSON error."""
        return self._respond(request)

    # Every other verb is answered by the handler with a JSON 405.
    def options(self, request, *args, **kwargs):
        return self._respond(request)

    def http_method_not_allowed(self, request, *args, **kwargs):
        return self._respond(request)

    def _respond(self, request) -> Response:
        result = get_summary_api().handle_request(request.method, request.query_params)
        return Response(result.payload, status=result.status_code)
