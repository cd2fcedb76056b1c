"""Management command printing a summary through the same stack as the API."""
from __future__ import annotations

import json
from typing import Any

from django.core.management.base import BaseCommand, CommandError

from weather_summary.api.views import get_summary_api
from weather_summary.core.errors import UpstreamFailure, WeatherSummaryError
from weather_summary.core.services.summary_service import SummaryQuery


class Command(BaseCommand):
    help = "Print the current weather summary for a city or a coordinate pair"

    def add_arguments(self, parser) -> None:  # noqa: D401
        parser.add_argument("--city", type=str, help="City name")
        parser.add_argument("--lat", type=str, help="Latitude")
        parser.add_argument("--lon", type=str, help="Longitude")

    def handle(self, *args: Any, **options: Any) -> None:  # noqa: D401
        params = {"city": options.get("city"), "lat": options.get("lat"), "lon": options.get("lon")}
        try:
            query = SummaryQuery.from_params(params)
            payload = get_summary_api().service.summarize(query)
        except UpstreamFailure as exc:
            raise CommandError(f"{exc.message}: {exc.detail}") from exc
        except WeatherSummaryError as exc:
            raise CommandError(exc.message) from exc

        self.stdout.write(json.dumps(payload))
