"""API URL configuration."""
from __future__ import annotations

from django.urls import path

from weather_summary.api.views import WeatherSummaryView

urlpatterns = [
    path("weather-summary", WeatherSummaryView.as_view(), name="weather-summary"),
]
