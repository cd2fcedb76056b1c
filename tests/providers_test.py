from __future__ import annotations

import pytest
import requests

from weather_summary.core.entities import Location, Observation
from weather_summary.core.errors import UpstreamFailure
from weather_summary.core.providers.geocoding import OpenMeteoGeocoder
from weather_summary.core.providers.openmeteo import OpenMeteoProvider


GEOCODING_URL = "https://geocoding.test/v1/search"
FORECAST_URL = "https://forecast.test/v1/forecast"


def test_geocoder_returns_first_result(requests_mock):
    requests_mock.get(
        GEOCODING_URL,
        json={
            "results": [
                {"latitude": 50.08804, "longitude": 14.42076, "name": "Prague"},
                {"latitude": 35.3, "longitude": -95.0, "name": "Prague"},
            ]
        },
    )

    location = OpenMeteoGeocoder(base_url=GEOCODING_URL).geocode("prague")

    assert location == Location(latitude=50.08804, longitude=14.42076, resolved_name="Prague")
    query = requests_mock.last_request.qs
    assert query["name"] == ["prague"]
    assert query["count"] == ["1"]
    assert query["language"] == ["en"]
    assert requests_mock.last_request.headers["Accept"] == "application/json"


def test_geocoder_result_without_name(requests_mock):
    requests_mock.get(GEOCODING_URL, json={"results": [{"latitude": 50.08, "longitude": 14.43}]})

    location = OpenMeteoGeocoder(base_url=GEOCODING_URL).geocode("Prague")

    assert location.resolved_name is None


@pytest.mark.parametrize("payload", [{}, {"results": []}, {"generationtime_ms": 0.5}])
def test_geocoder_no_match(requests_mock, payload):
    requests_mock.get(GEOCODING_URL, json=payload)

    assert OpenMeteoGeocoder(base_url=GEOCODING_URL).geocode("Atlantis") is None


def test_geocoder_error_status(requests_mock):
    requests_mock.get(GEOCODING_URL, status_code=503, text="unavailable")

    with pytest.raises(UpstreamFailure) as excinfo:
        OpenMeteoGeocoder(base_url=GEOCODING_URL).geocode("Prague")

    assert excinfo.value.detail == "Geocoding failed: 503"


def test_geocoder_network_error(requests_mock):
    requests_mock.get(GEOCODING_URL, exc=requests.ConnectionError("connection refused"))

    with pytest.raises(UpstreamFailure) as excinfo:
        OpenMeteoGeocoder(base_url=GEOCODING_URL).geocode("Prague")

    assert "connection refused" in excinfo.value.detail


@pytest.mark.parametrize(
    "payload",
    [
        {"results": [{"name": "Prague"}]},
        {"results": ["Prague"]},
        {"results": [{"latitude": "north", "longitude": 14.4}]},
    ],
)
def test_geocoder_malformed_result(requests_mock, payload):
    requests_mock.get(GEOCODING_URL, json=payload)

    with pytest.raises(UpstreamFailure):
        OpenMeteoGeocoder(base_url=GEOCODING_URL).geocode("Prague")


def test_geocoder_invalid_json(requests_mock):
    requests_mock.get(GEOCODING_URL, text="<html>oops</html>")

    with pytest.raises(UpstreamFailure) as excinfo:
        OpenMeteoGeocoder(base_url=GEOCODING_URL).geocode("Prague")

    assert excinfo.value.detail == "Geocoding failed: invalid json"


def test_openmeteo_current_normalization(requests_mock):
    requests_mock.get(
        FORECAST_URL,
        json={
            "current": {
                "time": "2024-05-01T12:00",
                "temperature_2m": 18.4,
                "wind_speed_10m": 21.6,
                "precipitation": 0.4,
                "weather_code": 61,
            }
        },
    )

    observation = OpenMeteoProvider(base_url=FORECAST_URL).current(50.08, 14.43)

    assert observation == Observation(
        temperature_c=18.4, wind_speed_kph=21.6, precipitation_mm=0.4, weather_code=61
    )
    query = requests_mock.last_request.qs
    assert query["latitude"] == ["50.08"]
    assert query["longitude"] == ["14.43"]
    assert query["current"] == ["temperature_2m,wind_speed_10m,precipitation,weather_code"]
    assert query["temperature_unit"] == ["celsius"]
    assert query["wind_speed_unit"] == ["kmh"]
    assert query["timezone"] == ["auto"]


def test_openmeteo_defaults_missing_precipitation_and_code(requests_mock):
    requests_mock.get(FORECAST_URL, json={"current": {"temperature_2m": 22.1, "wind_speed_10m": 12.3}})

    observation = OpenMeteoProvider(base_url=FORECAST_URL).current(50.08, 14.43)

    assert observation.precipitation_mm == 0.0
    assert observation.weather_code == 0


def test_openmeteo_legacy_current_weather(requests_mock):
    requests_mock.get(
        FORECAST_URL,
        json={"current_weather": {"temperature": 3.0, "windspeed": 18.0, "weathercode": 71}},
    )

    observation = OpenMeteoProvider(base_url=FORECAST_URL).current(1.0, 1.0)

    assert observation == Observation(temperature_c=3.0, wind_speed_kph=18.0)


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"hourly": {"time": []}},
        {"current": None},
    ],
)
def test_openmeteo_missing_current(requests_mock, payload):
    requests_mock.get(FORECAST_URL, json=payload)

    with pytest.raises(UpstreamFailure) as excinfo:
        OpenMeteoProvider(base_url=FORECAST_URL).current(1.0, 1.0)

    assert excinfo.value.detail == "Missing current weather"


def test_openmeteo_incomplete_current(requests_mock):
    requests_mock.get(FORECAST_URL, json={"current": {"temperature_2m": 5.0}})

    with pytest.raises(UpstreamFailure):
        OpenMeteoProvider(base_url=FORECAST_URL).current(1.0, 1.0)


def test_openmeteo_error_status(requests_mock):
    requests_mock.get(FORECAST_URL, status_code=500, text="server error")

    with pytest.raises(UpstreamFailure) as excinfo:
        OpenMeteoProvider(base_url=FORECAST_URL).current(1.0, 1.0)

    assert excinfo.value.detail == "Weather failed: 500"
    assert requests_mock.call_count == 1


def test_openmeteo_timeout(requests_mock):
    requests_mock.get(FORECAST_URL, exc=requests.Timeout("read timed out"))

    with pytest.raises(UpstreamFailure):
        OpenMeteoProvider(base_url=FORECAST_URL).current(1.0, 1.0)
