"""Tests for forecast screen formatters."""

import json
from datetime import UTC

import pytest

from weatherapp.ingest.schemas import parse_forecast
from weatherapp.models.forecast import ForecastSeries
from weatherapp.models.state import AppState, ViewState
from weatherapp.reporting.formatters import (
    background_url,
    day_label,
    format_view_json,
    format_view_text,
    hour_label,
    icon_url,
    unit_toggle_label,
)


@pytest.fixture
def series(owm_payload: dict) -> ForecastSeries:
    return parse_forecast(owm_payload)


class TestLabels:
    def test_hour_label(self, series: ForecastSeries):
        assert hour_label(series.samples[0], UTC) == "12:00"
        assert hour_label(series.samples[4], UTC) == "0:00"

    def test_day_label(self, series: ForecastSeries):
        assert day_label(series.samples[0], UTC) == "Wednesday, Feb 11"

    def test_icon_url(self):
        assert icon_url("13n") == "https://openweathermap.org/img/wn/13n@2x.png"

    def test_background_known_and_fallback(self):
        assert "tallinn-in-winter" in background_url("Snow")
        assert background_url("Mist") == background_url("Clear")
        assert background_url(None) == background_url("Clear")

    def test_unit_toggle_label(self):
        assert unit_toggle_label(True) == "Switch to °F"
        assert unit_toggle_label(False) == "Switch to °C"


class TestFormatViewText:
    def test_loading(self):
        assert format_view_text(AppState()) == "Loading..."

    def test_error(self):
        state = AppState(view=ViewState.error("Invalid city name. Please try again."))
        assert format_view_text(state) == "Invalid city name. Please try again."

    def test_ready_celsius(self, series: ForecastSeries):
        state = AppState(view=ViewState.ready(series), started=True)
        text = format_view_text(state, hourly=8, tz=UTC)
        assert "=== Narva ===" in text
        # -1.5 rounds half away from zero
        assert "-2°C" in text
        assert "overcast clouds" in text
        assert "Hourly forecast" in text
        assert "2-day forecast" in text
        assert "Wednesday, Feb 11" in text
        assert "Switch to °F" in text

    def test_ready_fahrenheit(self, series: ForecastSeries):
        state = AppState(use_celsius=False, view=ViewState.ready(series), started=True)
        text = format_view_text(state, tz=UTC)
        # -1.5°C == 29.3°F
        assert "29°F" in text
        assert "Switch to °C" in text

    def test_empty_series(self):
        state = AppState(view=ViewState.ready(ForecastSeries("Narva", ())))
        text = format_view_text(state, tz=UTC)
        assert "=== Narva ===" in text
        assert "0-day forecast" in text


class TestFormatViewJson:
    def test_ready(self, series: ForecastSeries):
        state = AppState(view=ViewState.ready(series), started=True)
        data = json.loads(format_view_json(state, hourly=3, tz=UTC))
        assert data["status"] == "ready"
        assert data["location"] == "Narva"
        assert data["unit"] == "C"
        assert data["current"]["temperature"] == -2
        assert len(data["hourly"]) == 3
        assert data["hourly"][0]["hour"] == "12:00"
        assert [d["date"] for d in data["daily"]] == [
            "Wednesday, Feb 11",
            "Thursday, Feb 12",
        ]
        assert data["daily"][0]["max"] == -1
        assert data["daily"][0]["min"] == -3

    def test_fahrenheit_daily(self, series: ForecastSeries):
        state = AppState(use_celsius=False, view=ViewState.ready(series))
        data = json.loads(format_view_json(state, tz=UTC))
        # -1.2°C -> 29.84°F, -3.4°C -> 25.88°F
        assert data["daily"][0]["max"] == 30
        assert data["daily"][0]["min"] == 26

    def test_error(self):
        state = AppState(view=ViewState.error("boom"))
        data = json.loads(format_view_json(state))
        assert data == {"status": "error", "city": "Narva", "unit": "C", "error": "boom"}

    def test_loading(self):
        data = json.loads(format_view_json(AppState()))
        assert data["status"] == "loading"
