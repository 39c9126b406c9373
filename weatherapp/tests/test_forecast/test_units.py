"""Tests for temperature unit conversion and display rounding."""

import pytest

from weatherapp.forecast.units import display_round, to_display_temperature, unit_symbol


class TestToDisplayTemperature:
    @pytest.mark.parametrize("celsius", [-40.0, -3.5, 0.0, 21.37, 100.0])
    def test_celsius_is_identity(self, celsius: float):
        assert to_display_temperature(celsius, True) == celsius

    @pytest.mark.parametrize("celsius", [-40.0, -3.5, 0.0, 21.37, 100.0])
    def test_fahrenheit_formula(self, celsius: float):
        assert to_display_temperature(celsius, False) == celsius * 1.8 + 32

    def test_known_points(self):
        assert to_display_temperature(0.0, False) == 32.0
        assert to_display_temperature(100.0, False) == pytest.approx(212.0)
        assert to_display_temperature(-40.0, False) == pytest.approx(-40.0)


class TestDisplayRound:
    def test_halves_away_from_zero(self):
        assert display_round(2.5) == 3
        assert display_round(-2.5) == -3
        assert display_round(0.5) == 1

    def test_nearest(self):
        assert display_round(2.4) == 2
        assert display_round(-2.6) == -3
        assert display_round(-0.4) == 0
        assert display_round(28.94) == 29

    def test_no_float_artifact_below_half(self):
        assert display_round(0.49999999999999994) == 0
        assert display_round(-0.49999999999999994) == 0
        assert display_round(2.4999999999999996) == 2

    def test_returns_int(self):
        assert isinstance(display_round(1.2), int)


class TestUnitSymbol:
    def test_symbols(self):
        assert unit_symbol(True) == "C"
        assert unit_symbol(False) == "F"
