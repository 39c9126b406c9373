"""Temperature unit conversion for display."""

from decimal import ROUND_HALF_UP, Decimal


def to_display_temperature(celsius: float, use_celsius: bool) -> float:
    """Map a Celsius value to the display unit (Celsius or Fahrenheit)."""
    if use_celsius:
        return celsius
    return celsius * 1.8 + 32


def display_round(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(Decimal(value).quantize(Decimal(0), rounding=ROUND_HALF_UP))


def unit_symbol(use_celsius: bool) -> str:
    return "C" if use_celsius else "F"
