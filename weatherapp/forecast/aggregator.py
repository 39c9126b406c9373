"""Derived views over a forecast series: current, hourly window, daily summary.

All derivations trust the series to be sorted ascending by timestamp, which
is the order the forecast service returns. Samples are never re-sorted here.
"""

from datetime import tzinfo

from weatherapp.models.common import local_date
from weatherapp.models.forecast import ForecastSample, ForecastSeries

DEFAULT_HOURLY_WINDOW = 8


def current_conditions(series: ForecastSeries) -> ForecastSample | None:
    """The sample representing "now": the first one, or None for an empty series."""
    if not series.samples:
        return None
    return series.samples[0]


def hourly_window(
    series: ForecastSeries, n: int = DEFAULT_HOURLY_WINDOW
) -> list[ForecastSample]:
    """The first ``n`` samples (all of them if fewer exist), order preserved."""
    if n < 0:
        raise ValueError(f"hourly window size must be non-negative, got {n}")
    return list(series.samples[:n])


def daily_summary(
    series: ForecastSeries, tz: tzinfo | None = None
) -> list[ForecastSample]:
    """One representative sample per run of samples sharing a local calendar day.

    A sample is kept when its date differs from the immediately preceding
    sample's date, so a day that reappears after a different day is emitted
    again. The kept sample's own max/min temperatures represent the day.
    """
    result: list[ForecastSample] = []
    previous = None
    for sample in series.samples:
        day = local_date(sample.timestamp, tz)
        if day != previous:
            result.append(sample)
        previous = day
    return result
