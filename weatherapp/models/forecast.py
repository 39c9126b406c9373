"""Forecast domain models and fetch outcomes."""

from dataclasses import dataclass
from enum import StrEnum

from weatherapp.models.common import UnixSeconds


@dataclass(frozen=True)
class ForecastSample:
    timestamp: UnixSeconds
    temperature_c: float
    temperature_max_c: float
    temperature_min_c: float
    condition_main: str
    condition_description: str
    icon_code: str


@dataclass(frozen=True)
class ForecastSeries:
    location_name: str
    samples: tuple[ForecastSample, ...]  # ascending by timestamp

    @property
    def is_empty(self) -> bool:
        return not self.samples


class FetchError(StrEnum):
    NETWORK = "network"
    INVALID_CITY = "invalid_city"

    @property
    def message(self) -> str:
        return FETCH_ERROR_MESSAGES[self]


FETCH_ERROR_MESSAGES: dict[FetchError, str] = {
    FetchError.NETWORK: "Unable to fetch weather data. Please try again later.",
    FetchError.INVALID_CITY: "Invalid city name. Please try again.",
}


@dataclass(frozen=True)
class FetchResult:
    series: ForecastSeries | None = None
    error: FetchError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.series is not None

    @classmethod
    def success(cls, series: ForecastSeries) -> "FetchResult":
        return cls(series=series)

    @classmethod
    def failure(cls, error: FetchError) -> "FetchResult":
        return cls(error=error)
