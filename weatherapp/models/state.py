"""View and application state models owned by the controller."""

from dataclasses import dataclass
from enum import StrEnum

from weatherapp.models.common import DEFAULT_CITY
from weatherapp.models.forecast import ForecastSeries
from weatherapp.models.preferences import Preferences


class ViewStatus(StrEnum):
    LOADING = "loading"
    ERROR = "error"
    READY = "ready"


@dataclass(frozen=True)
class ViewState:
    """Tagged union: exactly one of Loading, Error(message), Ready(series)."""

    status: ViewStatus
    series: ForecastSeries | None = None
    error_message: str | None = None

    @classmethod
    def loading(cls) -> "ViewState":
        return cls(status=ViewStatus.LOADING)

    @classmethod
    def error(cls, message: str) -> "ViewState":
        return cls(status=ViewStatus.ERROR, error_message=message)

    @classmethod
    def ready(cls, series: ForecastSeries) -> "ViewState":
        return cls(status=ViewStatus.READY, series=series)

    @property
    def is_ready(self) -> bool:
        return self.status == ViewStatus.READY


@dataclass(frozen=True)
class AppState:
    city: str = DEFAULT_CITY
    use_celsius: bool = True
    view: ViewState = ViewState.loading()
    started: bool = False

    @property
    def preferences(self) -> Preferences:
        return Preferences(city=self.city, use_celsius=self.use_celsius)
