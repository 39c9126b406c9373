"""Application state controller: owns AppState and drives the view state machine.

Events (startup, city change, refresh, unit toggle) are handled one at a
time on the caller's thread. Each fetch finishes before the next event is
processed, so a later request can never be overwritten by an earlier one.
"""

import logging
from collections.abc import Callable
from dataclasses import replace
from datetime import tzinfo

from weatherapp.forecast import aggregator
from weatherapp.ingest.forecast_fetcher import ForecastFetcher
from weatherapp.models.forecast import ForecastSample
from weatherapp.models.state import AppState, ViewState
from weatherapp.storage.preference_store import PreferenceStore

logger = logging.getLogger(__name__)

Subscriber = Callable[[AppState], None]


class AppController:
    def __init__(
        self,
        store: PreferenceStore,
        fetcher: ForecastFetcher,
        hourly_window: int = aggregator.DEFAULT_HOURLY_WINDOW,
        tz: tzinfo | None = None,
    ):
        self.store = store
        self.fetcher = fetcher
        self.hourly_window = hourly_window
        self.tz = tz
        self._state = AppState()
        self._subscribers: list[Subscriber] = []

    @property
    def state(self) -> AppState:
        return self._state

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register ``callback`` for every state transition. Returns an unsubscribe function."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    # --- Events ---

    def start(self, city: str | None = None) -> AppState:
        """Load preferences once, then fetch the forecast for the loaded city.

        A non-empty ``city`` replaces the stored one for this first fetch.
        """
        if self._state.started:
            logger.warning("Controller already started")
            return self._state

        prefs = self.store.load()
        logger.info(
            "Loaded preferences: city=%r celsius=%s", prefs.city, prefs.use_celsius
        )
        self._set_state(
            replace(
                self._state,
                city=(city or "").strip() or prefs.city,
                use_celsius=prefs.use_celsius,
                started=True,
            )
        )
        self._fetch()
        return self._state

    def set_city_text(self, text: str) -> None:
        """Record typed city text without fetching; used by a later refresh()."""
        self._set_state(replace(self._state, city=text))

    def change_city(self, city: str) -> AppState:
        """Handle a "city changed" event: one fetch when the city actually changed."""
        city = city.strip()
        if not city:
            logger.warning("Ignoring empty city name")
            return self._state
        if city == self._state.city and self._state.started:
            return self._state

        self._set_state(replace(self._state, city=city))
        if self._state.started:
            self._fetch()
        return self._state

    def refresh(self) -> AppState:
        """Fetch again using the currently entered city text."""
        if not self._state.started:
            logger.warning("Refresh requested before startup; ignoring")
            return self._state
        city = self._state.city.strip()
        if not city:
            logger.warning("Ignoring refresh with empty city name")
            return self._state
        self._set_state(replace(self._state, city=city))
        self._fetch()
        return self._state

    def toggle_unit(self) -> AppState:
        """Flip the display unit and persist it. Never re-fetches."""
        self._set_state(replace(self._state, use_celsius=not self._state.use_celsius))
        self.store.save(self._state.preferences)
        return self._state

    # --- Derived views ---

    def current(self) -> ForecastSample | None:
        series = self._state.view.series
        if series is None:
            return None
        return aggregator.current_conditions(series)

    def hourly(self) -> list[ForecastSample]:
        series = self._state.view.series
        if series is None:
            return []
        return aggregator.hourly_window(series, self.hourly_window)

    def daily(self) -> list[ForecastSample]:
        series = self._state.view.series
        if series is None:
            return []
        return aggregator.daily_summary(series, self.tz)

    # --- Internals ---

    def _fetch(self) -> None:
        city = self._state.city
        self._set_state(replace(self._state, view=ViewState.loading()))

        result = self.fetcher.fetch(city)
        if result.ok:
            assert result.series is not None
            logger.info(
                "Fetched %d samples for %s", len(result.series.samples),
                result.series.location_name,
            )
            self._set_state(replace(self._state, view=ViewState.ready(result.series)))
            self.store.save(self._state.preferences)
        else:
            assert result.error is not None
            logger.info("Fetch for %r failed: %s", city, result.error)
            self._set_state(
                replace(self._state, view=ViewState.error(result.error.message))
            )

    def _set_state(self, state: AppState) -> None:
        self._state = state
        for callback in list(self._subscribers):
            callback(state)
