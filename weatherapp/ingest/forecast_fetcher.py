"""Forecast fetcher: retrieves a city's forecast and classifies failures."""

import logging

import httpx
from pydantic import ValidationError

from weatherapp.ingest.owm_client import OpenWeatherClient
from weatherapp.ingest.schemas import parse_forecast
from weatherapp.models.forecast import FetchError, FetchResult

logger = logging.getLogger(__name__)


class ForecastFetcher:
    def __init__(self, client: OpenWeatherClient):
        self.client = client

    def fetch(self, city: str) -> FetchResult:
        """Fetch and parse the forecast for ``city``.

        Any non-2xx status is reported as INVALID_CITY; transport failures
        and malformed bodies are reported as NETWORK. Never raises for
        either case.
        """
        try:
            raw = self.client.get_forecast(city)
        except httpx.HTTPStatusError as e:
            logger.warning(
                "Forecast request for %r rejected with HTTP %d",
                city, e.response.status_code,
            )
            return FetchResult.failure(FetchError.INVALID_CITY)
        except httpx.HTTPError:
            logger.exception("Forecast request for %r failed", city)
            return FetchResult.failure(FetchError.NETWORK)
        except ValueError:
            logger.exception("Forecast response for %r is not valid JSON", city)
            return FetchResult.failure(FetchError.NETWORK)

        try:
            series = parse_forecast(raw)
        except ValidationError as e:
            logger.error(
                "Forecast response for %r has unexpected shape: %d errors",
                city, e.error_count(),
            )
            return FetchResult.failure(FetchError.NETWORK)

        if series.is_empty:
            logger.warning("Forecast for %r contains no samples", city)
        return FetchResult.success(series)
