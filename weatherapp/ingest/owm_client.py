"""OpenWeatherMap forecast API client."""

import logging
import os

import httpx

from weatherapp.config.schema import OWM_BASE_URL

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "weatherapp/0.1.0"
API_KEY_ENV = "OPENWEATHER_API_KEY"


class OpenWeatherClientError(Exception):
    """Raised when the client is misconfigured."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class OpenWeatherClient:
    def __init__(
        self,
        api_key: str | None = None,
        base_url: str = OWM_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 10.0,
    ):
        self.api_key = api_key or os.environ.get(API_KEY_ENV, "")
        if not self.api_key:
            raise OpenWeatherClientError(f"{API_KEY_ENV} not set")
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent
        self.timeout = timeout

    def get_forecast(self, city: str) -> dict:
        """Fetch the 5-day/3-hour forecast for a city name, in metric units.

        Raises httpx.HTTPStatusError for non-2xx responses, httpx.RequestError
        for transport failures and ValueError for a body that is not JSON.
        No retries are attempted.
        """
        url = f"{self.base_url}/forecast"
        params = {"q": city, "units": "metric", "appid": self.api_key}
        headers = {"User-Agent": self.user_agent, "Accept": "application/json"}

        resp = httpx.get(url, params=params, headers=headers, timeout=self.timeout)
        logger.debug("OWM forecast for %r returned %d", city, resp.status_code)
        resp.raise_for_status()
        return resp.json()
