"""HTTP client the presenter uses to reach the weather proxy."""
import logging
from typing import Optional

import requests

from weather_provider import InvalidInput, ReadingParseError, WeatherProviderError
from weather_reading import WeatherReading

DEFAULT_PROXY_URL = "http://127.0.0.1:5000"
INVALID_CITY_MESSAGE = "Please enter a valid city name"
FETCH_FAILED_MESSAGE = "Failed to fetch weather data"


class ProxyRequestError(WeatherProviderError):
    """Proxy answered with an error or could not be reached."""
    pass


class ProxyClient:
    """Calls ``GET /api/weather`` and turns the payload into a WeatherReading."""

    def __init__(
        self,
        base_url: str = DEFAULT_PROXY_URL,
        timeout: float = 10,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def fetch(self, city: str) -> WeatherReading:
        """
        Fetch the reading for ``city`` through the proxy.

        Raises:
            InvalidInput: If ``city`` is blank
            ProxyRequestError: If the proxy reports an error or is unreachable
        """
        if not city or not city.strip():
            raise InvalidInput("City name is blank")

        url = f"{self.base_url}/api/weather"
        try:
            logging.debug("Requesting %s (city=%r)", url, city)
            response = self.session.get(url, params={"city": city}, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logging.error("Proxy unreachable: %s", e)
            raise ProxyRequestError(FETCH_FAILED_MESSAGE) from e

        if not response.ok:
            raise ProxyRequestError(self._error_message(response))

        try:
            return WeatherReading.from_payload(response.json())
        except (ValueError, ReadingParseError) as e:
            logging.error("Unusable weather payload from proxy: %s", e)
            raise ProxyRequestError(FETCH_FAILED_MESSAGE) from e

    @staticmethod
    def _error_message(response: requests.Response) -> str:
        try:
            error_data = response.json()
        except ValueError:
            return INVALID_CITY_MESSAGE
        if isinstance(error_data, dict) and error_data.get("error"):
            return str(error_data["error"])
        return INVALID_CITY_MESSAGE
