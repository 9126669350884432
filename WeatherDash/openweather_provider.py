"""OpenWeather Current Weather API provider implementation."""
import logging
from typing import Any, Dict

import requests

from weather_provider import MisconfiguredCredential, UpstreamUnavailable, WeatherProviderBase

PLACEHOLDER_API_KEYS = frozenset({"demo_key", "your_api_key", "changeme"})
DEFAULT_MAX_AGE_SECONDS = 1800


class OpenWeatherProvider(WeatherProviderBase):
    """
    Weather provider using OpenWeather Current Weather API, queried by city name.

    Uses the free Current Weather API: https://openweathermap.org/current
    Payloads are returned untouched; temperatures arrive in Kelvin because no
    ``units`` parameter is sent.
    """

    BASE_URL = "https://api.openweathermap.org/data/2.5/weather"

    def __init__(
        self,
        api_key: str,
        lang: str = "en",
        timeout: float = 10,
        max_age_seconds: int = DEFAULT_MAX_AGE_SECONDS,
    ):
        """
        Initialize OpenWeather provider.

        Args:
            api_key: OpenWeather API key
            lang: Language code for descriptions (e.g., "en", "de")
            timeout: HTTP request timeout in seconds
            max_age_seconds: Freshness hint sent to intermediary caches

        Raises:
            MisconfiguredCredential: If the key is empty or a known placeholder
        """
        if not api_key or not api_key.strip():
            raise MisconfiguredCredential("OpenWeather API key is not set")
        if api_key.strip() in PLACEHOLDER_API_KEYS:
            raise MisconfiguredCredential("OpenWeather API key is a placeholder value")
        self.api_key = api_key.strip()
        self.lang = lang
        self.timeout = timeout
        self.max_age_seconds = max_age_seconds

    def fetch(self, city: str) -> Dict[str, Any]:
        """
        Fetch current weather for ``city`` from OpenWeather.

        Returns:
            dict: The decoded JSON payload

        Raises:
            UpstreamUnavailable: On network errors, non-2xx status or a non-JSON body
        """
        # requests percent-encodes the query values
        params = {
            "q": city,
            "appid": self.api_key,
            "lang": self.lang,
        }
        headers = {"Cache-Control": f"max-age={self.max_age_seconds}"}

        try:
            logging.info("Making OpenWeather API request: %s (city=%r)", self.BASE_URL, city)
            response = requests.get(
                self.BASE_URL, params=params, headers=headers, timeout=self.timeout
            )
            logging.info("API response status: %s", response.status_code)

            if not response.ok:
                # Upstream detail stays in the log, never in the raised message
                logging.error(
                    "OpenWeather request failed with status %s: %s",
                    response.status_code,
                    response.text[:200],
                )
                raise UpstreamUnavailable(f"Weather API error: {response.status_code}")

            data = response.json()
            logging.debug("API response data keys: %s", list(data.keys()) if isinstance(data, dict) else type(data))
            return data

        except requests.exceptions.RequestException as e:
            logging.error("Network error during API request: %s", e)
            raise UpstreamUnavailable(f"Network error: {e}") from e
        except ValueError as e:
            logging.error("Failed to decode API response: %s", e)
            raise UpstreamUnavailable(f"Failed to parse response: {e}") from e
