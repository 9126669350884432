"""Weather provider abstraction and the errors shared across the fetch flow."""
from abc import ABC, abstractmethod
from typing import Any, Dict


class WeatherProviderBase(ABC):
    """Abstract base class for weather data providers."""

    @abstractmethod
    def fetch(self, city: str) -> Dict[str, Any]:
        """
        Fetch the current weather payload for a city.

        Returns:
            dict: Provider payload, exactly as the provider sent it

        Raises:
            UpstreamUnavailable: If the provider cannot be reached or refuses the request
        """
        pass


class WeatherProviderError(Exception):
    """Exception raised when a weather provider fails."""
    pass


class UpstreamUnavailable(WeatherProviderError):
    """Network failure, non-2xx status or unreadable body from the provider."""
    pass


class ReadingParseError(WeatherProviderError):
    """Provider payload is missing blocks needed to build a reading."""
    pass


class MisconfiguredCredential(WeatherProviderError):
    """Access credential is missing or still the placeholder value."""
    pass


class InvalidInput(WeatherProviderError):
    """Search term is blank."""
    pass
