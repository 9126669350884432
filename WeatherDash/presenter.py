"""Presenter state machine - owns what the dashboard currently shows."""
import enum
import logging
from typing import Callable, Optional

from weather_provider import WeatherProviderError
from weather_reading import WeatherReading

UNKNOWN_ERROR_MESSAGE = "An unknown error occurred"


class PresenterState(enum.Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    FAILURE = "failure"


class WeatherPresenter:
    """
    Tracks the current city, loading flag, last error and last good reading.

    Each request gets a ticket from ``begin()``. Only the most recently issued
    ticket may change state, so a slow older response can never overwrite a
    newer one. ``search()`` and ``mount()`` drive a whole request synchronously;
    callers that run requests elsewhere use ``begin``/``resolve``/``reject``.
    """

    def __init__(
        self,
        client,
        default_city: str = "London",
        notify: Optional[Callable[[str], None]] = None,
    ):
        """
        Args:
            client: Object with ``fetch(city) -> WeatherReading`` (e.g. ProxyClient)
            default_city: City loaded by ``mount()``
            notify: Called with the message of every failed request
        """
        self.client = client
        self.city = default_city
        self.notify = notify
        self.state = PresenterState.IDLE
        self.reading: Optional[WeatherReading] = None
        self.error: Optional[str] = None
        self._latest_ticket = 0

    @property
    def loading(self) -> bool:
        return self.state is PresenterState.LOADING

    @property
    def error_only(self) -> bool:
        """True when there is an error and no reading to fall back on."""
        return self.error is not None and self.reading is None

    def mount(self) -> None:
        """Load the default city."""
        self._run(self.city)

    def search(self, query: str) -> bool:
        """
        Search for ``query``. Blank queries are ignored.

        Returns:
            bool: Whether a request was made
        """
        if not query or not query.strip():
            logging.debug("Ignoring blank search")
            return False
        self._run(query.strip())
        return True

    def begin(self, city: str) -> int:
        self._latest_ticket += 1
        self.state = PresenterState.LOADING
        self.error = None
        logging.info("Loading weather for %r (request %s)", city, self._latest_ticket)
        return self._latest_ticket

    def resolve(self, ticket: int, reading: WeatherReading) -> bool:
        """Apply a successful result. Returns False if the ticket is stale."""
        if ticket != self._latest_ticket:
            logging.debug("Discarding stale response for request %s", ticket)
            return False
        self.reading = reading
        self.city = reading.location.name
        self.error = None
        self.state = PresenterState.SUCCESS
        return True

    def reject(self, ticket: int, message: str) -> bool:
        """Apply a failed result. Returns False if the ticket is stale."""
        if ticket != self._latest_ticket:
            logging.debug("Discarding stale error for request %s", ticket)
            return False
        self.error = message or UNKNOWN_ERROR_MESSAGE
        self.state = PresenterState.FAILURE
        logging.warning("Weather request failed: %s", self.error)
        if self.notify is not None:
            self.notify(self.error)
        return True

    def _run(self, city: str) -> None:
        ticket = self.begin(city)
        try:
            reading = self.client.fetch(city)
        except WeatherProviderError as e:
            self.reject(ticket, str(e))
            return
        self.resolve(ticket, reading)
