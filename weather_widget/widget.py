"""
Weather lookup widget: the search text and the request state machine.
"""

import logging
from typing import Optional

from .config import Messages
from .errors import TransportError, ValidationError, WeatherAPIError
from .external_api import OpenWeatherMapClient
from .models import ErrorState, IdleState, LoadingState, RequestState, SuccessState

logger = logging.getLogger(__name__)


class WeatherWidget:
    """
    Owns the search query and exactly one ``RequestState``.

    State only moves through ``submit`` and ``reset``. Every submit takes a
    sequence number; when submits overlap, only the most recently issued one
    may write its outcome, older responses are dropped on arrival.
    """

    def __init__(self, client: Optional[OpenWeatherMapClient] = None):
        self.client = client or OpenWeatherMapClient()
        self.query = ""
        self._state: RequestState = IdleState()
        self._sequence = 0

    @property
    def state(self) -> RequestState:
        return self._state

    @property
    def is_loading(self) -> bool:
        return isinstance(self._state, LoadingState)

    def set_text(self, value: str) -> None:
        self.query = value

    def reset(self) -> None:
        """Return to the initial idle state, keeping the query text."""
        self._sequence += 1
        self._state = IdleState()

    async def submit(self, text: Optional[str] = None) -> RequestState:
        """
        Run one search and return the resulting state.

        Args:
            text: City to search; stored as the query first. Defaults to the
                current query.

        Returns:
            RequestState: ``ErrorState`` or ``SuccessState`` for this submit,
                or the newer state if this submit was superseded meanwhile
        """
        if text is not None:
            self.set_text(text)
        city = self.query

        self._sequence += 1
        sequence = self._sequence

        if not city.strip():
            self._state = ErrorState(
                message=Messages.EMPTY_CITY, kind=ValidationError.kind
            )
            return self._state

        self._state = LoadingState()
        logger.debug("Submit #%d for %r", sequence, city)

        try:
            snapshot = await self.client.get_current_weather(city)
            outcome: RequestState = SuccessState(snapshot=snapshot)
        except WeatherAPIError as e:
            outcome = ErrorState(
                message=e.message or Messages.TRANSPORT_FALLBACK, kind=e.kind
            )
        except Exception as e:  # pylint: disable=broad-except
            logger.exception("Unexpected error fetching weather for %r", city)
            outcome = ErrorState(
                message=str(e) or Messages.TRANSPORT_FALLBACK, kind=TransportError.kind
            )

        if sequence != self._sequence:
            logger.warning(
                "Discarding stale response for submit #%d (latest is #%d)",
                sequence,
                self._sequence,
            )
            return self._state

        self._state = outcome
        return self._state
