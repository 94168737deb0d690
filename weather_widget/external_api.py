"""
External API client for OpenWeatherMap service.
"""

import asyncio
import logging
from typing import Optional

import aiohttp
from pydantic import ValidationError as PayloadValidationError

from .config import ExternalAPIConfig, Messages, WidgetConfig
from .errors import NotFoundError, TransportError, UpstreamError, ValidationError
from .models import WeatherSnapshot

logger = logging.getLogger(__name__)


class OpenWeatherMapClient:
    """
    Asynchronous client for the OpenWeatherMap current weather endpoint.

    Each lookup issues exactly one GET; there are no retries.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        timeout: Optional[float] = None,
        base_url: Optional[str] = None,
    ):
        """
        Initialize the OpenWeatherMap client.

        Args:
            api_key: OpenWeatherMap API key (defaults to the environment)
            timeout: Request timeout in seconds (defaults to config value)
            base_url: API root (defaults to config value)
        """
        self.api_key = api_key if api_key is not None else WidgetConfig.OPENWEATHER_API_KEY
        self.base_url = (base_url or ExternalAPIConfig.OPENWEATHER_BASE_URL).rstrip("/")
        self.timeout = aiohttp.ClientTimeout(
            total=timeout or ExternalAPIConfig.OPENWEATHER_TIMEOUT
        )

        if not self.api_key:
            logger.warning("OPENWEATHER_API_KEY is not set; lookups will be rejected")

    async def get_current_weather(self, city: str) -> WeatherSnapshot:
        """
        Get current weather for a single city.

        Args:
            city: Name of the city, surrounding whitespace is ignored

        Returns:
            WeatherSnapshot: Parsed weather reading

        Raises:
            ValidationError: If the city name is blank
            NotFoundError: If the upstream does not know the city
            UpstreamError: If the upstream answers with any other failure status
            TransportError: If no usable response was received
        """
        if not city or not city.strip():
            raise ValidationError(Messages.EMPTY_CITY)

        params = {
            "q": city.strip(),
            "appid": self.api_key,
            "units": ExternalAPIConfig.OPENWEATHER_UNITS,
        }
        url = f"{self.base_url}/weather"

        try:
            async with aiohttp.ClientSession(timeout=self.timeout) as session:
                logger.debug("Requesting weather data for city: %s", params["q"])

                async with session.get(url, params=params) as response:
                    if response.status == 404:
                        logger.warning("City '%s' not found", params["q"])
                        raise NotFoundError(Messages.CITY_NOT_FOUND, status_code=404)

                    if not 200 <= response.status < 300:
                        logger.error(
                            "API error for %s (status: %d)",
                            params["q"],
                            response.status,
                        )
                        raise UpstreamError(
                            Messages.UPSTREAM_FAILURE, status_code=response.status
                        )

                    try:
                        payload = await response.json(content_type=None)
                    except ValueError as e:
                        logger.error("Unreadable payload for %s: %s", params["q"], e)
                        raise TransportError(
                            Messages.UPSTREAM_FAILURE, status_code=response.status
                        ) from e

        except asyncio.TimeoutError as e:
            logger.error("Timed out fetching weather for %s", params["q"])
            raise TransportError(Messages.UPSTREAM_FAILURE) from e

        except aiohttp.ClientError as e:
            logger.error("Network error fetching weather for %s: %s", params["q"], e)
            raise TransportError(str(e) or Messages.TRANSPORT_FALLBACK) from e

        if not isinstance(payload, dict):
            logger.error("Unexpected payload type for %s", params["q"])
            raise TransportError(Messages.UPSTREAM_FAILURE)

        try:
            snapshot = WeatherSnapshot.from_payload(payload)
        except PayloadValidationError as e:
            logger.error(
                "Malformed weather payload for %s: %d problem(s)",
                params["q"],
                e.error_count(),
            )
            raise TransportError(Messages.UPSTREAM_FAILURE) from e

        logger.debug("Successfully fetched weather for %s", params["q"])
        return snapshot
