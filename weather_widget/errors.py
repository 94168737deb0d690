"""
Error taxonomy for weather lookups.

Every failure a search can run into is one of the subclasses below. The
widget catches ``WeatherAPIError`` at its boundary and turns it into a
displayable message, so callers can branch on the class (or ``kind``)
instead of matching message strings.
"""

from typing import Optional


class WeatherAPIError(Exception):
    """Base exception for weather lookup errors."""

    kind = "error"

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class ValidationError(WeatherAPIError):
    """Empty or whitespace-only city name, raised before any network call."""

    kind = "validation"


class NotFoundError(WeatherAPIError):
    """Upstream reports no such city (HTTP 404)."""

    kind = "not_found"


class UpstreamError(WeatherAPIError):
    """Upstream answered with a non-success, non-404 status."""

    kind = "upstream"


class TransportError(WeatherAPIError):
    """No usable response: connectivity, timeout or a malformed payload."""

    kind = "transport"
