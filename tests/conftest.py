"""
Pytest configuration and shared fixtures.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from weather_widget.models import WeatherSnapshot


@pytest.fixture
def sample_api_key() -> str:
    """Sample API key for testing."""
    return "test_openweather_api_key_123"


@pytest.fixture
def london_payload() -> dict:
    """Mock OpenWeatherMap API response for London."""
    return {
        "coord": {"lon": -0.1257, "lat": 51.5085},
        "weather": [
            {"id": 800, "main": "Clear", "description": "clear sky", "icon": "01d"}
        ],
        "main": {"temp": 15.4, "feels_like": 14.6, "pressure": 1018, "humidity": 70},
        "wind": {"speed": 3.2, "deg": 240},
        "sys": {"country": "GB"},
        "name": "London",
        "cod": 200,
    }


@pytest.fixture
def london_snapshot(london_payload) -> WeatherSnapshot:
    return WeatherSnapshot.from_payload(london_payload)


@pytest.fixture
def paris_snapshot() -> WeatherSnapshot:
    return WeatherSnapshot.from_payload(
        {
            "name": "Paris",
            "sys": {"country": "FR"},
            "weather": [{"description": "light rain", "icon": "10d"}],
            "main": {"temp": 11.5, "humidity": 88},
            "wind": {"speed": 5},
        }
    )


def make_session(status: int = 200, payload=None, json_error=None, get_error=None):
    """
    Build a stand-in for ``aiohttp.ClientSession``.

    Returns:
        (session_factory_result, session): the object returned by
        ``ClientSession(...)`` and the session whose ``get`` can be inspected
    """
    response = MagicMock()
    response.status = status
    response.json = AsyncMock(return_value=payload, side_effect=json_error)

    response_ctx = MagicMock()
    response_ctx.__aenter__ = AsyncMock(return_value=response)
    response_ctx.__aexit__ = AsyncMock(return_value=False)

    session = MagicMock()
    session.get = MagicMock(return_value=response_ctx, side_effect=get_error)

    session_ctx = MagicMock()
    session_ctx.__aenter__ = AsyncMock(return_value=session)
    session_ctx.__aexit__ = AsyncMock(return_value=False)
    return session_ctx, session


@pytest.fixture
def session_factory():
    return make_session
