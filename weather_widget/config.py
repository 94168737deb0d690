"""
Configuration constants for the weather widget.
"""

import os


class ExternalAPIConfig:
    """External API configuration"""

    OPENWEATHER_BASE_URL = os.getenv(
        "OPENWEATHER_BASE_URL", "https://api.openweathermap.org/data/2.5"
    )
    OPENWEATHER_UNITS = "metric"
    OPENWEATHER_TIMEOUT = float(os.getenv("WEATHER_TIMEOUT_SECONDS", "5"))
    OPENWEATHER_ICON_URL = "https://openweathermap.org/img/wn/{icon}@2x.png"


class WidgetConfig:
    """Page-level configuration"""

    # Environment variables
    ENVIRONMENT = os.getenv("ENVIRONMENT", "development")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
    CONTACT_EMAIL = os.getenv("CONTACT_EMAIL", "hello@example.com")

    # API Key (inject through the deployment's secret store, never commit it)
    OPENWEATHER_API_KEY = os.getenv("OPENWEATHER_API_KEY", "")


class Messages:
    """User-facing messages"""

    EMPTY_CITY = "Please enter a city name."
    CITY_NOT_FOUND = "City not found."
    UPSTREAM_FAILURE = "Unable to fetch weather."
    TRANSPORT_FALLBACK = "Failed to get weather."
    IDLE_PROMPT = "Search for your city's weather!"
    LOADING = "Loading..."
