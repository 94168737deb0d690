"""
AWS Lambda handler with FastAPI application serving the weather widget page.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, Query
from fastapi.responses import HTMLResponse, JSONResponse
from mangum import Mangum

from .config import WidgetConfig
from .errors import (
    NotFoundError,
    TransportError,
    UpstreamError,
    ValidationError,
    WeatherAPIError,
)
from .external_api import OpenWeatherMapClient
from .models import ErrorResponse, WeatherSnapshot
from .renderer import render_page
from .widget import WeatherWidget

# Configure logging
logging.basicConfig(
    level=WidgetConfig.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

ERROR_STATUS_CODES = {
    ValidationError: 400,
    NotFoundError: 404,
    UpstreamError: 502,
    TransportError: 503,
}

# Initialize FastAPI app
app = FastAPI(
    title="Weather Widget",
    description="Single-page city weather lookup",
    version="1.0.0",
)


def build_widget() -> WeatherWidget:
    """Create a widget bound to the configured OpenWeatherMap client."""
    return WeatherWidget(OpenWeatherMapClient(WidgetConfig.OPENWEATHER_API_KEY))


@app.get("/", response_class=HTMLResponse)
async def index(city: Optional[str] = Query(None)):
    """
    Render the widget page.

    Without ``city`` the page is idle; with ``city`` (even blank) the search
    form was submitted and the widget runs one lookup before rendering.
    """
    widget = build_widget()
    if city is not None:
        await widget.submit(city)
    return HTMLResponse(
        render_page(widget.state, widget.query, WidgetConfig.CONTACT_EMAIL)
    )


@app.get("/weather", response_model=WeatherSnapshot)
async def get_weather(city: str = Query("")):
    """
    JSON lookup for a single city.

    Returns:
        WeatherSnapshot on success, otherwise an ErrorResponse body with
        400 blank city, 404 unknown city, 502 upstream failure or
        503 no usable response
    """
    client = OpenWeatherMapClient(WidgetConfig.OPENWEATHER_API_KEY)
    try:
        return await client.get_current_weather(city)
    except WeatherAPIError as e:
        status_code = ERROR_STATUS_CODES.get(type(e), 500)
        logger.warning("Weather lookup for %r failed: %s", city, e.message)
        body = ErrorResponse(error=e.kind, message=e.message, status_code=status_code)
        return JSONResponse(status_code=status_code, content=body.model_dump())


@app.get("/health")
async def health_check():
    """Liveness endpoint."""
    return {
        "status": "healthy",
        "environment": WidgetConfig.ENVIRONMENT,
        "api_key_configured": bool(WidgetConfig.OPENWEATHER_API_KEY),
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request, exc):  # pylint: disable=unused-argument
    """Global exception handler for unhandled errors."""
    logger.error("Unhandled exception: %s", str(exc))
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(
            error="Internal Server Error",
            message="An unexpected error occurred",
            status_code=500,
        ).model_dump(),
    )


# AWS Lambda handler using Mangum
lambda_handler = Mangum(app, lifespan="off")
