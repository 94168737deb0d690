"""
Pydantic models for weather data and widget state.
"""

from typing import Any, Dict, List, Literal, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, FiniteFloat

# NaN and Infinity are valid JSON to aiohttp but never a real reading
Number = Union[int, FiniteFloat]


class WeatherCondition(BaseModel):
    """One entry of the upstream ``weather`` list."""

    model_config = ConfigDict(frozen=True)

    description: str
    icon: str


class _SysSection(BaseModel):
    country: str


class _MainSection(BaseModel):
    temp: Number
    humidity: Number


class _WindSection(BaseModel):
    speed: Number


class OpenWeatherMapResponse(BaseModel):
    """Model for the OpenWeatherMap current weather payload."""

    name: str = Field(..., description="City name")
    sys: _SysSection = Field(..., description="Country information")
    weather: List[WeatherCondition] = Field(
        ..., min_length=1, description="Weather conditions"
    )
    main: _MainSection = Field(..., description="Main weather data")
    wind: _WindSection = Field(..., description="Wind data")


class WeatherSnapshot(BaseModel):
    """Immutable weather reading for one location at one fetch time."""

    model_config = ConfigDict(frozen=True)

    name: str
    country: str
    conditions: Tuple[WeatherCondition, ...] = Field(..., min_length=1)
    temperature: Number = Field(..., description="Celsius")
    humidity: Number = Field(..., description="Percent")
    wind_speed: Number = Field(..., description="Meters per second")

    @property
    def primary_condition(self) -> WeatherCondition:
        return self.conditions[0]

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "WeatherSnapshot":
        """
        Build a snapshot from a raw upstream payload.

        Raises:
            pydantic.ValidationError: If the payload is partial or ill-typed,
                including an empty ``weather`` list.
        """
        response = OpenWeatherMapResponse.model_validate(payload)
        return cls(
            name=response.name,
            country=response.sys.country,
            conditions=tuple(response.weather),
            temperature=response.main.temp,
            humidity=response.main.humidity,
            wind_speed=response.wind.speed,
        )


class IdleState(BaseModel):
    """No search has been submitted yet."""

    model_config = ConfigDict(frozen=True)

    status: Literal["idle"] = "idle"


class LoadingState(BaseModel):
    """A request is in flight."""

    model_config = ConfigDict(frozen=True)

    status: Literal["loading"] = "loading"


class ErrorState(BaseModel):
    """The last search failed; ``message`` is shown to the user."""

    model_config = ConfigDict(frozen=True)

    status: Literal["error"] = "error"
    message: str
    kind: str = "error"


class SuccessState(BaseModel):
    """The last search produced a snapshot."""

    model_config = ConfigDict(frozen=True)

    status: Literal["success"] = "success"
    snapshot: WeatherSnapshot


RequestState = Union[IdleState, LoadingState, ErrorState, SuccessState]


class ErrorResponse(BaseModel):
    """Response model for error cases."""

    error: str
    message: str
    status_code: int
