"""
Tests for the weather snapshot and request state models.
"""

import pytest
from pydantic import ValidationError as PayloadValidationError

from weather_widget.models import (
    ErrorState,
    IdleState,
    LoadingState,
    SuccessState,
    WeatherCondition,
    WeatherSnapshot,
)


class TestWeatherSnapshot:
    """Test building snapshots from upstream payloads."""

    def test_from_payload_maps_fields(self, london_payload):
        """Test that upstream fields map onto the snapshot."""
        snapshot = WeatherSnapshot.from_payload(london_payload)

        assert snapshot.name == "London"
        assert snapshot.country == "GB"
        assert snapshot.temperature == 15.4
        assert snapshot.humidity == 70
        assert snapshot.wind_speed == 3.2
        assert snapshot.conditions == (
            WeatherCondition(description="clear sky", icon="01d"),
        )
        assert snapshot.primary_condition.icon == "01d"

    def test_integer_readings_stay_integers(self, london_payload):
        """Test that integer readings are not coerced to floats."""
        snapshot = WeatherSnapshot.from_payload(london_payload)

        assert isinstance(snapshot.humidity, int)
        assert isinstance(snapshot.wind_speed, float)

    def test_condition_order_is_preserved(self, london_payload):
        """Test that conditions keep the upstream order."""
        london_payload["weather"] = [
            {"description": "mist", "icon": "50d"},
            {"description": "light rain", "icon": "10d"},
        ]

        snapshot = WeatherSnapshot.from_payload(london_payload)

        assert [c.description for c in snapshot.conditions] == ["mist", "light rain"]

    def test_empty_condition_list_is_rejected(self, london_payload):
        """Test that an empty weather list fails validation."""
        london_payload["weather"] = []

        with pytest.raises(PayloadValidationError):
            WeatherSnapshot.from_payload(london_payload)

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_temperature_is_rejected(self, london_payload, value):
        """Test that NaN and infinite temperatures fail validation."""
        london_payload["main"]["temp"] = value

        with pytest.raises(PayloadValidationError):
            WeatherSnapshot.from_payload(london_payload)

    @pytest.mark.parametrize("section", ["main", "sys", "wind", "name", "weather"])
    def test_missing_section_is_rejected(self, london_payload, section):
        """Test that a missing payload section fails validation."""
        del london_payload[section]

        with pytest.raises(PayloadValidationError):
            WeatherSnapshot.from_payload(london_payload)

    def test_snapshot_is_immutable(self, london_snapshot):
        """Test that snapshots cannot be modified."""
        with pytest.raises(PayloadValidationError):
            london_snapshot.name = "Paris"


class TestRequestState:
    """Test the request state variants."""

    def test_status_tags(self, london_snapshot):
        """Test the status tag of each request state."""
        assert IdleState().status == "idle"
        assert LoadingState().status == "loading"
        assert ErrorState(message="City not found.").status == "error"
        assert SuccessState(snapshot=london_snapshot).status == "success"

    def test_error_state_keeps_kind(self):
        """Test that the error state serializes its kind."""
        state = ErrorState(message="City not found.", kind="not_found")

        assert state.model_dump() == {
            "status": "error",
            "message": "City not found.",
            "kind": "not_found",
        }
