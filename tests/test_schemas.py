"""Unit tests for request/record models."""

import pytest
from pydantic import ValidationError

from models.schemas import BookingForm, ItineraryState, Landmark


def form(**overrides) -> dict:
    data = {
        "name": "Ana Cruz",
        "email": "Ana@Example.com",
        "phone": "+63 912 345 6789",
        "groupSize": 2,
    }
    data.update(overrides)
    return data


class TestBookingForm:
    def test_valid_form_from_camel_case(self) -> None:
        f = BookingForm.model_validate(form(specialRequests="  Window seat  "))
        assert f.group_size == 2
        assert f.email == "ana@example.com"
        assert f.special_requests == "Window seat"
        assert f.booking_type == "self"
        assert f.phone_country_code == "PH"

    @pytest.mark.parametrize("size", [0, 51])
    def test_group_size_bounds(self, size: int) -> None:
        with pytest.raises(ValidationError):
            BookingForm.model_validate(form(groupSize=size))

    @pytest.mark.parametrize(
        "field,value",
        [
            ("name", "A"),
            ("name", "Ana <b>"),
            ("email", "not-an-email"),
            ("phone", "12"),
            ("specialRequests", "<script>alert(1)</script>"),
            ("specialRequests", "x" * 1001),
        ],
    )
    def test_rejects_bad_fields(self, field: str, value: str) -> None:
        with pytest.raises(ValidationError):
            BookingForm.model_validate(form(**{field: value}))

    def test_guest_requires_name_and_email(self) -> None:
        with pytest.raises(ValidationError):
            BookingForm.model_validate(form(bookingType="guest"))
        with pytest.raises(ValidationError):
            BookingForm.model_validate(form(bookingType="guest", guestName="Ben", guestEmail="bad"))
        f = BookingForm.model_validate(form(bookingType="guest", guestName="Ben", guestEmail="ben@example.com"))
        assert f.guest_name == "Ben"


class TestLandmark:
    def test_duration_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            Landmark.model_validate({
                "id": "x", "name": "X", "location": {"lat": 0, "lng": 0},
                "estimatedDuration": 0, "category": "Nature", "tourType": "mountain",
            })

    def test_dumps_camel_case(self, landmark_a) -> None:
        data = landmark_a.model_dump(by_alias=True)
        assert data["estimatedDuration"] == 60
        assert data["tourType"] == "cebu-city"


def test_state_round_trips_through_json(two_day_state, landmark_a) -> None:
    state = two_day_state.model_copy(update={"day1_landmarks": [landmark_a]})
    payload = state.model_dump(by_alias=True)
    assert payload["currentStep"] == "itinerary"
    assert payload["day1Landmarks"][0]["id"] == "a"
    assert ItineraryState.model_validate(payload) == state
