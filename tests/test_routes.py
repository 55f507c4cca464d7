"""API tests for the itinerary, landmark and booking routes."""

from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from config import FirestoreUnavailable
from main import app
from services.pricing_service import FULL_PACKAGE_RATE, calculate_price


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


@pytest.fixture(autouse=True)
def no_firestore():
    """Routes fall back to the bundled catalogue."""
    with patch("services.landmark_service.get_db", side_effect=FirestoreUnavailable("no creds")):
        yield


def landmark_json(landmark) -> dict:
    return landmark.model_dump(by_alias=True)


FORM = {
    "name": "Ana Cruz",
    "email": "ana@example.com",
    "phone": "+63 912 345 6789",
    "groupSize": 2,
}


def test_root(client: TestClient) -> None:
    assert client.get("/").json()["status"] == "ok"


class TestLandmarkRoutes:
    def test_list_by_tour_type(self, client: TestClient) -> None:
        response = client.get("/landmarks/", params={"tourType": "cebu-city"})
        assert response.status_code == 200
        data = response.json()
        assert len(data) == 6
        assert all(l["tourType"] == "cebu-city" for l in data)
        assert "estimatedDuration" in data[0]

    def test_unknown_landmark(self, client: TestClient) -> None:
        assert client.get("/landmarks/nope").status_code == 404


class TestDispatchRoute:
    def test_set_duration(self, client: TestClient) -> None:
        response = client.post("/itinerary/dispatch", json={"action": {"type": "SET_DURATION", "payload": "1-day"}})
        assert response.status_code == 200
        data = response.json()
        assert data["state"]["currentStep"] == "tour-type"
        assert data["state"]["tourDuration"] == "1-day"
        assert data["canBook"] is False
        assert data["canProceedToItinerary"] is False

    def test_toggle_landmark(self, client: TestClient, one_day_state, landmark_a) -> None:
        response = client.post("/itinerary/dispatch", json={
            "state": one_day_state.model_dump(by_alias=True),
            "action": {"type": "TOGGLE_LANDMARK", "payload": {"landmark": landmark_json(landmark_a)}},
        })
        data = response.json()
        assert [l["id"] for l in data["selectedLandmarks"]] == ["a"]
        assert data["canBook"] is True
        assert data["canProceedToItinerary"] is True

    def test_unknown_action_returns_same_state(self, client: TestClient, one_day_state) -> None:
        state = one_day_state.model_dump(by_alias=True)
        response = client.post("/itinerary/dispatch", json={"state": state, "action": {"type": "FLY"}})
        assert response.status_code == 200
        assert response.json()["state"] == state

    def test_malformed_action(self, client: TestClient) -> None:
        response = client.post("/itinerary/dispatch", json={"action": {"type": "SET_DURATION", "payload": "3-days"}})
        assert response.status_code == 422


class TestSummaryRoutes:
    def test_single_day_summary(self, client: TestClient, one_day_state, landmark_a, landmark_b) -> None:
        state = one_day_state.model_copy(update={"day1_landmarks": [landmark_a, landmark_b]})
        response = client.post("/itinerary/summary", json={"state": state.model_dump(by_alias=True)})
        data = response.json()
        assert data["time"]["totalMins"] == 170
        assert data["totalPrice"] == calculate_price(170, False)
        assert data["suggestFullPackage"] is False
        assert data["totalForGroup"] == data["totalPrice"]

    def test_single_day_summary_group(self, client: TestClient, one_day_state, landmark_a) -> None:
        state = one_day_state.model_copy(update={"day1_landmarks": [landmark_a]})
        response = client.post("/itinerary/summary", json={"state": state.model_dump(by_alias=True), "groupSize": 3})
        data = response.json()
        assert data["groupSize"] == 3
        assert data["totalForGroup"] == data["totalPrice"] * 3

    def test_two_day_summary(self, client: TestClient, two_day_state, landmark_a, landmark_c) -> None:
        state = two_day_state.model_copy(update={"day1_landmarks": [landmark_a], "day2_landmarks": [landmark_c]})
        response = client.post("/itinerary/summary", json={"state": state.model_dump(by_alias=True), "groupSize": 3})
        data = response.json()
        assert len(data["days"]) == 2
        assert data["totalForGroup"] == data["perPerson"] * 3

    def test_pricing(self, client: TestClient) -> None:
        data = client.get("/itinerary/pricing", params={"minutes": 600, "fullPackage": "true", "landmarks": 8}).json()
        assert data["breakdown"]["totalPrice"] == FULL_PACKAGE_RATE
        assert data["breakdown"]["savings"] == calculate_price(600, False) - FULL_PACKAGE_RATE
        assert data["fullPackageIsBetter"] is True


class TestBookingRoutes:
    def _body(self, state) -> dict:
        return {"state": state.model_dump(by_alias=True), "form": FORM, "startDate": "2026-12-01T08:00:00"}

    def test_requires_user(self, client: TestClient, one_day_state, landmark_a) -> None:
        state = one_day_state.model_copy(update={"day1_landmarks": [landmark_a]})
        assert client.post("/bookings/", json=self._body(state)).status_code == 401

    def test_requires_bookable_itinerary(self, client: TestClient, two_day_state, landmark_a) -> None:
        state = two_day_state.model_copy(update={"day1_landmarks": [landmark_a]})
        response = client.post("/bookings/", json=self._body(state), headers={"X-User-Id": "u1"})
        assert response.status_code == 422
        assert "Day 2" in response.json()["detail"]

    @patch("routers.bookings.create_booking", return_value="booking-1")
    @patch("routers.bookings.check_user_pending_bookings")
    def test_creates_booking(
        self,
        mock_pending: MagicMock,
        mock_create: MagicMock,
        client: TestClient,
        one_day_state,
        landmark_a,
        landmark_b,
    ) -> None:
        mock_pending.return_value = {"hasPending": False, "hasConfirmed": False}
        state = one_day_state.model_copy(update={"day1_landmarks": [landmark_a, landmark_b]})

        response = client.post("/bookings/", json=self._body(state), headers={"X-User-Id": "u1", "X-User-Name": "Ana"})

        assert response.status_code == 201
        data = response.json()
        assert data["id"] == "booking-1"
        assert data["booking"]["totalPrice"] == calculate_price(170, False) * 2
        assert data["booking"]["userName"] == "Ana"
        record = mock_create.call_args[0][0]
        assert record.user_id == "u1"

    @patch("routers.bookings.create_booking")
    @patch("routers.bookings.check_user_pending_bookings")
    def test_existing_booking_conflict(
        self, mock_pending: MagicMock, mock_create: MagicMock, client: TestClient, one_day_state, landmark_a
    ) -> None:
        mock_pending.return_value = {"hasPending": True, "hasConfirmed": False}
        state = one_day_state.model_copy(update={"day1_landmarks": [landmark_a]})

        response = client.post("/bookings/", json=self._body(state), headers={"X-User-Id": "u1"})

        assert response.status_code == 409
        mock_create.assert_not_called()

        body = {**self._body(state), "force": True}
        mock_create.return_value = "booking-2"
        assert client.post("/bookings/", json=body, headers={"X-User-Id": "u1"}).status_code == 201

    @patch("routers.bookings.check_user_pending_bookings", side_effect=FirestoreUnavailable("no creds"))
    def test_storage_unavailable(self, _mock_pending: MagicMock, client: TestClient, one_day_state, landmark_a) -> None:
        state = one_day_state.model_copy(update={"day1_landmarks": [landmark_a]})
        response = client.post("/bookings/", json=self._body(state), headers={"X-User-Id": "u1"})
        assert response.status_code == 503

    @patch("routers.bookings.get_booking")
    def test_read_booking(self, mock_get: MagicMock, client: TestClient) -> None:
        mock_get.return_value = {
            "id": "b1",
            "bookingType": "custom-tour",
            "itineraryDetails": '{"landmarks": [{"id": "a", "name": "A", "image": "a.jpg", "duration": 60, "order": 1}],'
                                ' "totalTime": 60, "totalPrice": 2000, "isFullPackage": false}',
        }
        data = client.get("/bookings/b1").json()
        assert data["display"]["summary"] == "1 landmark • 1h tour"
        assert data["display"]["image"] == "a.jpg"
        assert data["display"]["valid"] is True

    @patch("routers.bookings.get_booking", return_value=None)
    def test_read_missing_booking(self, _mock_get: MagicMock, client: TestClient) -> None:
        assert client.get("/bookings/missing").status_code == 404


def test_landmarks_grouped(client: TestClient) -> None:
    data = client.get("/landmarks/by-tour-type").json()
    assert set(data) == {"cebu-city", "mountain"}
    assert len(data["cebu-city"]) == 6
    assert len(data["mountain"]) == 5
