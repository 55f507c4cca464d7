"""Shared pytest fixtures."""

import os

# Keep tests off real Firebase credentials and on the fixed travel model
os.environ["FIREBASE_CREDENTIALS"] = "/nonexistent/serviceAccountKey.json"
os.environ["TRAVEL_MODEL"] = "fixed"

import pytest

from models.schemas import Landmark, ItineraryState
from factories import make_landmark


@pytest.fixture
def landmark_a() -> Landmark:
    return make_landmark("a", 60)


@pytest.fixture
def landmark_b() -> Landmark:
    return make_landmark("b", 90, lat=10.30, lng=123.91)


@pytest.fixture
def landmark_c() -> Landmark:
    return make_landmark("c", 45, tour_type="mountain", lat=10.37, lng=123.87, category="Nature")


@pytest.fixture
def all_cebu() -> list:
    return [make_landmark(f"cebu-{i}", 30 + 15 * i, lat=10.29 + i / 100) for i in range(4)]


@pytest.fixture
def all_mountain() -> list:
    return [
        make_landmark(f"mtn-{i}", 60, tour_type="mountain", lat=10.37 + i / 100, category="Nature")
        for i in range(3)
    ]


@pytest.fixture
def one_day_state() -> ItineraryState:
    return ItineraryState(
        current_step="itinerary", tour_duration="1-day", day1_tour_type="cebu-city"
    )


@pytest.fixture
def two_day_state() -> ItineraryState:
    return ItineraryState(
        current_step="itinerary",
        tour_duration="2-days",
        day1_tour_type="cebu-city",
        day2_tour_type="mountain",
    )
