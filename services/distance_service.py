# Distance Service: travel/visit time estimation for a day's landmarks
# Builds a static pairwise travel-time table (numpy) for the selected
# landmarks, then sums visit time plus consecutive legs in visit order.
# Default model is the fixed 20-minute leg; `haversine` converts
# straight-line distance to minutes at AVERAGE_SPEED_KMH.

import numpy as np
from math import radians, cos, sin, asin, sqrt, ceil
from typing import List, Sequence
from config import TRAVEL, TRAVEL_MODEL, AVERAGE_SPEED_KMH
from models.schemas import Landmark, TimeSplit


def haversine(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Straight-line distance in km between two lat/lng points."""
    R = 6371
    lat1, lng1, lat2, lng2 = map(radians, [lat1, lng1, lat2, lng2])
    a = sin((lat2 - lat1) / 2) ** 2 + cos(lat1) * cos(lat2) * sin((lng2 - lng1) / 2) ** 2
    return 2 * R * asin(sqrt(a))


def estimate_travel_time(distance_km: float, model: str = None) -> int:
    """Minutes for one leg between consecutive landmarks."""
    model = model or TRAVEL_MODEL
    if model == "haversine":
        mins = ceil((distance_km / AVERAGE_SPEED_KMH) * 60)
        return max(TRAVEL["min_leg_mins"], mins)
    return TRAVEL["fixed_leg_mins"]


def _distance_matrix(landmarks: Sequence[Landmark]) -> np.ndarray:
    """NxN straight-line distances (km)."""
    n = len(landmarks)
    m = np.zeros((n, n))
    for i in range(n):
        for j in range(n):
            if i != j:
                a, b = landmarks[i].location, landmarks[j].location
                m[i][j] = haversine(a.lat, a.lng, b.lat, b.lng)
    return m


def get_travel_matrix(landmarks: Sequence[Landmark], model: str = None) -> np.ndarray:
    """
    Return NxN travel time matrix (minutes) between landmarks.
    Diagonal is zero; the table is symmetric for both models.
    """
    dist = _distance_matrix(landmarks)
    n    = len(landmarks)
    m    = np.zeros((n, n), dtype=int)
    for i in range(n):
        for j in range(n):
            if i != j:
                m[i][j] = estimate_travel_time(dist[i][j], model)
    return m


def visit_minutes(landmarks: Sequence[Landmark]) -> int:
    return sum(l.estimated_duration for l in landmarks)


def travel_minutes(landmarks: Sequence[Landmark], model: str = None) -> int:
    """Sum of legs between consecutive landmarks in visit order."""
    if len(landmarks) < 2:
        return 0
    matrix = get_travel_matrix(landmarks, model)
    return int(sum(matrix[i][i + 1] for i in range(len(landmarks) - 1)))


def estimate_total_time(landmarks: Sequence[Landmark], model: str = None) -> int:
    """
    Total itinerary minutes: visit durations + travel between consecutive stops.
    [] → 0, [L] → L.estimated_duration.
    """
    if not landmarks:
        return 0
    return visit_minutes(landmarks) + travel_minutes(landmarks, model)


def route_distance_km(landmarks: Sequence[Landmark]) -> float:
    """Straight-line length of the ordered route (km), for display."""
    if len(landmarks) < 2:
        return 0.0
    dist = _distance_matrix(landmarks)
    return round(float(sum(dist[i][i + 1] for i in range(len(landmarks) - 1))), 2)


def time_split(landmarks: Sequence[Landmark], model: str = None) -> TimeSplit:
    """Visit vs travel minutes with percentage shares (0 when total is 0)."""
    total  = estimate_total_time(landmarks, model)
    visit  = visit_minutes(landmarks)
    travel = max(total - visit, 0)
    return TimeSplit(
        total_mins=total,
        visit_mins=visit,
        travel_mins=travel,
        pct_visit=round(visit / total * 100, 1) if total > 0 else 0.0,
        pct_travel=round(travel / total * 100, 1) if total > 0 else 0.0
    )


def format_time(minutes: int) -> str:
    """45 → '45m', 180 → '3h', 210 → '3h 30m'."""
    hours, mins = divmod(int(minutes), 60)
    if hours == 0:
        return f"{mins}m"
    if mins == 0:
        return f"{hours}h"
    return f"{hours}h {mins}m"


def total_hours(minutes: int) -> int:
    """Started hours, as billed."""
    return ceil(minutes / 60)
