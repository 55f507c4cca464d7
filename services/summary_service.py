# Summary Service: what the itinerary sidebar shows
# Single day: time split, price, breakdown and the full-package nudge.
# Two days: per-day split plus combined per-person and group totals.

from typing import Optional, Sequence
from models.schemas import (
    DaySummary, ItineraryState, ItinerarySummary, Landmark, MultiDayItinerarySummary,
)
from services.distance_service import time_split, format_time, total_hours, route_distance_km
from services.pricing_service import (
    calculate_price, get_pricing_breakdown, is_full_package_better,
    get_multi_day_pricing_breakdown,
)
from services.booking_service import is_day_full


def build_itinerary_summary(
    landmarks:       Sequence[Landmark],
    is_full_package: bool,
    group_size:      int = 1
) -> ItinerarySummary:
    split = time_split(landmarks)
    price = calculate_price(split.total_mins, is_full_package)
    group = max(group_size or 1, 1)
    return ItinerarySummary(
        landmark_count=len(landmarks),
        time=split,
        total_time_label=format_time(split.total_mins),
        total_hours=total_hours(split.total_mins),
        distance_km=route_distance_km(landmarks),
        total_price=price,
        pricing=get_pricing_breakdown(split.total_mins, is_full_package, len(landmarks)),
        suggest_full_package=(
            not is_full_package
            and len(landmarks) > 0
            and is_full_package_better(split.total_mins)
        ),
        group_size=group,
        total_for_group=price * group
    )


def build_multi_day_summary(
    state:      ItineraryState,
    group_size: int = 1,
    catalogue:  Optional[Sequence[Landmark]] = None
) -> MultiDayItinerarySummary:
    day1_full = is_day_full(state.day1_landmarks, state.day1_tour_type, catalogue)
    day2_full = is_day_full(state.day2_landmarks, state.day2_tour_type, catalogue)
    split1    = time_split(state.day1_landmarks)
    split2    = time_split(state.day2_landmarks)

    pricing = get_multi_day_pricing_breakdown(
        split1.total_mins, split2.total_mins,
        day1_full, day2_full,
        len(state.day1_landmarks), len(state.day2_landmarks)
    )
    group    = max(group_size or 1, 1)
    combined = split1.total_mins + split2.total_mins

    return MultiDayItinerarySummary(
        days=[
            DaySummary(
                day=1, tour_type=state.day1_tour_type,
                landmark_count=len(state.day1_landmarks), time=split1,
                hours=total_hours(split1.total_mins), is_full_package=day1_full
            ),
            DaySummary(
                day=2, tour_type=state.day2_tour_type,
                landmark_count=len(state.day2_landmarks), time=split2,
                hours=total_hours(split2.total_mins), is_full_package=day2_full
            ),
        ],
        combined_mins=combined,
        combined_label=format_time(combined),
        per_person=pricing.total_price,
        group_size=group,
        total_for_group=pricing.total_price * group,
        pricing=pricing
    )
