# Itinerary Helpers: reading stored custom-tour bookings
# Bookings keep the itinerary as a JSON string (`itineraryDetails`).
# These helpers parse it back and derive the text shown in booking lists.

import json
import logging
from math import ceil
from typing import Dict, List, Optional, Union
from pydantic import ValidationError
from config import CUSTOM_BOOKING_TYPE, PRICING
from models.schemas import ItineraryDetails, MultiDayItineraryDetails, ItineraryLandmark

logger = logging.getLogger(__name__)

Details = Union[ItineraryDetails, MultiDayItineraryDetails]


def is_custom_tour(booking: Dict) -> bool:
    return booking.get("bookingType") == CUSTOM_BOOKING_TYPE


def parse_itinerary_details(booking: Dict) -> Optional[Details]:
    """Stored JSON → details model; None for other booking types or bad data."""
    raw = booking.get("itineraryDetails")
    if not is_custom_tour(booking) or not raw:
        return None
    try:
        data = json.loads(raw) if isinstance(raw, str) else raw
        if "days" in data:
            return MultiDayItineraryDetails.model_validate(data)
        return ItineraryDetails.model_validate(data)
    except (ValueError, TypeError, ValidationError) as exc:
        logger.warning("Unparseable itinerary on booking %s: %s", booking.get("id"), exc)
        return None


def _sorted(landmarks: List[ItineraryLandmark]) -> List[ItineraryLandmark]:
    return sorted(landmarks, key=lambda l: l.order)


def _plural(n: int) -> str:
    return "" if n == 1 else "s"


def get_first_landmark_image(booking: Dict) -> Optional[str]:
    details = parse_itinerary_details(booking)
    if details is None:
        return None
    if isinstance(details, MultiDayItineraryDetails):
        if not details.days:
            return None
        day1 = next((d for d in details.days if d.day == 1), details.days[0])
        landmarks = day1.landmarks
    else:
        landmarks = details.landmarks
    return _sorted(landmarks)[0].image if landmarks else None


def get_itinerary_summary(booking: Dict) -> str:
    details = parse_itinerary_details(booking)
    if details is None:
        return "Custom DIY Tour"
    if isinstance(details, MultiDayItineraryDetails):
        count = sum(len(d.landmarks) for d in details.days)
        hours = ceil(sum(d.total_time for d in details.days) / 60)
        label = "2-Day" if details.duration == "2-days" else "1-Day"
        return f"{label} • {count} landmark{_plural(count)} • {hours}h total"
    count = len(details.landmarks)
    hours = ceil(details.total_time / 60)
    return f"{count} landmark{_plural(count)} • {hours}h tour"


def get_landmark_names(booking: Dict, max_display: int = 3) -> str:
    """First few landmark names in visit order, then 'and N more'."""
    details = parse_itinerary_details(booking)
    if details is None:
        return "Custom DIY Tour"
    if isinstance(details, MultiDayItineraryDetails):
        names = [
            l.name
            for d in sorted(details.days, key=lambda d: d.day)
            for l in _sorted(d.landmarks)
        ]
    else:
        names = [l.name for l in _sorted(details.landmarks)]

    if len(names) <= max_display:
        return ", ".join(names)
    return f"{', '.join(names[:max_display])} and {len(names) - max_display} more"


def get_pricing_breakdown_text(booking: Dict) -> str:
    details = parse_itinerary_details(booking)
    if details is None:
        return ""
    if isinstance(details, MultiDayItineraryDetails):
        if details.is_full_package:
            return "2-Day Full Package"
        hours = [ceil(d.total_time / 60) for d in details.days]
        return " • ".join(f"Day {i + 1}: {h}h" for i, h in enumerate(hours))
    if details.is_full_package:
        return "Full Package Deal"

    base  = PRICING["base_hours"]
    hours = ceil(details.total_time / 60)
    if hours <= base:
        return f"Base Rate ({base}h)"
    return f"Base {base}h + {hours - base}h additional"


def has_valid_itinerary(booking: Dict) -> bool:
    details = parse_itinerary_details(booking)
    if details is None:
        return False
    if isinstance(details, MultiDayItineraryDetails):
        return any(d.landmarks for d in details.days)
    return bool(details.landmarks)
