# Booking Service: payload assembly + Firestore persistence
# Turns the final itinerary state into an ItineraryDetails (1-day) or
# MultiDayItineraryDetails (2-days) snapshot, wraps it in a booking
# record, and writes it to the `bookings` collection.
# Preconditions (can_book, signed-in user) are checked by the caller.

import json
import logging
from datetime import datetime, timedelta
from typing import Dict, List, Optional, Sequence, Union
from google.cloud import firestore
from google.cloud.firestore_v1.base_query import FieldFilter

from config import get_db, BOOKINGS_COLLECTION, CUSTOM_TOUR_ID, CUSTOM_BOOKING_TYPE
from models.schemas import (
    BookingForm, BookingRecord, DayItineraryPlan, ItineraryDetails,
    ItineraryLandmark, ItineraryState, Landmark, MultiDayItineraryDetails,
    UserIdentity,
)
from services.distance_service import estimate_total_time
from services.pricing_service import (
    calculate_price, calculate_multi_day_price, calculate_mixed_day_price,
)

logger = logging.getLogger(__name__)

Details = Union[ItineraryDetails, MultiDayItineraryDetails]


def _to_itinerary_landmarks(landmarks: Sequence[Landmark]) -> List[ItineraryLandmark]:
    # order is the position chosen by the user, 1-based
    return [
        ItineraryLandmark(
            id=l.id,
            name=l.name,
            image=l.image,
            duration=l.estimated_duration,
            order=idx + 1
        )
        for idx, l in enumerate(landmarks)
    ]


def ordered_ids(landmarks: Sequence[Landmark]) -> List[str]:
    return [l.id for l in landmarks]


def is_day_full(
    landmarks: Sequence[Landmark],
    tour_type: Optional[str],
    catalogue: Optional[Sequence[Landmark]]
) -> bool:
    """A day is a full package when it holds every catalogue landmark of its tour type."""
    if not catalogue or not landmarks or not tour_type:
        return False
    available = {l.id for l in catalogue if l.tour_type == tour_type}
    return bool(available) and {l.id for l in landmarks} == available


def assemble_itinerary_details(
    state:              ItineraryState,
    selected_landmarks: Sequence[Landmark],
    catalogue:          Optional[Sequence[Landmark]] = None
) -> Details:
    """
    Snapshot the itinerary for storage.
    2-day tours use both day lists regardless of which day is being viewed;
    without both tour types chosen the selected list is stored as one day.
    totalPrice is per person.
    """
    if state.tour_duration == "2-days" and state.day1_tour_type and state.day2_tour_type:
        day1_mins = estimate_total_time(state.day1_landmarks)
        day2_mins = estimate_total_time(state.day2_landmarks)
        day1_full = is_day_full(state.day1_landmarks, state.day1_tour_type, catalogue)
        day2_full = is_day_full(state.day2_landmarks, state.day2_tour_type, catalogue)

        if day1_full == day2_full:
            price = calculate_multi_day_price(day1_mins, day2_mins, day1_full and day2_full)
        else:
            price = calculate_mixed_day_price(day1_mins, day1_full, day2_mins, day2_full)

        return MultiDayItineraryDetails(
            duration="2-days",
            days=[
                DayItineraryPlan(
                    day=1,
                    tour_type=state.day1_tour_type,
                    landmarks=_to_itinerary_landmarks(state.day1_landmarks),
                    total_time=day1_mins
                ),
                DayItineraryPlan(
                    day=2,
                    tour_type=state.day2_tour_type,
                    landmarks=_to_itinerary_landmarks(state.day2_landmarks),
                    total_time=day2_mins
                ),
            ],
            total_price=price,
            is_full_package=day1_full and day2_full
        )

    total_mins = estimate_total_time(selected_landmarks)
    return ItineraryDetails(
        landmarks=_to_itinerary_landmarks(selected_landmarks),
        total_time=total_mins,
        total_price=calculate_price(total_mins, state.is_full_package),
        is_full_package=state.is_full_package
    )


def build_booking_record(
    state:              ItineraryState,
    selected_landmarks: Sequence[Landmark],
    user:               UserIdentity,
    form:               BookingForm,
    start_date:         datetime,
    catalogue:          Optional[Sequence[Landmark]] = None
) -> BookingRecord:
    """Booking metadata + serialized itinerary; totalPrice covers the whole group."""
    details  = assemble_itinerary_details(state, selected_landmarks, catalogue)
    two_days = state.tour_duration == "2-days"

    record = BookingRecord(
        user_id=user.uid,
        user_email=user.email or "",
        user_name=user.display_name or "",
        tour_id=CUSTOM_TOUR_ID,
        booking_type=CUSTOM_BOOKING_TYPE,
        start_date=start_date,
        end_date=start_date + timedelta(days=1) if two_days else start_date,
        group_size=form.group_size,
        total_price=details.total_price * form.group_size,
        status="pending",
        special_requests=form.special_requests,
        itinerary_details=details.model_dump_json(by_alias=True),
        contact_phone=form.phone,
        phone_country_code=form.phone_country_code or "PH",
        customizations=json.dumps({
            "landmarks":     ordered_ids(selected_landmarks),
            "isFullPackage": state.is_full_package,
            "totalTime":     estimate_total_time(selected_landmarks),
        })
    )

    if form.booking_type == "guest":
        record = record.model_copy(update={
            "guest_name":               form.guest_name,
            "guest_email":              form.guest_email,
            "guest_phone":              form.guest_phone,
            "guest_phone_country_code": form.guest_phone_country_code or "PH",
        })
    return record


# ── Persistence ─────────────────────────────────────────────────────

def _get_bookings_ref():
    return get_db().collection(BOOKINGS_COLLECTION)


def create_booking(record: BookingRecord) -> str:
    """Write the booking; returns the new document id."""
    data = record.model_dump(by_alias=True, exclude_none=True)
    data["createdAt"] = firestore.SERVER_TIMESTAMP
    data["updatedAt"] = firestore.SERVER_TIMESTAMP

    _, doc_ref = _get_bookings_ref().add(data)
    logger.info(
        "Created %s booking %s for user %s (group %d, total %d)",
        record.booking_type, doc_ref.id, record.user_id, record.group_size, record.total_price
    )
    return doc_ref.id


def get_booking(booking_id: str) -> Optional[Dict]:
    doc = _get_bookings_ref().document(booking_id).get()
    if not doc.exists:
        return None
    booking       = doc.to_dict()
    booking["id"] = doc.id
    return booking


def check_user_pending_bookings(user_id: str) -> Dict:
    """Existing pending/confirmed custom-tour bookings for this user."""
    query = (
        _get_bookings_ref()
        .where(filter=FieldFilter("userId", "==", user_id))
        .where(filter=FieldFilter("bookingType", "==", CUSTOM_BOOKING_TYPE))
        .where(filter=FieldFilter("status", "in", ["pending", "confirmed"]))
    )
    bookings = []
    for doc in query.stream():
        b       = doc.to_dict()
        b["id"] = doc.id
        bookings.append(b)

    pending   = [b for b in bookings if b.get("status") == "pending"]
    confirmed = [b for b in bookings if b.get("status") == "confirmed"]
    return {
        "hasPending":     bool(pending),
        "hasConfirmed":   bool(confirmed),
        "pendingCount":   len(pending),
        "confirmedCount": len(confirmed),
        "bookingIds":     [b["id"] for b in bookings],
    }
