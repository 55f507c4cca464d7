import logging
from fastapi import APIRouter, Header, HTTPException
from typing import Optional
from config import FirestoreUnavailable
from models.schemas import BookingRequest, UserIdentity
from services.itinerary_state import ItinerarySession
from services.landmark_service import get_landmarks
from services.booking_service import (
    build_booking_record, create_booking, get_booking, check_user_pending_bookings,
)
from services.itinerary_helpers import (
    get_itinerary_summary, get_landmark_names, get_pricing_breakdown_text,
    get_first_landmark_image, has_valid_itinerary,
)

router = APIRouter(prefix="/bookings", tags=["bookings"])

logger = logging.getLogger(__name__)


def _incomplete_reason(session: ItinerarySession) -> str:
    state = session.state
    if state.tour_duration == "2-days":
        missing = "Day 1" if not state.day1_landmarks else "Day 2"
        return f"Please select at least one landmark for {missing} before booking."
    return "Please select at least one landmark for your custom itinerary."


@router.post("/", status_code=201)
def book(
    req:          BookingRequest,
    x_user_id:    Optional[str] = Header(None),
    x_user_email: Optional[str] = Header(None),
    x_user_name:  Optional[str] = Header(None)
):
    """
    Assemble and persist a custom itinerary booking.
    Requires a signed-in user and a bookable itinerary.
    """
    if not x_user_id:
        raise HTTPException(status_code=401, detail="Please sign in to book a custom itinerary.")

    session = ItinerarySession(req.state)
    if not session.can_book:
        raise HTTPException(status_code=422, detail=_incomplete_reason(session))

    user = UserIdentity(uid=x_user_id, email=x_user_email, display_name=x_user_name)
    try:
        if not req.force:
            existing = check_user_pending_bookings(user.uid)
            if existing["hasPending"] or existing["hasConfirmed"]:
                raise HTTPException(status_code=409, detail=existing)

        record = build_booking_record(
            req.state, session.selected_landmarks, user, req.form, req.start_date,
            catalogue=get_landmarks()
        )
        booking_id = create_booking(record)
    except FirestoreUnavailable as exc:
        logger.error("Booking for user %s not saved: %s", user.uid, exc)
        raise HTTPException(status_code=503, detail="Booking storage is unavailable")

    return {"id": booking_id, "booking": record.model_dump(by_alias=True)}


@router.get("/{booking_id}")
def read_booking(booking_id: str):
    """Stored booking plus the display text derived from its itinerary."""
    try:
        booking = get_booking(booking_id)
    except FirestoreUnavailable:
        raise HTTPException(status_code=503, detail="Booking storage is unavailable")
    if booking is None:
        raise HTTPException(status_code=404, detail=f"Booking '{booking_id}' not found")

    return {
        "booking": booking,
        "display": {
            "summary":       get_itinerary_summary(booking),
            "landmarkNames": get_landmark_names(booking),
            "pricingText":   get_pricing_breakdown_text(booking),
            "image":         get_first_landmark_image(booking),
            "valid":         has_valid_itinerary(booking),
        }
    }
