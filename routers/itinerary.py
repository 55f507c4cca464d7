from fastapi import APIRouter, HTTPException, Query
from pydantic import ValidationError
from models.schemas import DispatchRequest, DispatchResponse, SummaryRequest
from services.itinerary_state import (
    ItinerarySession, parse_action,
)
from services.landmark_service import get_landmarks
from services.pricing_service import (
    get_pricing_breakdown, is_full_package_better, get_pricing_constants,
)
from services.summary_service import build_itinerary_summary, build_multi_day_summary

router = APIRouter(prefix="/itinerary", tags=["itinerary"])


@router.post("/dispatch", response_model=DispatchResponse)
def dispatch(req: DispatchRequest):
    """
    Apply one wizard action to the client-held state.
    Unknown action types leave the state unchanged.
    """
    try:
        action = parse_action(req.action)
    except ValidationError as exc:
        raise HTTPException(status_code=422, detail=exc.errors(include_url=False, include_context=False))

    session = ItinerarySession(req.state)
    session.dispatch(action)
    return DispatchResponse(
        state=session.state,
        selected_landmarks=session.selected_landmarks,
        can_proceed_to_itinerary=session.can_proceed_to_itinerary,
        can_book=session.can_book
    )


@router.post("/summary")
def summary(req: SummaryRequest):
    """Sidebar summary: the active day for 1-day tours, both days for 2-day tours."""
    session = ItinerarySession(req.state)
    if req.state.tour_duration == "2-days":
        return build_multi_day_summary(req.state, req.group_size, get_landmarks())
    return build_itinerary_summary(
        session.selected_landmarks, req.state.is_full_package, req.group_size
    )


@router.get("/pricing")
def pricing(
    minutes:      int  = Query(..., ge=0),
    full_package: bool = Query(False, alias="fullPackage"),
    landmarks:    int  = Query(0, ge=0)
):
    """Price breakdown for a duration, with the full-package advisory."""
    return {
        "breakdown":           get_pricing_breakdown(minutes, full_package, landmarks).model_dump(by_alias=True),
        "fullPackageIsBetter": is_full_package_better(minutes),
        "constants":           get_pricing_constants()
    }
