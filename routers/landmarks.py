from fastapi import APIRouter, HTTPException, Query
from typing import Dict, List, Optional
from models.schemas import Landmark, TourType
from services.landmark_service import get_landmarks, get_landmark, landmarks_by_tour_type

router = APIRouter(prefix="/landmarks", tags=["landmarks"])


@router.get("/", response_model=List[Landmark])
def list_landmarks(tour_type: Optional[TourType] = Query(None, alias="tourType")):
    """Return the landmark catalogue, optionally for one tour type."""
    return get_landmarks(tour_type)


@router.get("/by-tour-type", response_model=Dict[str, List[Landmark]])
def grouped_landmarks():
    """Catalogue partitioned into cebu-city and mountain."""
    return landmarks_by_tour_type(get_landmarks())


@router.get("/{landmark_id}", response_model=Landmark)
def read_landmark(landmark_id: str):
    landmark = get_landmark(landmark_id)
    if landmark is None:
        raise HTTPException(status_code=404, detail=f"Landmark '{landmark_id}' not found")
    return landmark
