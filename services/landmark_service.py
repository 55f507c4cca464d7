# Landmark Service: Firebase Firestore
# Read-only landmark catalogue for the itinerary builder.
# Landmarks are created/edited by the admin side; here we only list them,
# partitioned by tour type. Falls back to the bundled catalogue when
# Firestore is not configured.

import logging
from config import get_db, FirestoreUnavailable, LANDMARKS_COLLECTION
from data.landmarks import LANDMARKS
from models.schemas import Landmark, TourType
from google.cloud.firestore_v1.base_query import FieldFilter
from pydantic import ValidationError
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)


def _get_landmarks_ref():
    return get_db().collection(LANDMARKS_COLLECTION)


def _from_doc(doc) -> Optional[Landmark]:
    """Firestore document → Landmark. Skips documents that fail validation."""
    data       = doc.to_dict() or {}
    data["id"] = doc.id
    try:
        return Landmark.model_validate(data)
    except ValidationError as exc:
        logger.warning("Skipping malformed landmark %s: %s", doc.id, exc)
        return None


def _fallback(tour_type: Optional[str]) -> List[Landmark]:
    landmarks = [Landmark.model_validate(l) for l in LANDMARKS]
    if tour_type:
        landmarks = [l for l in landmarks if l.tour_type == tour_type]
    return sorted(landmarks, key=lambda l: l.name)


def get_landmarks(tour_type: Optional[TourType] = None) -> List[Landmark]:
    """
    All landmarks ordered by name, optionally for one tour type.
    Uses the bundled catalogue if Firestore is unavailable.
    """
    try:
        ref = _get_landmarks_ref()
    except FirestoreUnavailable as exc:
        logger.warning("Using bundled landmark catalogue: %s", exc)
        return _fallback(tour_type)

    query = ref
    if tour_type:
        query = query.where(filter=FieldFilter("tourType", "==", tour_type))

    landmarks = [l for l in (_from_doc(d) for d in query.stream()) if l is not None]
    return sorted(landmarks, key=lambda l: l.name)


def get_landmark(landmark_id: str) -> Optional[Landmark]:
    try:
        ref = _get_landmarks_ref()
    except FirestoreUnavailable:
        return next((l for l in _fallback(None) if l.id == landmark_id), None)

    doc = ref.document(landmark_id).get()
    return _from_doc(doc) if doc.exists else None


def landmarks_by_tour_type(landmarks: List[Landmark]) -> Dict[str, List[Landmark]]:
    """Partition a catalogue by tour type, keeping order."""
    groups: Dict[str, List[Landmark]] = {"cebu-city": [], "mountain": []}
    for l in landmarks:
        groups.setdefault(l.tour_type, []).append(l)
    return groups
