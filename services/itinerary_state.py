# Itinerary State: reducer for the custom tour wizard
# duration → tour-type → itinerary, with per-day landmark lists.
# The reducer is pure and total: every action returns a new state
# (or the same state for unknown actions) and never raises.

import logging
from typing import Any, Callable, Dict, List, Optional
from pydantic import TypeAdapter, ValidationError
from models.schemas import (
    ItineraryState, ItineraryAction, Landmark,
    SetStep, SetDuration, SetDay1TourType, SetDay2TourType, SetCurrentDay,
    ToggleLandmark, SetDay1Landmarks, SetDay2Landmarks, RemoveLandmark,
    ReorderLandmarks, ToggleFullPackage, SelectAll, Reset,
)

logger = logging.getLogger(__name__)

_action_adapter = TypeAdapter(ItineraryAction)


def initial_state() -> ItineraryState:
    return ItineraryState()


def parse_action(payload: Dict[str, Any]) -> Optional[ItineraryAction]:
    """
    Build a typed action from a JSON object.
    Returns None for an unknown `type` so the reducer treats it as a no-op;
    a known type with a malformed payload raises ValidationError.
    """
    try:
        return _action_adapter.validate_python(payload)
    except ValidationError as exc:
        if any(e["type"] in ("union_tag_invalid", "union_tag_not_found") for e in exc.errors()):
            logger.debug("Ignoring unknown itinerary action %r", payload.get("type"))
            return None
        raise


# ── Helpers ─────────────────────────────────────────────────────────

def _day_key(state: ItineraryState, day: Optional[int]) -> str:
    target = day or state.current_day
    return "day1_landmarks" if target == 1 else "day2_landmarks"


def _toggle(landmarks: List[Landmark], landmark: Landmark) -> List[Landmark]:
    if any(l.id == landmark.id for l in landmarks):
        return [l for l in landmarks if l.id != landmark.id]
    return landmarks + [landmark]


def _without(landmarks: List[Landmark], landmark_id: str) -> List[Landmark]:
    return [l for l in landmarks if l.id != landmark_id]


def _is_two_day(state: ItineraryState) -> bool:
    return state.tour_duration == "2-days"


# ── Reducer ─────────────────────────────────────────────────────────

def itinerary_reducer(state: ItineraryState, action: Optional[ItineraryAction]) -> ItineraryState:
    if isinstance(action, SetStep):
        return state.model_copy(update={"current_step": action.payload})

    if isinstance(action, SetDuration):
        update = {"tour_duration": action.payload, "current_step": "tour-type"}
        if action.payload == "1-day":
            # day-2 selections are meaningless for a 1-day tour
            update.update(day2_landmarks=[], day2_tour_type=None, current_day=1)
        return state.model_copy(update=update)

    if isinstance(action, SetDay1TourType):
        return state.model_copy(update={"day1_tour_type": action.payload})

    if isinstance(action, SetDay2TourType):
        return state.model_copy(update={"day2_tour_type": action.payload})

    if isinstance(action, SetCurrentDay):
        return state.model_copy(update={"current_day": action.payload})

    if isinstance(action, ToggleLandmark):
        landmark, day = action.payload.landmark, action.payload.day
        if _is_two_day(state):
            key = _day_key(state, day)
            return state.model_copy(update={key: _toggle(getattr(state, key), landmark)})
        return state.model_copy(update={
            "day1_landmarks":  _toggle(state.day1_landmarks, landmark),
            "is_full_package": False,
        })

    if isinstance(action, SetDay1Landmarks):
        return state.model_copy(update={"day1_landmarks": list(action.payload)})

    if isinstance(action, SetDay2Landmarks):
        if state.tour_duration == "1-day":
            return state
        return state.model_copy(update={"day2_landmarks": list(action.payload)})

    if isinstance(action, RemoveLandmark):
        landmark_id, day = action.payload.landmark_id, action.payload.day
        if _is_two_day(state):
            key = _day_key(state, day)
            return state.model_copy(update={key: _without(getattr(state, key), landmark_id)})
        return state.model_copy(update={
            "day1_landmarks":  _without(state.day1_landmarks, landmark_id),
            "is_full_package": False,
        })

    if isinstance(action, ReorderLandmarks):
        # Set membership is the caller's contract; the list is taken verbatim
        landmarks = list(action.payload.landmarks)
        key = _day_key(state, action.payload.day) if _is_two_day(state) else "day1_landmarks"
        return state.model_copy(update={key: landmarks})

    if isinstance(action, ToggleFullPackage):
        return state.model_copy(update={"is_full_package": not state.is_full_package})

    if isinstance(action, SelectAll):
        landmarks = list(action.payload.landmarks)
        if _is_two_day(state):
            return state.model_copy(update={_day_key(state, action.payload.day): landmarks})
        if state.is_full_package:
            # second select-all on a 1-day tour deselects everything
            return state.model_copy(update={"day1_landmarks": [], "is_full_package": False})
        return state.model_copy(update={
            "day1_landmarks":  landmarks,
            "is_full_package": len(landmarks) > 0,
        })

    if isinstance(action, Reset):
        return initial_state()

    return state


# ── Selectors ───────────────────────────────────────────────────────

def selected_landmarks(state: ItineraryState) -> List[Landmark]:
    if _is_two_day(state):
        return state.day1_landmarks if state.current_day == 1 else state.day2_landmarks
    return state.day1_landmarks


def can_proceed_to_itinerary(state: ItineraryState) -> bool:
    if not state.tour_duration or not state.day1_tour_type:
        return False
    if _is_two_day(state) and not state.day2_tour_type:
        return False
    return True


def can_book(state: ItineraryState) -> bool:
    if _is_two_day(state):
        return len(state.day1_landmarks) > 0 and len(state.day2_landmarks) > 0
    return len(state.day1_landmarks) > 0


def _same(a: tuple, b: tuple) -> bool:
    # lists compare by identity: the reducer replaces a list whenever it changes
    return len(a) == len(b) and all(
        x is y if isinstance(x, list) else x == y for x, y in zip(a, b)
    )


class ItinerarySession:
    """
    One user's wizard session. Owns its state; derived values are
    memoized and recomputed only when their dependencies change.
    """

    def __init__(self, state: Optional[ItineraryState] = None):
        self.state = state if state is not None else initial_state()
        self._memo: Dict[str, tuple] = {}

    def dispatch(self, action: Optional[ItineraryAction]) -> ItineraryState:
        logger.debug("dispatch %s", getattr(action, "type", None))
        self.state = itinerary_reducer(self.state, action)
        return self.state

    def _memoized(self, name: str, deps: tuple, compute: Callable[[ItineraryState], Any]) -> Any:
        cached = self._memo.get(name)
        if cached is not None and _same(cached[0], deps):
            return cached[1]
        value = compute(self.state)
        self._memo[name] = (deps, value)
        return value

    @property
    def selected_landmarks(self) -> List[Landmark]:
        s = self.state
        return self._memoized(
            "selected_landmarks",
            (s.tour_duration, s.current_day, s.day1_landmarks, s.day2_landmarks),
            selected_landmarks
        )

    @property
    def can_proceed_to_itinerary(self) -> bool:
        s = self.state
        return self._memoized(
            "can_proceed_to_itinerary",
            (s.tour_duration, s.day1_tour_type, s.day2_tour_type),
            can_proceed_to_itinerary
        )

    @property
    def can_book(self) -> bool:
        s = self.state
        return self._memoized(
            "can_book",
            (s.tour_duration, s.day1_landmarks, s.day2_landmarks),
            can_book
        )
