import re
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel
from typing import List, Optional, Literal, Union, Dict, Any, Annotated

from config import BOOKING_LIMITS

TourType     = Literal["cebu-city", "mountain"]
TourDuration = Literal["1-day", "2-days"]
Step         = Literal["duration", "tour-type", "itinerary"]
DayNumber    = Literal[1, 2]


class CamelModel(BaseModel):
    """Snake-case attributes, camelCase on the wire."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ── Reference data ──────────────────────────────────────────────────

class Location(CamelModel):
    lat: float
    lng: float


class Landmark(CamelModel):
    id:                 str
    name:               str
    description:        str = ""
    image:              str = ""
    location:           Location
    estimated_duration: int = Field(gt=0)
    category:           Literal["Historical", "Religious", "Cultural", "Nature"]
    tour_type:          TourType


# ── Itinerary state ─────────────────────────────────────────────────

class ItineraryState(CamelModel):
    current_step:    Step = "duration"
    tour_duration:   Optional[TourDuration] = None
    day1_tour_type:  Optional[TourType] = None
    day2_tour_type:  Optional[TourType] = None
    current_day:     DayNumber = 1
    day1_landmarks:  List[Landmark] = []
    day2_landmarks:  List[Landmark] = []
    is_full_package: bool = False


class SetStep(CamelModel):
    type:    Literal["SET_STEP"] = "SET_STEP"
    payload: Step


class SetDuration(CamelModel):
    type:    Literal["SET_DURATION"] = "SET_DURATION"
    payload: TourDuration


class SetDay1TourType(CamelModel):
    type:    Literal["SET_DAY1_TOUR_TYPE"] = "SET_DAY1_TOUR_TYPE"
    payload: TourType


class SetDay2TourType(CamelModel):
    type:    Literal["SET_DAY2_TOUR_TYPE"] = "SET_DAY2_TOUR_TYPE"
    payload: TourType


class SetCurrentDay(CamelModel):
    type:    Literal["SET_CURRENT_DAY"] = "SET_CURRENT_DAY"
    payload: DayNumber


class LandmarkRef(CamelModel):
    landmark: Landmark
    day:      Optional[DayNumber] = None


class LandmarkIdRef(CamelModel):
    landmark_id: str
    day:         Optional[DayNumber] = None


class LandmarkList(CamelModel):
    landmarks: List[Landmark]
    day:       Optional[DayNumber] = None


class ToggleLandmark(CamelModel):
    type:    Literal["TOGGLE_LANDMARK"] = "TOGGLE_LANDMARK"
    payload: LandmarkRef


class SetDay1Landmarks(CamelModel):
    type:    Literal["SET_DAY1_LANDMARKS"] = "SET_DAY1_LANDMARKS"
    payload: List[Landmark]


class SetDay2Landmarks(CamelModel):
    type:    Literal["SET_DAY2_LANDMARKS"] = "SET_DAY2_LANDMARKS"
    payload: List[Landmark]


class RemoveLandmark(CamelModel):
    type:    Literal["REMOVE_LANDMARK"] = "REMOVE_LANDMARK"
    payload: LandmarkIdRef


class ReorderLandmarks(CamelModel):
    type:    Literal["REORDER_LANDMARKS"] = "REORDER_LANDMARKS"
    payload: LandmarkList


class ToggleFullPackage(CamelModel):
    type: Literal["TOGGLE_FULL_PACKAGE"] = "TOGGLE_FULL_PACKAGE"


class SelectAll(CamelModel):
    type:    Literal["SELECT_ALL"] = "SELECT_ALL"
    payload: LandmarkList


class Reset(CamelModel):
    type: Literal["RESET"] = "RESET"


ItineraryAction = Annotated[
    Union[
        SetStep, SetDuration, SetDay1TourType, SetDay2TourType, SetCurrentDay,
        ToggleLandmark, SetDay1Landmarks, SetDay2Landmarks, RemoveLandmark,
        ReorderLandmarks, ToggleFullPackage, SelectAll, Reset,
    ],
    Field(discriminator="type"),
]


# ── Pricing ─────────────────────────────────────────────────────────

class PricingBreakdown(CamelModel):
    type:             Literal["full-package", "hourly"]
    base_rate:        int
    base_hours:       int
    additional_hours: int
    additional_cost:  int
    total_price:      int
    savings:          int
    description:      str


class MultiDayPricingBreakdown(CamelModel):
    type:        Literal["full-package-2day", "2day-hourly", "2day-mixed"]
    day1:        PricingBreakdown
    day2:        PricingBreakdown
    day1_hours:  int
    day2_hours:  int
    total_hours: int
    total_price: int
    savings:     int
    description: str


# ── Booking payload ─────────────────────────────────────────────────

class ItineraryLandmark(CamelModel):
    id:       str
    name:     str
    image:    str
    duration: int
    order:    int


class ItineraryDetails(CamelModel):
    landmarks:       List[ItineraryLandmark]
    total_time:      int
    total_price:     int
    is_full_package: bool


class DayItineraryPlan(CamelModel):
    day:        DayNumber
    tour_type:  TourType
    landmarks:  List[ItineraryLandmark]
    total_time: int


class MultiDayItineraryDetails(CamelModel):
    duration:        TourDuration = "2-days"
    days:            List[DayItineraryPlan]
    total_price:     int
    is_full_package: bool


class UserIdentity(CamelModel):
    uid:          str
    email:        Optional[str] = None
    display_name: Optional[str] = None


NAME_RE   = re.compile(r"^[A-Za-zÀ-ÿ\s.'-]+$")
EMAIL_RE  = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PHONE_RE  = re.compile(r"^[\d\s+()-]{7,20}$")
UNSAFE_RE = re.compile(r"<script|javascript:|data:|vbscript:|on\w+\s*=", re.IGNORECASE)


class BookingForm(CamelModel):
    name:                     str
    email:                    str
    phone:                    str
    phone_country_code:       str = "PH"
    group_size:               int = Field(ge=BOOKING_LIMITS["min_group_size"],
                                          le=BOOKING_LIMITS["max_group_size"])
    special_requests:         str = Field("", max_length=BOOKING_LIMITS["max_special_requests"])
    booking_type:             Literal["self", "guest"] = "self"
    guest_name:               str = ""
    guest_email:              str = ""
    guest_phone:              str = ""
    guest_phone_country_code: str = "PH"

    @field_validator("name", "email", "phone", "special_requests",
                     "guest_name", "guest_email", "guest_phone")
    @classmethod
    def _strip(cls, v: str) -> str:
        return v.strip()

    @field_validator("name")
    @classmethod
    def _check_name(cls, v: str) -> str:
        if not 2 <= len(v) <= 100 or not NAME_RE.match(v):
            raise ValueError("Name must be 2-100 letters, spaces, or .'-")
        return v

    @field_validator("email")
    @classmethod
    def _check_email(cls, v: str) -> str:
        if not EMAIL_RE.match(v):
            raise ValueError("Please enter a valid email address")
        return v.lower()

    @field_validator("phone")
    @classmethod
    def _check_phone(cls, v: str) -> str:
        if not PHONE_RE.match(v):
            raise ValueError("Please enter a valid phone number")
        return v

    @field_validator("special_requests")
    @classmethod
    def _check_requests(cls, v: str) -> str:
        if v and UNSAFE_RE.search(v):
            raise ValueError("Special requests contain potentially unsafe content")
        return v

    @model_validator(mode="after")
    def _check_guest(self) -> "BookingForm":
        if self.booking_type == "guest":
            if not self.guest_name:
                raise ValueError("Guest name is required when booking for someone else")
            if not EMAIL_RE.match(self.guest_email):
                raise ValueError("A valid guest email is required when booking for someone else")
        return self


class BookingRecord(CamelModel):
    user_id:                  str
    user_email:               str = ""
    user_name:                str = ""
    tour_id:                  str
    booking_type:             str
    start_date:               datetime
    end_date:                 datetime
    group_size:               int
    total_price:              int
    status:                   Literal["pending", "confirmed", "cancelled", "completed"] = "pending"
    special_requests:         str = ""
    itinerary_details:        Optional[str] = None   # JSON string for custom tours
    contact_phone:            str = ""
    phone_country_code:       str = "PH"
    customizations:           Optional[str] = None
    guest_name:               Optional[str] = None
    guest_email:              Optional[str] = None
    guest_phone:              Optional[str] = None
    guest_phone_country_code: Optional[str] = None


# ── Summaries ───────────────────────────────────────────────────────

class TimeSplit(CamelModel):
    total_mins:   int
    visit_mins:   int
    travel_mins:  int
    pct_visit:    float
    pct_travel:   float


class ItinerarySummary(CamelModel):
    landmark_count:         int
    time:                   TimeSplit
    total_time_label:       str
    total_hours:            int
    distance_km:            float
    total_price:            int
    pricing:                PricingBreakdown
    suggest_full_package:   bool
    group_size:             int = 1
    total_for_group:        int = 0


class DaySummary(CamelModel):
    day:             DayNumber
    tour_type:       Optional[TourType] = None
    landmark_count:  int
    time:            TimeSplit
    hours:           int
    is_full_package: bool


class MultiDayItinerarySummary(CamelModel):
    days:            List[DaySummary]
    combined_mins:   int
    combined_label:  str
    per_person:      int
    group_size:      int
    total_for_group: int
    pricing:         MultiDayPricingBreakdown


# ── API bodies ──────────────────────────────────────────────────────

class DispatchRequest(CamelModel):
    state:  ItineraryState = ItineraryState()
    action: Dict[str, Any]


class DispatchResponse(CamelModel):
    state:                     ItineraryState
    selected_landmarks:        List[Landmark]
    can_proceed_to_itinerary:  bool
    can_book:                  bool


class SummaryRequest(CamelModel):
    state:      ItineraryState
    group_size: int = Field(1, ge=1)


class BookingRequest(CamelModel):
    state:      ItineraryState
    form:       BookingForm
    start_date: datetime
    force:      bool = False
