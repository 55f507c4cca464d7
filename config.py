import os
import logging
import firebase_admin
from firebase_admin import credentials, firestore
from dotenv import load_dotenv

load_dotenv()

FIREBASE_CREDENTIALS = os.getenv("FIREBASE_CREDENTIALS", "serviceAccountKey.json")
LOG_LEVEL            = os.getenv("LOG_LEVEL", "INFO").upper()
TRAVEL_MODEL         = os.getenv("TRAVEL_MODEL", "fixed")          # fixed | haversine
AVERAGE_SPEED_KMH    = float(os.getenv("AVERAGE_SPEED_KMH", "20"))

logger = logging.getLogger(__name__)


class FirestoreUnavailable(RuntimeError):
    """Raised when Firestore cannot be reached or is not configured."""


_db = None


def get_db():
    """
    Return the Firestore client, initializing Firebase on first use.
    Raises FirestoreUnavailable if the service account file is missing.
    """
    global _db
    if _db is not None:
        return _db

    if not firebase_admin._apps:
        if not os.path.exists(FIREBASE_CREDENTIALS):
            raise FirestoreUnavailable(
                f"Firebase credentials not found at '{FIREBASE_CREDENTIALS}'"
            )
        cred = credentials.Certificate(FIREBASE_CREDENTIALS)
        firebase_admin.initialize_app(cred)
        logger.info("Firebase app initialized from %s", FIREBASE_CREDENTIALS)

    _db = firestore.client()
    return _db


# ── Collections ──────────────────────────────────────────────────
LANDMARKS_COLLECTION = "landmarks"
BOOKINGS_COLLECTION  = "bookings"

# ── Custom itinerary pricing (PHP, per person) ──────────────────
PRICING = {
    "base_rate":         2000,   # covers the first base_hours
    "base_hours":        3,
    "hourly_rate":       500,    # per additional started hour
    "full_package_rate": 4000,   # all landmarks of one tour type, one day
}

# ── Travel time between consecutive landmarks ───────────────────
TRAVEL = {
    "fixed_leg_mins": 20,   # static estimate for city traffic
    "min_leg_mins":   5,
}

# ── Booking limits ───────────────────────────────────────────────
BOOKING_LIMITS = {
    "min_group_size":       1,
    "max_group_size":       50,
    "max_special_requests": 1000,
}

CUSTOM_TOUR_ID      = "custom-itinerary"
CUSTOM_BOOKING_TYPE = "custom-tour"
