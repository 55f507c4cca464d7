import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from config import LOG_LEVEL
from routers import landmarks, itinerary, bookings

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)

app = FastAPI(
    title="Custom Itinerary Builder (Cebu)",
    description="Landmark selection, time estimation and pricing for DIY tours, backed by Firebase Firestore",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"]
)

app.include_router(landmarks.router)
app.include_router(itinerary.router)
app.include_router(bookings.router)


@app.get("/")
def root():
    return {
        "status":  "ok",
        "message": "Custom itinerary API is running",
        "docs":    "/docs"
    }
