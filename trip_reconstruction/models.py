"""Data models for the itinerary reconstruction engine."""

from __future__ import annotations
import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class TransportMode(str, Enum):
    FLIGHT = "Flight"
    TRAIN = "Train"
    BUS = "Bus"
    CAR_RENTAL = "Car Rental"
    PERSONAL_CAR = "Personal Car"
    CRUISE = "Cruise"


class TripType(str, Enum):
    ONE_WAY = "One-Way"
    ROUND_TRIP = "Round Trip"
    MULTI_CITY = "Multi-City"


class TripStatus(str, Enum):
    UPCOMING = "Upcoming"
    PAST = "Past"


class Decision(str, Enum):
    """Outcome of the segmentation rule table for one incoming leg."""
    MERGE = "merge"
    MERGE_AND_SEAL = "merge_and_seal"
    SEAL_AND_START_NEW = "seal_and_start_new"


def new_id() -> str:
    """Short opaque identifier for records and trips."""
    return uuid.uuid4().hex[:9]


@dataclass
class TransportRecord:
    id: str
    mode: TransportMode
    origin: str  # airport/station code or place name, matched exactly
    destination: str
    departure_date: str = ""  # YYYY-MM-DD
    departure_time: str = ""  # HH:MM, local
    arrival_date: str = ""
    arrival_time: str = ""
    provider: str = ""
    identifier: str = ""  # e.g. flight number
    confirmation_code: str = ""
    itinerary_id: str = ""  # shared by every leg of one synthesized trip
    trip_type: TripType = TripType.ONE_WAY
    # Enrichment, carried through untouched
    travel_class: Optional[str] = None
    seat_number: Optional[str] = None
    seat_type: Optional[str] = None
    origin_lat: Optional[float] = None
    origin_lng: Optional[float] = None
    dest_lat: Optional[float] = None
    dest_lng: Optional[float] = None
    vehicle_model: Optional[str] = None
    cost: Optional[float] = None
    reason: Optional[str] = None


@dataclass
class Trip:
    id: str
    name: str
    location: str
    start_date: str
    end_date: str
    status: TripStatus
    participants: list[str] = field(default_factory=list)
    transports: list[TransportRecord] = field(default_factory=list)
    # Presentation placeholders for the surrounding app
    icon: str = "✈️"
    duration_mode: str = "all_full"
    start_portion: str = "full"
    end_portion: str = "full"
    accommodations: list = field(default_factory=list)
    activities: list = field(default_factory=list)
    locations: list = field(default_factory=list)


@dataclass
class ImportCandidate:
    """An imported trip scored against a trip the user already has."""
    trip: Trip
    confidence: int = 0  # 0-100
    selected: bool = False
