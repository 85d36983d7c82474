"""Turn a sealed batch of legs into a named Trip."""

from dataclasses import replace
from datetime import date
from typing import Callable, Iterable, List, Optional, Sequence

from trip_reconstruction.config import (
    DEFAULT_DURATION_MODE,
    DEFAULT_PORTION,
    DEFAULT_TRIP_ICON,
    MULTI_CITY_LAYOVER_HOURS,
)
from trip_reconstruction.models import TransportRecord, Trip, TripStatus, TripType, new_id
from trip_reconstruction.assemble.segmentation import gap_in_days, segment


def visited_destinations(legs: Sequence[TransportRecord]) -> List[str]:
    """Distinct destinations in first-seen order, minus the trip's origin."""
    origin = legs[0].origin
    seen: List[str] = []
    for leg in legs:
        if leg.destination != origin and leg.destination not in seen:
            seen.append(leg.destination)
    return seen


def trip_name(legs: Sequence[TransportRecord]) -> str:
    dests = visited_destinations(legs)
    if not dests:
        return f"Trip to {legs[-1].destination}"
    if len(dests) == 1:
        return f"Trip to {dests[0]}"
    if len(dests) == 2:
        return f"Trip to {dests[0]} & {dests[1]}"
    return f"Tour: {dests[0]}, {dests[1]}..."


def trip_status(end_date: str, today: Optional[date] = None) -> TripStatus:
    """Past once ``end_date`` is strictly before today."""
    today = today or date.today()
    try:
        end = date.fromisoformat(end_date)
    except ValueError:
        return TripStatus.UPCOMING
    return TripStatus.PAST if end < today else TripStatus.UPCOMING


def classify_structure(legs: Sequence[TransportRecord]) -> TripType:
    """Round trip if it ends where it began, multi-city if it stops over a day."""
    if len(legs) > 1 and legs[-1].destination == legs[0].origin:
        return TripType.ROUND_TRIP
    layover_days = MULTI_CITY_LAYOVER_HOURS / 24
    for curr, nxt in zip(legs, legs[1:]):
        gap = gap_in_days(curr, nxt)
        if gap is not None and gap > layover_days:
            return TripType.MULTI_CITY
    return TripType.ONE_WAY


def synthesize_trip(
    legs: Sequence[TransportRecord],
    subject_id: str,
    today: Optional[date] = None,
    id_factory: Callable[[], str] = new_id,
) -> Trip:
    """Build a Trip from one time-ordered batch."""
    if not legs:
        raise ValueError("Cannot build a trip from an empty batch")

    first, last = legs[0], legs[-1]
    end_date = last.arrival_date or last.departure_date
    dests = visited_destinations(legs)

    itinerary_id = id_factory()
    trip_type = classify_structure(legs)
    stamped = [replace(leg, itinerary_id=itinerary_id, trip_type=trip_type) for leg in legs]

    return Trip(
        id=id_factory(),
        name=trip_name(legs),
        location=dests[0] if dests else last.destination,
        start_date=first.departure_date,
        end_date=end_date,
        status=trip_status(end_date, today),
        participants=[subject_id],
        transports=stamped,
        icon=DEFAULT_TRIP_ICON,
        duration_mode=DEFAULT_DURATION_MODE,
        start_portion=DEFAULT_PORTION,
        end_portion=DEFAULT_PORTION,
    )


def build_trips(
    records: Iterable[TransportRecord],
    subject_id: str,
    today: Optional[date] = None,
    id_factory: Callable[[], str] = new_id,
) -> List[Trip]:
    """Full pipeline: records → sorted → batches → trips."""
    today = today or date.today()
    return [
        synthesize_trip(batch, subject_id, today=today, id_factory=id_factory)
        for batch in segment(records)
    ]
