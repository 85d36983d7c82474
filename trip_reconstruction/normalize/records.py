"""Map raw source rows onto the canonical TransportRecord."""

from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Sequence

from trip_reconstruction.config import (
    CSV_DEFAULT_PROVIDER,
    DEFAULT_ARRIVAL_TIME,
    DEFAULT_DEPARTURE_TIME,
    JSON_DEFAULT_PROVIDER,
)
from trip_reconstruction.models import TransportMode, TransportRecord, new_id
from trip_reconstruction.normalize.date_parser import parse_date_only, parse_moment

# Candidate source keys per logical field, highest priority first
CSV_DEPARTURE_KEYS = ("Gate Departure (Scheduled)", "Gate Departure (Actual)", "Date")
CSV_ARRIVAL_KEYS = ("Gate Arrival (Scheduled)", "Gate Arrival (Actual)")
JSON_DEPARTURE_KEYS = ("departure", "date")
JSON_ARRIVAL_KEYS = ("arrival",)

# Header names a tabular flight log is expected to carry
KNOWN_CSV_HEADERS = frozenset({
    "Date", "Airline", "Flight", "From", "To",
    *CSV_DEPARTURE_KEYS, *CSV_ARRIVAL_KEYS,
    "Aircraft Type Name", "PNR", "Seat", "Seat Type", "Cabin Class", "Flight Reason",
})


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _optional_text(value: Any) -> Optional[str]:
    text = _text(value)
    return text or None


def _to_float(value: Any) -> Optional[float]:
    if value is None or value == "":
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def first_present(source: Mapping[str, Any], keys: Sequence[str]) -> str:
    """Return the first non-empty value among ``keys``, or ""."""
    for key in keys:
        value = _text(source.get(key))
        if value:
            return value
    return ""


def _nested(source: Any, *path: Any) -> Any:
    """Walk dict keys / list indexes, returning None on any miss."""
    current = source
    for step in path:
        if isinstance(step, int):
            if not isinstance(current, list) or len(current) <= step:
                return None
        elif not isinstance(current, dict):
            return None
        current = current[step] if isinstance(step, int) else current.get(step)
        if current is None:
            return None
    return current


# ---------------------------------------------------------------------------
# Source mappers
# ---------------------------------------------------------------------------

def from_csv_row(row: Mapping[str, str], id_factory: Callable[[], str] = new_id) -> TransportRecord:
    """Convert one flight-log row (header -> value) into a TransportRecord."""
    dep_date, dep_time = parse_moment(first_present(row, CSV_DEPARTURE_KEYS), DEFAULT_DEPARTURE_TIME)

    # Logs often carry only the day; assume a same-day arrival
    arr_date, arr_time = parse_moment(first_present(row, CSV_ARRIVAL_KEYS), DEFAULT_ARRIVAL_TIME)
    if not arr_date:
        arr_date, arr_time = dep_date, DEFAULT_ARRIVAL_TIME

    return TransportRecord(
        id=id_factory(),
        mode=TransportMode.FLIGHT,
        origin=_text(row.get("From")),
        destination=_text(row.get("To")),
        departure_date=dep_date,
        departure_time=dep_time,
        arrival_date=arr_date,
        arrival_time=arr_time,
        provider=_text(row.get("Airline")) or CSV_DEFAULT_PROVIDER,
        identifier=_text(row.get("Flight")),
        confirmation_code=_text(row.get("PNR")),
        travel_class=_optional_text(row.get("Cabin Class")),
        seat_number=_optional_text(row.get("Seat")),
        seat_type=_optional_text(row.get("Seat Type")),
        vehicle_model=_optional_text(row.get("Aircraft Type Name")),
        reason=_optional_text(row.get("Flight Reason")),
    )


def from_json_flight(flight: Dict[str, Any], id_factory: Callable[[], str] = new_id) -> TransportRecord:
    """Convert one element of a flight-log JSON export into a TransportRecord."""
    dep_date, dep_time = parse_moment(first_present(flight, JSON_DEPARTURE_KEYS), DEFAULT_DEPARTURE_TIME)
    arr_date, arr_time = parse_moment(first_present(flight, JSON_ARRIVAL_KEYS), DEFAULT_ARRIVAL_TIME)

    provider = (
        _text(_nested(flight, "airline", "name"))
        or _text(_nested(flight, "airline", "iata"))
        or JSON_DEFAULT_PROVIDER
    )

    return TransportRecord(
        id=id_factory(),
        mode=TransportMode.FLIGHT,
        origin=_text(_nested(flight, "from", "iata")),
        destination=_text(_nested(flight, "to", "iata")),
        departure_date=dep_date,
        departure_time=dep_time,
        arrival_date=arr_date,
        arrival_time=arr_time,
        provider=provider,
        identifier=_text(flight.get("flightNumber")),
        travel_class=_optional_text(_nested(flight, "seats", 0, "seatClass")),
        seat_number=_optional_text(_nested(flight, "seats", 0, "seatNumber")),
        seat_type=_optional_text(_nested(flight, "seats", 0, "seat")),
        origin_lat=_to_float(_nested(flight, "from", "lat")),
        origin_lng=_to_float(_nested(flight, "from", "lon")),
        dest_lat=_to_float(_nested(flight, "to", "lat")),
        dest_lng=_to_float(_nested(flight, "to", "lon")),
        vehicle_model=_optional_text(_nested(flight, "aircraft", "name")),
        reason=_optional_text(flight.get("flightReason")),
    )


# ---------------------------------------------------------------------------
# Eligibility
# ---------------------------------------------------------------------------

def keep_eligible(records: Iterable[TransportRecord]) -> List[TransportRecord]:
    """Drop records that have no departure date."""
    return [r for r in records if r.departure_date]


def validate_transport(record: TransportRecord) -> List[str]:
    """List the problems with a record, for display. Never raises."""
    errors = []
    if not record.departure_date:
        errors.append("Missing departure date")
    if not record.origin:
        errors.append("Missing origin")
    if not record.destination:
        errors.append("Missing destination")
    if record.departure_date and parse_date_only(record.departure_date) != record.departure_date:
        errors.append("Invalid departure date format")
    return errors
