"""Output formatters: flight-log JSON and CSV."""

import csv
import io
import json
from typing import Any, Iterable, Iterator, List

from trip_reconstruction.config import EXPORT_MODES
from trip_reconstruction.models import TransportRecord, Trip

CSV_HEADERS = [
    "Date", "Airline", "Flight", "From", "To",
    "Gate Departure (Scheduled)", "Gate Arrival (Scheduled)",
    "Aircraft Type Name", "PNR", "Seat", "Seat Type", "Cabin Class", "Flight Reason",
]


def _str(value: Any) -> str:
    """Missing values export as "" so every row has the same shape."""
    if value is None:
        return ""
    return str(value)


def _number(value: Any) -> Any:
    return "" if value is None else value


def _exportable_legs(trips: Iterable[Trip]) -> Iterator[TransportRecord]:
    for trip in trips:
        for leg in trip.transports or []:
            # mode may be a TransportMode or its plain string value
            if getattr(leg.mode, "value", leg.mode) in EXPORT_MODES:
                yield leg


# ---------------------------------------------------------------------------
# JSON output
# ---------------------------------------------------------------------------

def _utc_instant(day: str, time_of_day: str) -> str:
    if not day:
        return ""
    return f"{day}T{time_of_day or '00:00'}:00.000Z"


def _leg_to_flight(leg: TransportRecord) -> dict:
    return {
        "date": leg.departure_date,
        "departure": _utc_instant(leg.departure_date, leg.departure_time),
        "arrival": _utc_instant(leg.arrival_date, leg.arrival_time),
        "flightNumber": leg.identifier,
        "flightReason": _str(leg.reason),
        "from": {"iata": leg.origin, "lat": _number(leg.origin_lat), "lon": _number(leg.origin_lng)},
        "to": {"iata": leg.destination, "lat": _number(leg.dest_lat), "lon": _number(leg.dest_lng)},
        "airline": {"name": leg.provider},
        "aircraft": {"name": _str(leg.vehicle_model)},
        "seats": [
            {
                "seatNumber": _str(leg.seat_number),
                "seatClass": _str(leg.travel_class),
                "seat": _str(leg.seat_type),
            }
        ],
    }


def export_json(trips: Iterable[Trip]) -> str:
    """Flatten trips into a ``{"flights": [...]}`` document."""
    flights = [_leg_to_flight(leg) for leg in _exportable_legs(trips)]
    return json.dumps({"flights": flights}, indent=2, ensure_ascii=False)


# ---------------------------------------------------------------------------
# CSV output
# ---------------------------------------------------------------------------

def _render(value: Any, quoting: int) -> str:
    buf = io.StringIO()
    csv.writer(buf, quoting=quoting, lineterminator="\n").writerow([_str(value)])
    return buf.getvalue()[:-1]


def _quoted(value: Any) -> str:
    return _render(value, csv.QUOTE_ALL)


def _cell(value: Any) -> str:
    # a lone empty field would come back as '""'
    text = _str(value)
    return _render(text, csv.QUOTE_MINIMAL) if text else ""


def _local_instant(day: str, time_of_day: str) -> str:
    if not day:
        return ""
    return f"{day}T{time_of_day or '00:00'}"


def _leg_to_row(leg: TransportRecord) -> List[str]:
    return [
        _cell(leg.departure_date),
        _quoted(leg.provider),
        _cell(leg.identifier),
        _cell(leg.origin),
        _cell(leg.destination),
        _local_instant(leg.departure_date, leg.departure_time),
        _local_instant(leg.arrival_date, leg.arrival_time),
        _quoted(leg.vehicle_model),
        _cell(leg.confirmation_code),
        _cell(leg.seat_number),
        _cell(leg.seat_type),
        _cell(leg.travel_class),
        _cell(leg.reason),
    ]


def export_csv(trips: Iterable[Trip]) -> str:
    """Flatten trips into a flight-log CSV with a fixed header.

    Provider and aircraft model are always quoted. Other fields are quoted by
    the csv writer only when they hold a comma, a quote or a line break.
    """
    lines = [",".join(CSV_HEADERS)]
    for leg in _exportable_legs(trips):
        lines.append(",".join(_leg_to_row(leg)))
    return "\n".join(lines)
