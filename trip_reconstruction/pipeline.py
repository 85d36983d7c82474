"""Public operations: parse → normalize → group into trips, and export."""

import sys
from datetime import date
from typing import Callable, List, Optional

from trip_reconstruction.models import ImportCandidate, TransportRecord, Trip, new_id
from trip_reconstruction.extract.json_source import read_flights
from trip_reconstruction.extract.tabular import read_rows
from trip_reconstruction.normalize.records import from_csv_row, from_json_flight, keep_eligible
from trip_reconstruction.assemble.relevance import rank_import_candidates
from trip_reconstruction.assemble.synthesizer import build_trips
from trip_reconstruction.output import export_csv, export_json

__all__ = [
    "parse_transports_json",
    "parse_transports_csv",
    "group_transports",
    "import_json",
    "import_csv",
    "export_json",
    "export_csv",
    "import_into_trip",
    "rank_import_candidates",
]


def _logger(verbose: bool) -> Callable[[str], None]:
    def log(msg):
        if verbose:
            print(msg, file=sys.stderr)
    return log


# ---------------------------------------------------------------------------
# Parsing without grouping
# ---------------------------------------------------------------------------

def parse_transports_json(
    content: str,
    verbose: bool = False,
    id_factory: Callable[[], str] = new_id,
) -> List[TransportRecord]:
    """Normalized legs from a flight-log JSON document.

    Raises ImportParseError if the document itself is unreadable.
    """
    log = _logger(verbose)
    flights = read_flights(content)
    records = keep_eligible(from_json_flight(f, id_factory=id_factory) for f in flights)
    log(f"  JSON: {len(flights)} flights, {len(records)} usable")
    return records


def parse_transports_csv(
    content: str,
    delimiter: Optional[str] = None,
    verbose: bool = False,
    id_factory: Callable[[], str] = new_id,
) -> List[TransportRecord]:
    """Normalized legs from a flight-log CSV.

    Raises ImportParseError if there is no usable header row.
    """
    log = _logger(verbose)
    rows = read_rows(content, delimiter=delimiter)
    records = keep_eligible(from_csv_row(r, id_factory=id_factory) for r in rows)
    log(f"  CSV: {len(rows)} rows, {len(records)} usable")
    return records


# ---------------------------------------------------------------------------
# Grouping
# ---------------------------------------------------------------------------

def group_transports(
    records: List[TransportRecord],
    subject_id: str,
    today: Optional[date] = None,
    verbose: bool = False,
    id_factory: Callable[[], str] = new_id,
) -> List[Trip]:
    """Reconstruct trips from already-normalized legs.

    Args:
        records: Legs in any order. Legs without a departure date are ignored.
        subject_id: The traveler every trip is attributed to.
        today: Reference date for Upcoming/Past. Defaults to the current date.
        id_factory: Source of fresh trip and itinerary ids.

    Returns:
        Trips in the order they were closed, each with its legs in time order.
    """
    log = _logger(verbose)
    trips = build_trips(keep_eligible(records), subject_id, today=today, id_factory=id_factory)
    log(f"  Assembled {len(trips)} trips from {len(records)} legs")
    return trips


def import_json(
    content: str,
    subject_id: str,
    today: Optional[date] = None,
    verbose: bool = False,
    id_factory: Callable[[], str] = new_id,
) -> List[Trip]:
    records = parse_transports_json(content, verbose=verbose, id_factory=id_factory)
    return group_transports(records, subject_id, today=today, verbose=verbose, id_factory=id_factory)


def import_csv(
    content: str,
    subject_id: str,
    today: Optional[date] = None,
    delimiter: Optional[str] = None,
    verbose: bool = False,
    id_factory: Callable[[], str] = new_id,
) -> List[Trip]:
    records = parse_transports_csv(content, delimiter=delimiter, verbose=verbose, id_factory=id_factory)
    return group_transports(records, subject_id, today=today, verbose=verbose, id_factory=id_factory)


def import_into_trip(
    current: Trip,
    records: List[TransportRecord],
    today: Optional[date] = None,
    id_factory: Callable[[], str] = new_id,
) -> List[ImportCandidate]:
    """Group legs for an existing trip and rank the groups against it."""
    subject_id = current.participants[0] if current.participants else ""
    trips = group_transports(records, subject_id, today=today, id_factory=id_factory)
    return rank_import_candidates(current, trips)
