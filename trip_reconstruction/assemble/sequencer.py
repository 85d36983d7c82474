"""Chronological ordering of transport records."""

from datetime import datetime
from typing import Iterable, List, Optional

from trip_reconstruction.models import TransportRecord


def local_instant(day: str, time_of_day: str) -> Optional[datetime]:
    """Naive datetime from separate date and time strings, or None."""
    if not day:
        return None
    try:
        return datetime.fromisoformat(f"{day}T{time_of_day or '00:00'}")
    except ValueError:
        return None


def departure_instant(record: TransportRecord) -> Optional[datetime]:
    return local_instant(record.departure_date, record.departure_time)


def arrival_instant(record: TransportRecord) -> Optional[datetime]:
    """Arrival instant, falling back to departure when arrival is unusable."""
    return local_instant(record.arrival_date, record.arrival_time) or departure_instant(record)


def _sort_key(record: TransportRecord) -> datetime:
    # Unparsable instants go first
    return departure_instant(record) or datetime.min


def sort_chronologically(records: Iterable[TransportRecord]) -> List[TransportRecord]:
    """Stable sort by departure; returns a new list."""
    return sorted(records, key=_sort_key)
