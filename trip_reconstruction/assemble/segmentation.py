"""Partition a time-ordered leg sequence into per-trip batches."""

from functools import reduce
from typing import Iterable, List, NamedTuple, Optional, Tuple

from trip_reconstruction.config import LOOSE_GAP_DAYS, SPLIT_GAP_DAYS
from trip_reconstruction.models import Decision, TransportRecord
from trip_reconstruction.assemble.sequencer import (
    arrival_instant,
    departure_instant,
    sort_chronologically,
)

Batch = Tuple[TransportRecord, ...]


# ---------------------------------------------------------------------------
# Rule table
# ---------------------------------------------------------------------------

def decide(gap_days: Optional[float], is_returning_home: bool, is_connected: bool) -> Decision:
    """Is the next leg part of the current trip? Rules are checked in order.

    1. gap longer than SPLIT_GAP_DAYS     -> seal, start new
    2. leg returns to the home base      -> merge, then seal
    3. leg departs where the last landed -> merge
    4. gap shorter than LOOSE_GAP_DAYS   -> merge
    5. otherwise                         -> seal, start new

    An unknown gap (None) never satisfies rules 1 or 4.
    """
    if gap_days is not None and gap_days > SPLIT_GAP_DAYS:
        return Decision.SEAL_AND_START_NEW
    if is_returning_home:
        return Decision.MERGE_AND_SEAL
    if is_connected:
        return Decision.MERGE
    if gap_days is not None and gap_days < LOOSE_GAP_DAYS:
        return Decision.MERGE
    return Decision.SEAL_AND_START_NEW


def gap_in_days(last: TransportRecord, nxt: TransportRecord) -> Optional[float]:
    """Days from ``last`` arriving to ``nxt`` departing; negative if they overlap."""
    arrived = arrival_instant(last)
    departs = departure_instant(nxt)
    if arrived is None or departs is None:
        return None
    return (departs - arrived).total_seconds() / 86400


# ---------------------------------------------------------------------------
# Scan
# ---------------------------------------------------------------------------

class ScanState(NamedTuple):
    batch: Batch = ()
    home_base: str = ""
    sealed: Tuple[Batch, ...] = ()


def _start_batch(state: ScanState, record: TransportRecord) -> ScanState:
    # A leg that ends where it began is a complete round trip by itself
    if record.destination == record.origin:
        return ScanState(sealed=state.sealed + ((record,),))
    return ScanState(batch=(record,), home_base=record.origin, sealed=state.sealed)


def _step(state: ScanState, record: TransportRecord) -> ScanState:
    if not state.batch:
        return _start_batch(state, record)

    last = state.batch[-1]
    decision = decide(
        gap_in_days(last, record),
        is_returning_home=record.destination == state.home_base,
        is_connected=record.origin == last.destination,
    )

    if decision == Decision.MERGE:
        return state._replace(batch=state.batch + (record,))
    if decision == Decision.MERGE_AND_SEAL:
        return ScanState(sealed=state.sealed + (state.batch + (record,),))
    return _start_batch(ScanState(sealed=state.sealed + (state.batch,)), record)


def segment(records: Iterable[TransportRecord]) -> List[List[TransportRecord]]:
    """Sort records and group them into trip batches, in the order they seal."""
    final = reduce(_step, sort_chronologically(records), ScanState())
    sealed = final.sealed + (final.batch,) if final.batch else final.sealed
    return [list(batch) for batch in sealed]
