"""Score imported trips against a trip the user already has.

Used when legs are imported into an existing trip: every reconstructed trip
becomes a candidate, and the best match is pre-selected.
"""

from datetime import date
from typing import List, Optional

from trip_reconstruction.config import AUTO_SELECT_RELEVANCE
from trip_reconstruction.models import ImportCandidate, Trip


def _as_date(value: str) -> Optional[date]:
    try:
        return date.fromisoformat(value)
    except (TypeError, ValueError):
        return None


def score_relevance(current: Trip, candidate: Trip) -> int:
    """0-100: how likely ``candidate`` belongs to ``current``."""
    points = 0
    c_start, c_end = _as_date(current.start_date), _as_date(current.end_date)
    k_start, k_end = _as_date(candidate.start_date), _as_date(candidate.end_date)

    if c_start and c_end and k_start and k_end:
        if min(c_end, k_end) >= max(c_start, k_start):
            points += 60
            if c_start == k_start:
                points += 10
            if c_end == k_end:
                points += 10
        else:
            days_off = min(abs((c_start - k_end).days), abs((k_start - c_end).days))
            if days_off < 2:
                points += 40
            elif days_off < 7:
                points += 20

    if current.location and candidate.location:
        curr_loc = current.location.lower()
        cand_loc = candidate.location.lower()
        if curr_loc in cand_loc or cand_loc in curr_loc:
            points += 20

    return min(100, points)


def rank_import_candidates(current: Trip, trips: List[Trip]) -> List[ImportCandidate]:
    """Best match first; the top one is selected if it clears the threshold."""
    candidates = [
        ImportCandidate(trip=t, confidence=score_relevance(current, t)) for t in trips
    ]
    candidates.sort(key=lambda c: c.confidence, reverse=True)
    if candidates and candidates[0].confidence > AUTO_SELECT_RELEVANCE:
        candidates[0].selected = True
    return candidates
