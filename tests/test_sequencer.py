"""Chronological sequencer tests."""

from __future__ import annotations

from datetime import datetime

from trip_reconstruction.assemble.sequencer import (
    arrival_instant,
    departure_instant,
    local_instant,
    sort_chronologically,
)


def test_local_instant() -> None:
    assert local_instant("2024-05-01", "09:15") == datetime(2024, 5, 1, 9, 15)
    assert local_instant("2024-05-01", "") == datetime(2024, 5, 1)
    assert local_instant("", "09:15") is None
    assert local_instant("2024-13-01", "09:15") is None


def test_arrival_falls_back_to_departure(leg) -> None:
    record = leg("JFK", "LHR", "2024-05-01", "19:30", arr_date="", arr_time="")
    assert arrival_instant(record) == departure_instant(record) == datetime(2024, 5, 1, 19, 30)


def test_sort_orders_by_date_then_time(leg) -> None:
    late = leg("A", "B", "2024-05-02", "08:00")
    early_evening = leg("C", "D", "2024-05-01", "18:00")
    early_morning = leg("E", "F", "2024-05-01", "06:00")

    assert sort_chronologically([late, early_evening, early_morning]) == [
        early_morning,
        early_evening,
        late,
    ]


def test_sort_is_stable_for_equal_instants(leg) -> None:
    first = leg("A", "B", "2024-05-01", "10:00")
    second = leg("C", "D", "2024-05-01", "10:00")
    assert sort_chronologically([first, second]) == [first, second]
    assert sort_chronologically([second, first]) == [second, first]


def test_unparsable_instants_sort_first(leg) -> None:
    ok = leg("A", "B", "2024-05-01")
    broken = leg("C", "D", "01/05/2024")
    assert sort_chronologically([ok, broken]) == [broken, ok]


def test_sort_is_idempotent_and_does_not_mutate(leg) -> None:
    records = [leg("A", "B", "2024-05-03"), leg("B", "C", "2024-05-01"), leg("C", "D", "2024-05-02")]
    original = list(records)

    once = sort_chronologically(records)
    twice = sort_chronologically(once)

    assert once == twice
    assert records == original
