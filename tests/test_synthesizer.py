"""Trip synthesizer tests."""

from __future__ import annotations

from datetime import date

import pytest

from trip_reconstruction.assemble.synthesizer import (
    build_trips,
    classify_structure,
    synthesize_trip,
    trip_name,
    trip_status,
    visited_destinations,
)
from trip_reconstruction.models import TripStatus, TripType

TODAY = date(2024, 6, 1)


def test_visited_destinations_skip_origin_and_repeats(leg) -> None:
    legs = [
        leg("NYC", "LON", "2024-05-01"),
        leg("LON", "PAR", "2024-05-03"),
        leg("PAR", "LON", "2024-05-05"),
        leg("LON", "NYC", "2024-05-07"),
    ]
    assert visited_destinations(legs) == ["LON", "PAR"]


@pytest.mark.parametrize(
    ("routes", "expected"),
    [
        ([("SFO", "SFO")], "Trip to SFO"),
        ([("NYC", "LON"), ("LON", "NYC")], "Trip to LON"),
        ([("NYC", "LON"), ("LON", "PAR"), ("PAR", "NYC")], "Trip to LON & PAR"),
        ([("NYC", "LON"), ("LON", "PAR"), ("PAR", "ROM")], "Tour: LON, PAR..."),
    ],
)
def test_trip_name(leg, routes, expected) -> None:
    legs = [leg(o, d, f"2024-05-0{i + 1}") for i, (o, d) in enumerate(routes)]
    assert trip_name(legs) == expected


def test_trip_status() -> None:
    assert trip_status("2024-05-31", TODAY) == TripStatus.PAST
    assert trip_status("2024-06-01", TODAY) == TripStatus.UPCOMING
    assert trip_status("2024-07-01", TODAY) == TripStatus.UPCOMING
    assert trip_status("", TODAY) == TripStatus.UPCOMING


def test_classify_structure(leg) -> None:
    round_trip = [leg("NYC", "LON", "2024-05-01"), leg("LON", "NYC", "2024-05-05")]
    multi_city = [leg("NYC", "LON", "2024-05-01"), leg("LON", "PAR", "2024-05-03")]
    one_way = [leg("NYC", "LON", "2024-05-01", "08:00"), leg("LON", "PAR", "2024-05-01", "15:00")]

    assert classify_structure(round_trip) == TripType.ROUND_TRIP
    assert classify_structure(multi_city) == TripType.MULTI_CITY
    assert classify_structure(one_way) == TripType.ONE_WAY
    assert classify_structure([leg("SFO", "SFO", "2024-05-01")]) == TripType.ONE_WAY


def test_synthesize_trip_fields(leg, id_factory) -> None:
    legs = [
        leg("NYC", "LON", "2024-05-01", arr_date="2024-05-02"),
        leg("LON", "PAR", "2024-05-03"),
        leg("PAR", "NYC", "2024-05-07", arr_date="2024-05-08"),
    ]
    trip = synthesize_trip(legs, "user-1", today=TODAY, id_factory=id_factory())

    assert trip.id == "id2"
    assert trip.name == "Trip to LON & PAR"
    assert trip.location == "LON"
    assert (trip.start_date, trip.end_date) == ("2024-05-01", "2024-05-08")
    assert trip.status == TripStatus.PAST
    assert trip.participants == ["user-1"]
    assert trip.icon == "✈️"
    assert trip.duration_mode == "all_full"
    assert (trip.start_portion, trip.end_portion) == ("full", "full")
    assert trip.accommodations == trip.activities == trip.locations == []


def test_synthesize_trip_stamps_copies_of_legs(leg, id_factory) -> None:
    legs = [leg("NYC", "LON", "2024-05-01"), leg("LON", "NYC", "2024-05-05")]
    trip = synthesize_trip(legs, "user-1", today=TODAY, id_factory=id_factory())

    assert [t.itinerary_id for t in trip.transports] == ["id1", "id1"]
    assert {t.trip_type for t in trip.transports} == {TripType.ROUND_TRIP}
    assert [t.id for t in trip.transports] == [r.id for r in legs]
    # inputs untouched
    assert [r.itinerary_id for r in legs] == ["", ""]


def test_end_date_falls_back_to_departure(leg) -> None:
    trip = synthesize_trip([leg("NYC", "LON", "2024-05-01", arr_date="")], "u", today=TODAY)
    assert trip.end_date == "2024-05-01"


def test_self_loop_location_falls_back_to_last_destination(leg) -> None:
    trip = synthesize_trip([leg("SFO", "SFO", "2024-05-01")], "u", today=TODAY)
    assert trip.location == "SFO"
    assert trip.name == "Trip to SFO"


def test_synthesize_trip_rejects_empty_batch() -> None:
    with pytest.raises(ValueError):
        synthesize_trip([], "u")


def test_build_trips_status_depends_on_today(leg) -> None:
    records = [leg("NYC", "LON", "2024-05-01"), leg("LON", "NYC", "2024-05-05")]
    assert build_trips(records, "u", today=date(2024, 5, 6))[0].status == TripStatus.PAST
    assert build_trips(records, "u", today=date(2024, 5, 5))[0].status == TripStatus.UPCOMING


def test_build_trips_is_deterministic(leg, id_factory) -> None:
    records = [
        leg("NYC", "LON", "2024-05-01"),
        leg("LON", "PAR", "2024-05-03"),
        leg("PAR", "NYC", "2024-05-07"),
        leg("NYC", "MIA", "2024-08-01"),
    ]
    first = build_trips(records, "u", today=TODAY, id_factory=id_factory())
    second = build_trips(records, "u", today=TODAY, id_factory=id_factory())

    assert first == second
    assert repr(first) == repr(second)
    assert [t.name for t in first] == ["Trip to LON & PAR", "Trip to MIA"]
