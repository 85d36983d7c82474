"""Shared fixtures for trip reconstruction tests."""

from __future__ import annotations

import itertools
from typing import Callable

import pytest

from trip_reconstruction.models import TransportMode, TransportRecord


@pytest.fixture
def id_factory() -> Callable[[], Callable[[], str]]:
    """Build deterministic id generators: id1, id2, ..."""

    def make() -> Callable[[], str]:
        counter = itertools.count(1)
        return lambda: f"id{next(counter)}"

    return make


@pytest.fixture
def leg() -> Callable[..., TransportRecord]:
    """Build a flight leg with sensible defaults."""
    counter = itertools.count(1)

    def make(
        origin: str,
        destination: str,
        dep_date: str,
        dep_time: str = "10:00",
        arr_date: str | None = None,
        arr_time: str = "12:00",
        mode: TransportMode = TransportMode.FLIGHT,
        **extra,
    ) -> TransportRecord:
        return TransportRecord(
            id=f"leg{next(counter)}",
            mode=mode,
            origin=origin,
            destination=destination,
            departure_date=dep_date,
            departure_time=dep_time,
            arrival_date=dep_date if arr_date is None else arr_date,
            arrival_time=arr_time,
            **extra,
        )

    return make
