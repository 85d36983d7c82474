"""Read a flight-log JSON document into a list of flight objects."""

import json
from typing import Any, Dict, List

from trip_reconstruction.errors import ImportParseError


def read_flights(content: str) -> List[Dict[str, Any]]:
    """Accept ``{"flights": [...]}`` or a bare array.

    Elements that are not objects are dropped. Empty content gives [].
    """
    if not content or not content.strip():
        return []

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ImportParseError("Invalid JSON", "json", cause=e) from e

    if isinstance(data, dict):
        if "flights" not in data:
            raise ImportParseError('Expected a "flights" array at the top level', "json")
        flights = data["flights"]
    else:
        flights = data

    if not isinstance(flights, list):
        raise ImportParseError("Expected an array of flights", "json")

    return [f for f in flights if isinstance(f, dict)]
