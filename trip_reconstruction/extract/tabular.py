"""Read a delimited flight log into header-keyed rows."""

import csv
import io
from typing import Dict, List, Optional

from trip_reconstruction.config import CSV_DELIMITER
from trip_reconstruction.errors import ImportParseError
from trip_reconstruction.normalize.records import KNOWN_CSV_HEADERS


def read_rows(content: str, delimiter: Optional[str] = None) -> List[Dict[str, str]]:
    """Parse CSV-like text. First non-blank line is the header.

    Values are matched to headers by position; a single layer of wrapping
    double quotes is removed by the csv reader. Blank lines are skipped and
    short rows are padded with "".

    Raises ImportParseError when the first line is not a recognizable header.
    """
    if not content or not content.strip():
        return []

    reader = csv.reader(io.StringIO(content.lstrip("\ufeff")), delimiter=delimiter or CSV_DELIMITER)
    headers: Optional[List[str]] = None
    rows: List[Dict[str, str]] = []

    try:
        for values in reader:
            if not any(v.strip() for v in values):
                continue
            if headers is None:
                headers = [h.strip() for h in values]
                if not KNOWN_CSV_HEADERS.intersection(headers):
                    raise ImportParseError(
                        f"Missing header row (got {', '.join(headers)[:80]})", "csv"
                    )
                continue
            rows.append({
                header: values[i].strip() if i < len(values) else ""
                for i, header in enumerate(headers)
            })
    except csv.Error as e:
        raise ImportParseError("Malformed CSV content", "csv", cause=e) from e

    return rows
