"""Date/time splitting for transport records.

Everything stays naive: an instant is cut into its written local date and
time-of-day, never converted between zones.
"""

import re
from datetime import date
from typing import Optional, Tuple

from dateutil import parser as dateutil_parser

_ISO_DATE = re.compile(r'^(\d{4})-(\d{2})-(\d{2})$')
_ISO_BASIC_DATE = re.compile(r'^(\d{4})(\d{2})(\d{2})$')
_DMY_DATE = re.compile(r'^(\d{1,2})/(\d{1,2})/(\d{4})$')


def _clean(raw: Optional[str]) -> str:
    if not raw or not isinstance(raw, str):
        return ""
    return raw.strip()


def split_iso_instant(raw: Optional[str]) -> Tuple[str, str]:
    """Split an ISO-8601 instant into ("YYYY-MM-DD", "HH:MM") by truncation.

    "2024-03-01T23:30:00.000Z" -> ("2024-03-01", "23:30"). The offset, if any,
    is ignored. Anything unparsable gives ("", ""), and so does a value with
    no time part: date-only forms belong to parse_date_only.
    """
    raw = _clean(raw)
    if "T" not in raw:
        return "", ""
    try:
        dt = dateutil_parser.isoparse(raw)
    except (ValueError, OverflowError):
        return "", ""
    return dt.date().isoformat(), dt.strftime("%H:%M")


def parse_date_only(raw: Optional[str]) -> str:
    """Parse a bare date, returning "YYYY-MM-DD" or "".

    Handles:
      - YYYY-MM-DD
      - YYYYMMDD
      - DD/MM/YYYY
    """
    raw = _clean(raw)
    if not raw:
        return ""

    m = _ISO_DATE.match(raw) or _ISO_BASIC_DATE.match(raw)
    if m:
        try:
            return date(int(m.group(1)), int(m.group(2)), int(m.group(3))).isoformat()
        except ValueError:
            return ""

    m = _DMY_DATE.match(raw)
    if m:
        try:
            return date(int(m.group(3)), int(m.group(2)), int(m.group(1))).isoformat()
        except ValueError:
            return ""

    return ""


def parse_moment(raw: Optional[str], default_time: str) -> Tuple[str, str]:
    """Parse either a bare date or a full instant.

    A bare date is paired with ``default_time`` so later interval math always
    has a time to work with.
    """
    day = parse_date_only(raw)
    if day:
        return day, default_time
    return split_iso_instant(raw)
