"""Date token resolution for spreadsheet cells.

Resolution order (first match wins):
 - empty token -> None
 - ISO ``YYYY-MM-DD``
 - spreadsheet serial day count (day 0 = 1899-12-30)
 - ``/``, ``-`` or ``.`` separated numbers (D/M, D/M/Y, Y/M/D)

Nothing here raises on bad input; unparsable tokens resolve to ``None``.
"""

from __future__ import annotations

import re
from datetime import date, timedelta
from typing import List, Optional

SPREADSHEET_EPOCH = date(1899, 12, 30)
MAX_SERIAL = 100000
# day, month and year never need more digits than this
MAX_PART_DIGITS = 4

ISO_DATE_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")
SERIAL_RE = re.compile(r"^\d{1,5}$")
SEPARATOR_RE = re.compile(r"[/\-.]")

MONTH_NAMES = [
    "enero",
    "febrero",
    "marzo",
    "abril",
    "mayo",
    "junio",
    "julio",
    "agosto",
    "septiembre",
    "octubre",
    "noviembre",
    "diciembre",
]

MONTH_KEYS = {
    "enero": 0,
    "ene": 0,
    "february": 1,
    "febrero": 1,
    "feb": 1,
    "marzo": 2,
    "mar": 2,
    "abril": 3,
    "abr": 3,
    "mayo": 4,
    "may": 4,
    "junio": 5,
    "jun": 5,
    "julio": 6,
    "jul": 6,
    "agosto": 7,
    "ago": 7,
    "septiembre": 8,
    "sep": 8,
    "sept": 8,
    "octubre": 9,
    "oct": 9,
    "noviembre": 10,
    "nov": 10,
    "diciembre": 11,
    "dic": 11,
}


def _safe_date(year: int, month: int, day: int) -> Optional[date]:
    try:
        return date(year, month, day)
    except (ValueError, OverflowError):
        return None


def split_numeric(token: str) -> Optional[List[int]]:
    """Separated numeric parts, None if any part is empty, non-numeric or too long."""
    parts = [p.strip() for p in SEPARATOR_RE.split(token)]
    if not all(p.isdecimal() and len(p) <= MAX_PART_DIGITS for p in parts):
        return None
    return [int(p) for p in parts]


def from_serial(serial: int) -> Optional[date]:
    """Spreadsheet serial day count -> date, None outside (0, 100000)."""
    if not 0 < serial < MAX_SERIAL:
        return None
    return SPREADSHEET_EPOCH + timedelta(days=serial)


def resolve_date(token, default_year: Optional[int] = None) -> Optional[date]:
    """Resolve a cell token to a calendar date.

    ``default_year`` places two-part ``D/M`` tokens; callers pass the year of
    their reference day. Without it such tokens cannot be placed and resolve
    to None.

    Three-part tokens are ordered by magnitude: a first part above 31 is the
    year (Y/M/D), otherwise D/M/Y. Years below 100 are taken as 20xx.
    """
    if token is None:
        return None
    s = str(token).strip()
    if not s:
        return None
    m = ISO_DATE_RE.match(s)
    if m:
        return _safe_date(int(m.group(1)), int(m.group(2)), int(m.group(3)))
    if SERIAL_RE.match(s):
        return from_serial(int(s))
    parts = split_numeric(s)
    if parts is None or len(parts) not in (2, 3):
        return None
    if len(parts) == 2:
        if default_year is None:
            return None
        day, month = parts
        year = default_year
    else:
        a, b, c = parts
        if a > 31:
            year, month, day = a, b, c
        else:
            # c > 31 and the all-small case share the D/M/Y reading
            day, month, year = a, b, c
    if year < 100:
        year += 2000
    if not 1 <= month <= 12 or not 1 <= day <= 31:
        return None
    return _safe_date(year, month, day)


def resolve_month_name(label) -> int:
    """Spanish month name or abbreviation -> 0-based month index, -1 if unknown."""
    key = str(label or "").strip().lower()
    if not key:
        return -1
    if key in MONTH_KEYS:
        return MONTH_KEYS[key]
    return MONTH_KEYS.get(key[:3], -1)


def month_label(year: int, month: int) -> str:
    """(2026, 3) -> 'Marzo 2026'."""
    return f"{MONTH_NAMES[month - 1].capitalize()} {year}"
