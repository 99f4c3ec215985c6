"""Human labels for activity date ranges and single dates (Spanish)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Union

from .dates import ISO_DATE_RE, MONTH_NAMES, SERIAL_RE, from_serial, resolve_date, split_numeric

WEEKDAY_NAMES = [
    "lunes",
    "martes",
    "miércoles",
    "jueves",
    "viernes",
    "sábado",
    "domingo",
]
NO_DATES = "—"


@dataclass
class DayMonth:
    day: int
    month: int  # 1..12
    month_name: str


def _day_month(day: int, month: int) -> Optional[DayMonth]:
    if 1 <= month <= 12 and 1 <= day <= 31:
        return DayMonth(day, month, MONTH_NAMES[month - 1])
    return None


def parse_day_month(token) -> Optional[DayMonth]:
    """Day and month only; the year is ignored and a missing day reads as 1."""
    s = str(token or "").strip()
    if not s:
        return None
    m = ISO_DATE_RE.match(s)
    if m:
        return _day_month(int(m.group(3)), int(m.group(2)))
    if SERIAL_RE.match(s):
        d = from_serial(int(s))
        return _day_month(d.day, d.month) if d else None
    parts = split_numeric(s)
    if parts is None or len(parts) < 2:
        return None
    if parts[0] > 31:
        month = parts[1]
        day = parts[2] if len(parts) > 2 else 1
    else:
        day, month = parts[0], parts[1]
    return _day_month(day, month)


def format_range(start, end) -> str:
    ini = parse_day_month(start)
    fin = parse_day_month(end)
    if ini is None:
        end_raw = str(end or "").strip()
        return f"Fechas: {end_raw}" if end_raw else NO_DATES
    if fin is None:
        return f"Fechas: {ini.day} de {ini.month_name}"
    if ini.month == fin.month:
        return f"Fechas: {ini.day} al {fin.day} de {ini.month_name}"
    return f"Fechas: {ini.day} de {ini.month_name} al {fin.day} de {fin.month_name}"


def format_long_date(value: Union[date, str]) -> str:
    """'jueves, 5 de marzo de 2026'; unparsable strings come back unchanged."""
    d = value if isinstance(value, date) else resolve_date(value)
    if d is None:
        return str(value or "")
    return f"{WEEKDAY_NAMES[d.weekday()]}, {d.day} de {MONTH_NAMES[d.month - 1]} de {d.year}"


def signup_url(link) -> str:
    """Sign-up link with a scheme; bare hosts get https://."""
    s = str(link or "").strip()
    if not s or s.startswith("http"):
        return s
    return f"https://{s}"
