"""Event selection relative to an explicit reference day.

Features:
 - Monthly retreats: what's left of the current month, else next month
 - Birthdays falling in a rolling window (default 30 days)
 - Activities that have not ended yet (unknown end date keeps the activity)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, timedelta
from typing import List, Optional, Sequence, Tuple

from .dates import month_label, resolve_date
from .records import BIRTHDATE_FIELDS, END_FIELDS, NAME_FIELDS, Record, lookup

logger = logging.getLogger(__name__)

RETREAT_DATE_COLUMNS = 11
BIRTHDAY_WINDOW_DAYS = 30
MAX_BIRTHDAY_WINDOW_DAYS = 366


@dataclass(frozen=True)
class RetreatOccurrence:
    date: date
    place: str


@dataclass(frozen=True)
class BirthdayEntry:
    name: str
    date: date


def next_month(year: int, month: int) -> Tuple[int, int]:
    if month == 12:
        return year + 1, 1
    return year, month + 1


def collect_retreats(
    grid: Sequence[Sequence[str]], today: date
) -> List[RetreatOccurrence]:
    """Every resolvable date cell of the retreat grid, sorted by date.

    Row 0 holds headers. Column 0 is the place, columns 1..11 hold dates.
    Ties keep grid order.
    """
    occurrences: List[RetreatOccurrence] = []
    for r, row in enumerate(grid[1:], start=1):
        if not row:
            continue
        place = str(row[0] or "").strip()
        for c in range(1, min(len(row), RETREAT_DATE_COLUMNS + 1)):
            cell = str(row[c] or "").strip()
            if not cell:
                continue
            d = resolve_date(cell, today.year)
            if d is None:
                logger.debug("Skipping retreat cell (%d,%d): unparsable '%s'", r, c, cell)
                continue
            occurrences.append(RetreatOccurrence(d, place))
    occurrences.sort(key=lambda o: o.date)
    return occurrences


def select_retreat_batch(
    occurrences: Sequence[RetreatOccurrence], today: date
) -> List[RetreatOccurrence]:
    current = [
        o
        for o in occurrences
        if o.date.year == today.year
        and o.date.month == today.month
        and o.date >= today
    ]
    if current:
        return current
    year, month = next_month(today.year, today.month)
    return [o for o in occurrences if o.date.year == year and o.date.month == month]


def upcoming_retreats(
    grid: Sequence[Sequence[str]], today: date
) -> Tuple[List[RetreatOccurrence], Optional[str]]:
    """Selected retreat batch plus its month label (None when empty)."""
    batch = select_retreat_batch(collect_retreats(grid, today), today)
    if not batch:
        return [], None
    first = batch[0].date
    return batch, month_label(first.year, first.month)


def occurrence_in_year(d: date, year: int) -> date:
    """Same month/day in ``year``; Feb 29 falls on Mar 1 in common years."""
    try:
        return d.replace(year=year)
    except ValueError:
        return date(year, 3, 1)


def upcoming_birthdays(
    records: Sequence[Record], today: date, window_days: int = BIRTHDAY_WINDOW_DAYS
) -> List[BirthdayEntry]:
    window_days = min(max(window_days, 0), MAX_BIRTHDAY_WINDOW_DAYS)
    end = today + timedelta(days=window_days)
    entries: List[BirthdayEntry] = []
    for rec in records:
        name = lookup(rec, NAME_FIELDS)
        born = resolve_date(lookup(rec, BIRTHDATE_FIELDS), today.year)
        if not name or born is None:
            continue
        this_year = occurrence_in_year(born, today.year)
        if today <= this_year <= end:
            entries.append(BirthdayEntry(name, this_year))
    entries.sort(key=lambda e: e.date)
    logger.debug(
        "Birthdays in window %s..%s: %d of %d",
        today.isoformat(),
        end.isoformat(),
        len(entries),
        len(records),
    )
    return entries


def active_activities(records: Sequence[Record], today: date) -> List[Record]:
    kept: List[Record] = []
    for rec in records:
        end = resolve_date(lookup(rec, END_FIELDS), today.year)
        if end is None or end >= today:
            kept.append(rec)
    return kept
