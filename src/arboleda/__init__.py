"""arboleda package initialization.

Public API surface:
 - resolve_date / resolve_month_name: spreadsheet date tokens -> calendar dates
 - to_records / lookup: header-aliased records from raw grids
 - upcoming_retreats, upcoming_birthdays, active_activities: selection against a reference day
 - format_range: compact label for a start/end pair
 - build_summary: the full event model from the four source grids
"""
from .dates import resolve_date, resolve_month_name
from .events import active_activities, upcoming_birthdays, upcoming_retreats
from .formatting import format_range
from .records import lookup, to_records
from .summary import build_summary

__all__ = [
    "resolve_date",
    "resolve_month_name",
    "to_records",
    "lookup",
    "upcoming_retreats",
    "upcoming_birthdays",
    "active_activities",
    "format_range",
    "build_summary",
]
