"""Assemble the query-ready event model from the four source grids."""

from __future__ import annotations

import logging
from datetime import date
from typing import Dict, List, Sequence

from .events import (
    BIRTHDAY_WINDOW_DAYS,
    active_activities,
    upcoming_birthdays,
    upcoming_retreats,
)
from .formatting import format_long_date, format_range, signup_url
from .records import (
    ACTIVITY_FIELDS,
    DAY_FIELDS,
    DIRECTOR_FIELDS,
    END_FIELDS,
    MANAGER_FIELDS,
    PLACE_FIELDS,
    PRIEST_FIELDS,
    SIGNUP_FIELDS,
    START_FIELDS,
    TIME_FIELDS,
    lookup,
    to_records,
)
from .schemas import BirthdayOut, RetreatOut, SheetSummary

logger = logging.getLogger(__name__)

# source key -> A1 range
SHEET_RANGES = {
    "rt": "rt!A:L",
    "crt-cv": "crt-cv!A:Z",
    "ces": "ces!A:Z",
    "cumpleaños": "'cumpleaños'!A:Z",
}


def build_summary(
    grids: Dict[str, Sequence[Sequence[str]]],
    today: date,
    birthday_window_days: int = BIRTHDAY_WINDOW_DAYS,
) -> SheetSummary:
    """Run every selector over its grid. Missing grids count as empty."""
    retreats, label = upcoming_retreats(grids.get("rt") or [], today)
    ces = to_records(grids.get("ces") or [])
    crt_cv = active_activities(to_records(grids.get("crt-cv") or []), today)
    birthdays = upcoming_birthdays(
        to_records(grids.get("cumpleaños") or []), today, birthday_window_days
    )
    logger.info(
        "Summary for %s: %d retreats, %d ces, %d crt-cv, %d birthdays",
        today.isoformat(),
        len(retreats),
        len(ces),
        len(crt_cv),
        len(birthdays),
    )
    return SheetSummary(
        retiros_proximos=[
            RetreatOut(fecha=o.date.isoformat(), lugar=o.place) for o in retreats
        ],
        mes_retiros_label=label,
        ces=ces,
        crt_cv=crt_cv,
        cumpleanos_proximos=[
            BirthdayOut(nombre=b.name, fecha=b.date.isoformat()) for b in birthdays
        ],
    )


def summary_lines(summary: SheetSummary, window_days: int = BIRTHDAY_WINDOW_DAYS) -> List[str]:
    """Plain-text digest of a summary, one entry per line."""
    lines: List[str] = []
    header = "Retiros mensuales"
    if summary.mes_retiros_label:
        header += f" ({summary.mes_retiros_label})"
    lines.append(header)
    if not summary.retiros_proximos:
        lines.append("  No hay fechas cargadas para los próximos retiros.")
    for r in summary.retiros_proximos:
        prefix = f"{r.lugar} · " if r.lugar else ""
        lines.append(f"  {prefix}{format_long_date(r.fecha)}")

    lines.append("Círculos de estudio")
    if not summary.ces:
        lines.append("  No hay círculos cargados.")
    for row in summary.ces:
        lines.append(
            "  {} · {} · {} · Encargado: {}".format(
                lookup(row, PLACE_FIELDS) or "—",
                lookup(row, DAY_FIELDS) or "—",
                lookup(row, TIME_FIELDS) or "—",
                lookup(row, MANAGER_FIELDS) or "—",
            )
        )

    lines.append("Actividades del año")
    if not summary.crt_cv:
        lines.append("  No hay actividades cargadas.")
    for row in summary.crt_cv:
        line = "  {} · Lugar: {} · {} · Sacerdote: {} · Director: {}".format(
            lookup(row, ACTIVITY_FIELDS) or "Actividad",
            lookup(row, PLACE_FIELDS) or "—",
            format_range(lookup(row, START_FIELDS), lookup(row, END_FIELDS)),
            lookup(row, PRIEST_FIELDS) or "—",
            lookup(row, DIRECTOR_FIELDS) or "—",
        )
        link = signup_url(lookup(row, SIGNUP_FIELDS))
        if link:
            line += f" · Inscripción: {link}"
        lines.append(line)

    lines.append(f"Cumpleaños (próximos {window_days} días)")
    if not summary.cumpleanos_proximos:
        lines.append(f"  No hay cumpleaños en los próximos {window_days} días.")
    for b in summary.cumpleanos_proximos:
        lines.append(f"  {b.nombre} · {format_long_date(b.fecha)}")
    return lines
