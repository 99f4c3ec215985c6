"""Grid -> record conversion with header aliasing.

Headers are normalized (lower case, whitespace runs -> ``_``, accented vowels
-> bare vowel) so that "Fecha de Nacimiento" and "fecha_de_nacimiento" land on
the same key. Fields are then read through ordered candidate lists.
"""

from __future__ import annotations

import logging
import re
from typing import Dict, List, Sequence

logger = logging.getLogger(__name__)

Record = Dict[str, str]

WHITESPACE_RE = re.compile(r"\s+")
ACCENTS = str.maketrans("áéíóúü", "aeiouu")

NAME_FIELDS = ["nombre", "name"]
BIRTHDATE_FIELDS = [
    "fecha",
    "fecha_de_nacimiento",
    "fecha de nacimiento",
    "nacimiento",
    "cumpleaños",
]
START_FIELDS = ["empieza", "fecha_de_inicio", "fecha_inicio"]
END_FIELDS = ["termina", "fecha_de_fin", "fecha_fin"]
PLACE_FIELDS = ["lugar", "Lugar"]
DAY_FIELDS = ["día", "dia", "Día"]
TIME_FIELDS = ["hora", "Hora"]
MANAGER_FIELDS = ["encargado", "Encargado"]
ACTIVITY_FIELDS = ["actividad", "tipo_de_actividad", "tipo", "Tipo de actividad"]
PRIEST_FIELDS = ["sacerdote", "predicador", "Predicador"]
DIRECTOR_FIELDS = ["director", "Director"]
SIGNUP_FIELDS = ["inscripción", "inscripcion", "link_inscripcion", "link"]


def normalize_header(header) -> str:
    h = str(header or "").strip().lower()
    h = WHITESPACE_RE.sub("_", h)
    return h.translate(ACCENTS)


def to_records(grid: Sequence[Sequence[str]]) -> List[Record]:
    """Zip each data row with the normalized header row.

    Missing trailing cells read as "", cells past the last header are
    ignored and rows with no non-empty value are dropped. Output keeps the
    input row order.
    """
    if len(grid) < 2:
        return []
    headers = [normalize_header(h) for h in grid[0]]
    records: List[Record] = []
    for idx, row in enumerate(grid[1:], start=1):
        rec: Record = {}
        for j, h in enumerate(headers):
            rec[h] = str(row[j]).strip() if j < len(row) and row[j] is not None else ""
        if any(rec.values()):
            records.append(rec)
        else:
            logger.debug("Dropping blank row %d", idx)
    return records


def lookup(record: Record, candidates: Sequence[str]) -> str:
    """First non-empty value among the candidate keys, else ""."""
    for key in candidates:
        value = record.get(normalize_header(key)) or record.get(key)
        if value:
            return value
    return ""
