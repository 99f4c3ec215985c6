"""Local workbook source (offline counterpart of the Google Sheets reader).

Accepts an Excel workbook with one sheet per source (``rt``, ``crt-cv``,
``ces``, ``cumpleaños``) or a directory holding ``<source>.csv`` files. Cells
are stringified the same way the Sheets API returns them: dates as ISO text,
whole numbers without a decimal part, blanks as "".
"""

from __future__ import annotations

import logging
import os
from datetime import date, datetime
from typing import Dict, Iterable, List, Optional

import pandas as pd

from .summary import SHEET_RANGES

logger = logging.getLogger(__name__)

EXCEL_EXTENSIONS = (".xlsx", ".xlsm", ".xls")


def cell_text(value) -> str:
    if value is None:
        return ""
    if isinstance(value, (datetime, pd.Timestamp)):
        if pd.isna(value):
            return ""
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, float):
        if pd.isna(value):
            return ""
        if value.is_integer():
            return str(int(value))
    return str(value).strip()


def frame_to_grid(df: pd.DataFrame) -> List[List[str]]:
    """Header-less frame -> grid; row 0 of the frame is the header row."""
    return [
        [cell_text(v) for v in row] for row in df.itertuples(index=False, name=None)
    ]


def _sheet_key(name) -> str:
    return str(name).strip().lower()


def load_workbook_grids(
    path: str, sources: Optional[Iterable[str]] = None
) -> Dict[str, List[List[str]]]:
    if not os.path.exists(path):
        raise FileNotFoundError(path)
    wanted = list(sources or SHEET_RANGES.keys())
    frames: Dict[str, pd.DataFrame] = {}
    if os.path.isdir(path):
        for fname in os.listdir(path):
            stem, ext = os.path.splitext(fname)
            if ext.lower() == ".csv":
                frames[_sheet_key(stem)] = pd.read_csv(
                    os.path.join(path, fname),
                    header=None,
                    dtype=str,
                    keep_default_na=False,
                    encoding="utf-8-sig",
                )
    elif path.lower().endswith(EXCEL_EXTENSIONS):
        raw = pd.read_excel(path, sheet_name=None, header=None, dtype=object)
        frames = {_sheet_key(name): df for name, df in raw.items()}
    else:
        raise ValueError(f"Unsupported workbook type: {path}")

    grids: Dict[str, List[List[str]]] = {}
    for key in wanted:
        df = frames.get(_sheet_key(key))
        if df is None:
            logger.warning("Sheet '%s' not found in %s; treating as empty", key, path)
            grids[key] = []
            continue
        grids[key] = frame_to_grid(df)
        logger.debug("Loaded %d rows for sheet '%s'", len(grids[key]), key)
    return grids
