"""FastAPI application serving the normalized event model.

Endpoints:
  GET /api/sheets -> upcoming retreats, study circles, active courses, birthdays
  GET /health     -> liveness probe

Data is read from Google Sheets on every request (see sheets.py).
"""

from __future__ import annotations

import logging
import os
from datetime import date

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.responses import JSONResponse

from ..events import BIRTHDAY_WINDOW_DAYS, MAX_BIRTHDAY_WINDOW_DAYS
from ..summary import build_summary
from ..schemas import ErrorOut
from .sheets import _get_service_account_json, fetch_grids

load_dotenv()  # must come BEFORE reading env-based configuration so values are populated

MISSING_CONFIG_MESSAGE = (
    "Configura GOOGLE_SERVICE_ACCOUNT_JSON (cuenta de servicio de Google)."
)
FETCH_FAILED_MESSAGE = (
    "No se pudo leer la planilla. Revisa que la cuenta de servicio tenga acceso "
    "(comparte la hoja con su email)."
)

app = FastAPI(title="Arboleda API", version="0.1.0")
logger = logging.getLogger("arboleda.web")
if not logger.handlers:
    _h = logging.StreamHandler()
    _h.setFormatter(logging.Formatter("[%(asctime)s] %(levelname)s %(message)s"))
    logger.addHandler(_h)
logger.setLevel(logging.INFO)


def _today() -> date:
    return date.today()


def _get_birthday_window_days() -> int:
    raw = os.environ.get("ARBOLEDA_BIRTHDAY_WINDOW_DAYS")
    if not raw:
        return BIRTHDAY_WINDOW_DAYS
    try:
        days = int(raw)
    except ValueError:
        days = -1
    if not 0 <= days <= MAX_BIRTHDAY_WINDOW_DAYS:
        logger.warning(
            "Invalid ARBOLEDA_BIRTHDAY_WINDOW_DAYS=%r; using %d", raw, BIRTHDAY_WINDOW_DAYS
        )
        return BIRTHDAY_WINDOW_DAYS
    return days


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/api/sheets")
def get_sheets():
    if not _get_service_account_json():
        return JSONResponse(
            ErrorOut(error=MISSING_CONFIG_MESSAGE).model_dump(), status_code=503
        )
    today = _today()
    try:
        grids = fetch_grids()
        summary = build_summary(grids, today, _get_birthday_window_days())
    except Exception as e:
        logger.exception("Sheet fetch failed: %s", e)
        return JSONResponse(
            ErrorOut(error=FETCH_FAILED_MESSAGE).model_dump(), status_code=502
        )
    return JSONResponse(summary.model_dump(by_alias=True))
