"""Google Sheets source: reads the named ranges as grids of trimmed text.

The service-account JSON payload comes from GOOGLE_SERVICE_ACCOUNT_JSON and the
spreadsheet id from SHEET_ID. The ranges are independent, so they are read in
parallel and joined before returning.
"""

from __future__ import annotations

import json
import logging
import os
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, List, Optional

from dotenv import load_dotenv
from google.oauth2 import service_account
from googleapiclient.discovery import build

from ..summary import SHEET_RANGES

load_dotenv()

SCOPES = ["https://www.googleapis.com/auth/spreadsheets.readonly"]
DEFAULT_SHEET_ID = "1KD20URgHePrH-4Hb6Z_eSxMhqF6xpMlX4uS8oWEvofc"

logger = logging.getLogger(__name__)


class SheetsConfigError(RuntimeError):
    """Service-account configuration is missing or unreadable."""


def _get_service_account_json() -> Optional[str]:
    return os.environ.get("GOOGLE_SERVICE_ACCOUNT_JSON")


def _get_sheet_id() -> str:
    return os.environ.get("SHEET_ID") or DEFAULT_SHEET_ID


def get_credentials():
    raw = _get_service_account_json()
    if not raw:
        raise SheetsConfigError("Falta GOOGLE_SERVICE_ACCOUNT_JSON")
    try:
        info = json.loads(raw)
    except ValueError:
        raise SheetsConfigError("GOOGLE_SERVICE_ACCOUNT_JSON no es un JSON válido")
    return service_account.Credentials.from_service_account_info(info, scopes=SCOPES)


def stringify_rows(rows) -> List[List[str]]:
    return [[str("" if c is None else c).strip() for c in row] for row in rows or []]


def get_sheet_values(range_: str, credentials, sheet_id: str) -> List[List[str]]:
    # one client per call; the underlying http object is not thread-safe
    service = build("sheets", "v4", credentials=credentials, cache_discovery=False)
    res = (
        service.spreadsheets()
        .values()
        .get(spreadsheetId=sheet_id, range=range_)
        .execute()
    )
    rows = stringify_rows(res.get("values"))
    logger.debug("Read %d rows from %s", len(rows), range_)
    return rows


def fetch_grids(ranges: Optional[Dict[str, str]] = None) -> Dict[str, List[List[str]]]:
    """Read every range concurrently; any failure propagates to the caller."""
    ranges = ranges or SHEET_RANGES
    credentials = get_credentials()
    sheet_id = _get_sheet_id()
    with ThreadPoolExecutor(max_workers=len(ranges)) as pool:
        futures = {
            key: pool.submit(get_sheet_values, rng, credentials, sheet_id)
            for key, rng in ranges.items()
        }
        return {key: fut.result() for key, fut in futures.items()}
