"""Pytest configuration isolating tests from a developer's Google credentials.

Clears GOOGLE_SERVICE_ACCOUNT_JSON and pins SHEET_ID BEFORE the web modules are
imported, so load_dotenv() cannot hand a real service account to the tests
(python-dotenv never overrides variables that are already set).
"""

import os

os.environ["GOOGLE_SERVICE_ACCOUNT_JSON"] = ""
os.environ.setdefault("SHEET_ID", "test-sheet-id")
