"""
config.py - default file locations

Both files live in the current working directory unless overridden by the
environment or by the CLI flags (--file / --out).
"""

import os

DEFAULT_DATA_FILE = "expense.json"
DEFAULT_EXPORT_FILE = "expenses.csv"

DATA_FILE_ENV = "SPENDR_DATA_FILE"
EXPORT_FILE_ENV = "SPENDR_EXPORT_FILE"


def data_file() -> str:
    """Path of the ledger JSON file."""
    return (os.getenv(DATA_FILE_ENV) or "").strip() or DEFAULT_DATA_FILE


def export_file() -> str:
    """Path the CSV export is written to."""
    return (os.getenv(EXPORT_FILE_ENV) or "").strip() or DEFAULT_EXPORT_FILE
