"""
parsing.py - explicit parsing of user input

Every value typed by the user (flag or prompt) goes through one of these
functions. Bad input raises InvalidInputError; nothing is coerced to NaN.
"""

import math

from spendr.errors import InvalidInputError


def parse_amount(text) -> float:
    """Parse a monetary amount such as "12.50". Rejects empty, nan and inf."""
    raw = str(text if text is not None else "").strip()
    if not raw:
        raise InvalidInputError("amount is required")
    try:
        value = float(raw)
    except ValueError:
        raise InvalidInputError(f"'{raw}' is not a valid amount") from None
    if not math.isfinite(value):
        raise InvalidInputError(f"'{raw}' is not a valid amount")
    return value


def parse_expense_id(text) -> int:
    raw = str(text if text is not None else "").strip()
    try:
        value = int(raw)
    except ValueError:
        raise InvalidInputError(f"'{raw}' is not a valid expense id") from None
    if value <= 0:
        raise InvalidInputError(f"expense id must be positive, got {value}")
    return value


def parse_month(text) -> int:
    """Parse a calendar month number 1-12."""
    raw = str(text if text is not None else "").strip()
    try:
        value = int(raw)
    except ValueError:
        raise InvalidInputError(f"'{raw}' is not a valid month (expected 1-12)") from None
    if not 1 <= value <= 12:
        raise InvalidInputError(f"month must be between 1 and 12, got {value}")
    return value


def parse_budget(text) -> float:
    return parse_amount(text)
