"""Exceptions raised by the ledger store and the input parsers."""


class SpendrError(Exception):
    """Base class for all errors reported to the user."""


class InvalidInputError(SpendrError, ValueError):
    """Raised when a user-supplied amount, id, month or budget cannot be parsed."""


class LedgerFormatError(SpendrError):
    """Raised when the persisted ledger file is not a JSON array of objects."""


class ExportError(SpendrError):
    """Raised when the CSV export cannot be written."""
