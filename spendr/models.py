"""
models.py - Data model definitions

This file defines the Expense dataclass used across the ledger store, the CLI
and the dashboard. Expenses are serialized to/from simple dicts so they can be
persisted as a JSON array in expense.json.
"""

from dataclasses import dataclass, field
from typing import Dict
import math


# column order of the persisted objects and of the CSV export header
FIELD_NAMES = ["id", "description", "category", "amount", "date"]


def _to_float(value, default: float = 0.0) -> float:
    # null / non-numeric amounts (NaN written by older tools as null) count as 0
    try:
        number = float(str(value).strip())
    except (TypeError, ValueError):
        return default
    return number if math.isfinite(number) else default


def _to_text(value) -> str:
    return "" if value is None else str(value)


@dataclass
class Expense:
    """
    Represents a single recorded expense.

    Fields:
      - id: positive integer unique within the ledger (assigned by the store)
      - description: free-text description
      - category: free-text category (e.g. Food, Travel)
      - amount: numeric amount of the expense (sign is not validated)
      - date: ISO date string "YYYY-MM-DD", defaults to the creation date
    """
    id: int = field(default=0)
    description: str = ""
    category: str = ""
    amount: float = 0.0
    date: str = ""  # stored as ISO "YYYY-MM-DD"

    def to_dict(self) -> Dict:
        """
        Convert to a plain dict suitable for JSON serialization.
        The store writes lists of these dicts to the ledger file.
        """
        return {
            "id": self.id,
            "description": self.description,
            "category": self.category,
            "amount": self.amount,
            "date": self.date,
        }

    @staticmethod
    def from_dict(d: Dict) -> "Expense":
        """
        Construct an Expense from a dict (inverse of to_dict).
        Uses defaults for missing keys and coerces field types so hand-edited
        files (or a null amount) are tolerated.
        """
        return Expense(
            id=d.get("id", 0),
            description=_to_text(d.get("description")),
            category=_to_text(d.get("category")),
            amount=_to_float(d.get("amount")),
            date=_to_text(d.get("date")),
        )
