"""
ledger.py - core ledger logic

Responsibilities:
 - load the expense list from a storage backend (fresh on every operation)
 - persist the full list after every mutation
 - provide the operations consumed by the CLI, the interactive menu and the
   dashboard:
     add_expense, delete_expense, list_expenses, filter_by_category,
     summarize (month / budget), totals_by_category, export_csv

There is no locking: two processes writing the same file at once can lose
updates or hand out the same id. Fine for a single-user tool.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional
import datetime
import logging

import pandas as pd

from spendr.errors import ExportError, InvalidInputError
from spendr.models import FIELD_NAMES, Expense
from spendr.parsing import parse_amount

logger = logging.getLogger(__name__)

MONTH_NAMES = [
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
]

CURRENCY = "Rs."


def format_amount(value) -> str:
    """Render 100.0 as "100" and 12.5 as "12.5"."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        return str(value)
    if number.is_integer():
        return str(int(number))
    return repr(number)


# (header, width) of the fixed-width listing; wide values are not truncated
TABLE_COLUMNS = [
    ("ID", 5),
    ("Date", 12),
    ("Description", 25),
    ("Amount", 10),
    ("Category", 20),
]


def format_table(expenses: List[Expense]) -> List[str]:
    """Header line plus one left-justified, space-separated line per expense."""
    def line(values):
        cells = [str(v).ljust(width) for v, (_, width) in zip(values, TABLE_COLUMNS)]
        return "# " + " ".join(cells)

    lines = [line([name for name, _ in TABLE_COLUMNS])]
    for e in expenses:
        lines.append(line([e.id, e.date, e.description, format_amount(e.amount), e.category]))
    return lines


def _as_int(value, default: int = 0) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _expense_month(expense: Expense) -> Optional[int]:
    try:
        return datetime.date.fromisoformat(expense.date).month
    except (TypeError, ValueError):
        # tolerate bad dates in the data file
        return None


@dataclass
class Summary:
    """Result of LedgerStore.summarize()."""
    total: float
    count: int
    month: Optional[int] = None
    budget: Optional[float] = None

    @property
    def month_name(self) -> Optional[str]:
        if self.month is None:
            return None
        return MONTH_NAMES[self.month - 1]

    @property
    def over_budget(self) -> bool:
        return self.budget is not None and self.total > self.budget

    def headline(self) -> str:
        if self.month is None:
            return f"# Total expenses: {CURRENCY}{format_amount(self.total)}"
        return f"# Total expenses for {self.month_name}: {CURRENCY}{format_amount(self.total)}"

    def warning(self) -> Optional[str]:
        """Over-budget warning line, or None when within budget (or no budget)."""
        if not self.over_budget:
            return None
        text = f"Warning: You have exceeded your budget of {CURRENCY}{format_amount(self.budget)}"
        if self.month is not None:
            text += f" for {self.month_name}"
        return text


class LedgerStore:
    """
    Expense ledger over a storage backend (spendr.storage.JsonFileStorage or
    MemoryStorage). Every public operation loads the ledger fresh, so the
    store holds no state between calls apart from the backend itself.
    """

    def __init__(self, storage):
        self.storage = storage

    # -----------------------
    # Persistence
    # -----------------------
    def load(self) -> List[Expense]:
        """Return the persisted expenses in insertion order ([] if no file yet)."""
        return [Expense.from_dict(d) for d in self.storage.load()]

    def save(self, expenses: List[Expense]):
        """Overwrite the backing storage with the full list."""
        logger.info("Saving ledger to %s (expenses=%d)", self.storage.location, len(expenses))
        self.storage.save([e.to_dict() for e in expenses])

    @staticmethod
    def next_id(expenses: List[Expense]) -> int:
        """1 for an empty ledger, otherwise max(existing ids) + 1."""
        if not expenses:
            return 1
        return max(_as_int(e.id) for e in expenses) + 1

    # -----------------------
    # Mutations
    # -----------------------
    def add_expense(
        self,
        description: str,
        amount,
        category: str,
        date: Optional[str] = None,
    ) -> Expense:
        """
        Create an Expense, append it and persist.
        amount: number or numeric string; anything else raises InvalidInputError.
        date: ISO string "YYYY-MM-DD", today when omitted.
        """
        amount = parse_amount(amount)
        if date is None:
            date = datetime.date.today().isoformat()
        expenses = self.load()
        exp = Expense(
            id=self.next_id(expenses),
            description=description or "",
            category=category or "",
            amount=amount,
            date=date,
        )
        expenses.append(exp)
        self.save(expenses)
        logger.info("Added expense id=%s (category=%s, amount=%s)", exp.id, exp.category, exp.amount)
        return exp

    def delete_expense(self, expense_id: int) -> bool:
        """Remove expense by id. Returns True if deleted, False if not found.

        Nothing is written when the id is unknown.
        """
        target_id = _as_int(expense_id, default=-1)
        expenses = self.load()
        for i, e in enumerate(expenses):
            if _as_int(e.id, default=-1) == target_id:
                removed = expenses.pop(i)
                self.save(expenses)
                logger.info("Deleted expense id=%s (category=%s, amount=%s). Remaining expenses=%d.",
                            target_id, removed.category, removed.amount, len(expenses))
                return True
        logger.info("Expense id=%s not found", target_id)
        return False

    # -----------------------
    # Queries
    # -----------------------
    def list_expenses(self) -> List[Expense]:
        return self.load()

    def filter_by_category(
        self,
        category: str,
        ignore_case: bool = False,
        expenses: Optional[List[Expense]] = None,
    ) -> List[Expense]:
        """
        Expenses whose category equals `category`. Exact comparison unless
        ignore_case is set, in which case both sides are casefolded.
        expenses: already-loaded ledger to filter instead of reading storage.
        """
        if expenses is None:
            expenses = self.load()
        if ignore_case:
            wanted = (category or "").casefold()
            return [e for e in expenses if e.category.casefold() == wanted]
        return [e for e in expenses if e.category == category]

    def _expenses_for_month(self, month: Optional[int]) -> List[Expense]:
        if month is None:
            return self.load()
        if not 1 <= _as_int(month) <= 12:
            raise InvalidInputError(f"month must be between 1 and 12, got {month!r}")
        month = int(month)
        # any year: March 2023 and March 2024 both count for month=3
        return [e for e in self.load() if _expense_month(e) == month]

    def summarize(self, month: Optional[int] = None, budget: Optional[float] = None) -> Summary:
        """
        Sum amounts over the whole ledger, or over one calendar month of any
        year when `month` (1-12) is given. Summary.over_budget is set when a
        budget is given and the total exceeds it.
        """
        expenses = self._expenses_for_month(month)
        total = sum(float(e.amount) for e in expenses)
        summary = Summary(total=total, count=len(expenses), month=month, budget=budget)
        if summary.over_budget:
            logger.info("Total %s exceeds budget %s", total, budget)
        return summary

    def totals_by_category(self, month: Optional[int] = None) -> Dict[str, float]:
        """Aggregate totals per category, optionally for one month."""
        totals: Dict[str, float] = {}
        for e in self._expenses_for_month(month):
            totals[e.category] = totals.get(e.category, 0.0) + float(e.amount)
        return totals

    # -----------------------
    # Export
    # -----------------------
    @staticmethod
    def to_dataframe(expenses: List[Expense]) -> pd.DataFrame:
        """One row per expense, columns in persisted field order."""
        return pd.DataFrame([e.to_dict() for e in expenses], columns=FIELD_NAMES)

    def to_csv_text(self) -> str:
        return self.to_dataframe(self.load()).to_csv(index=False)

    def export_csv(self, path: str) -> str:
        """
        Write the whole ledger to `path` as CSV (header row always present),
        overwriting any existing file. Returns the path written.
        """
        df = self.to_dataframe(self.load())
        try:
            df.to_csv(path, index=False)
        except OSError as exc:
            logger.exception("Failed to export expenses to %s", path)
            raise ExportError(f"could not write {path}: {exc}") from exc
        logger.info("Exported %d expenses to %s", len(df), path)
        return path
