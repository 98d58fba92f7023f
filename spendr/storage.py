"""
storage.py - persistence backends for the ledger

A backend stores the ledger as a JSON array of expense dicts and exposes:
  - load() -> list of dicts ([] when nothing has been saved yet)
  - save(records) -> rewrite everything
  - location: short description used in log messages
"""

from typing import Any, Dict, List, Optional
import json
import logging
import os
import shutil
import tempfile

from spendr.errors import LedgerFormatError

logger = logging.getLogger(__name__)


def _encode(records: List[Dict[str, Any]]) -> str:
    return json.dumps(records, indent=2)


def _decode(text: str, source: str) -> List[Dict[str, Any]]:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise LedgerFormatError(f"{source} is not valid JSON ({exc})") from exc
    if not isinstance(data, list) or not all(isinstance(d, dict) for d in data):
        raise LedgerFormatError(f"{source} must contain a JSON array of expense objects")
    return data


class JsonFileStorage:
    """Ledger kept in a JSON file on disk (expense.json by default)."""

    def __init__(self, path: str):
        self.path = path

    @property
    def location(self) -> str:
        return os.path.abspath(self.path)

    def exists(self) -> bool:
        return os.path.exists(self.path)

    def load(self) -> List[Dict[str, Any]]:
        if not self.exists():
            return []
        with open(self.path, "r", encoding="utf-8") as f:
            text = f.read()
        return _decode(text, self.path)

    def save(self, records: List[Dict[str, Any]]):
        """
        Persist the records atomically: write to a temp file in the target
        directory, fsync, then move it over the ledger file.
        """
        target = self.location
        dirn = os.path.dirname(target)
        os.makedirs(dirn, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(prefix="tmp_expense_", suffix=".json", dir=dirn, text=True)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(_encode(records))
                f.flush()
                os.fsync(f.fileno())
            shutil.move(tmp_path, target)
        except Exception:
            logger.exception("Failed to save ledger file %s", target)
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise


class MemoryStorage:
    """
    In-memory backend used by tests. Keeps the serialized JSON text so tests
    can compare exactly what would have been written to disk.
    """

    location = "<memory>"

    def __init__(self, text: Optional[str] = None):
        self.text = text
        self.saves = 0

    def exists(self) -> bool:
        return self.text is not None

    def load(self) -> List[Dict[str, Any]]:
        if self.text is None:
            return []
        return _decode(self.text, self.location)

    def save(self, records: List[Dict[str, Any]]):
        self.text = _encode(records)
        self.saves += 1
