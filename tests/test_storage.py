import json
import os

import pytest
from spendr.errors import LedgerFormatError
from spendr.storage import JsonFileStorage, MemoryStorage


def test_json_storage_missing_file(tmp_path):
    storage = JsonFileStorage(str(tmp_path / "expense.json"))
    assert not storage.exists()
    assert storage.load() == []


def test_json_storage_writes_indented_array(tmp_path):
    path = tmp_path / "expense.json"
    storage = JsonFileStorage(str(path))
    records = [{"id": 1, "description": "Dinner", "category": "Food", "amount": 100.0, "date": "2024-03-05"}]
    storage.save(records)
    text = path.read_text(encoding="utf-8")
    assert text == json.dumps(records, indent=2)
    assert storage.load() == records


def test_json_storage_leaves_no_temp_files(tmp_path):
    storage = JsonFileStorage(str(tmp_path / "expense.json"))
    storage.save([])
    storage.save([{"id": 1}])
    assert os.listdir(tmp_path) == ["expense.json"]


def test_json_storage_creates_parent_directory(tmp_path):
    storage = JsonFileStorage(str(tmp_path / "data" / "expense.json"))
    storage.save([{"id": 1}])
    assert storage.load() == [{"id": 1}]


def test_json_storage_rejects_non_array(tmp_path):
    path = tmp_path / "expense.json"
    path.write_text('{"expenses": []}', encoding="utf-8")
    with pytest.raises(LedgerFormatError):
        JsonFileStorage(str(path)).load()


def test_memory_storage_keeps_serialized_text():
    storage = MemoryStorage()
    assert storage.load() == []
    storage.save([{"id": 1}])
    assert storage.text == json.dumps([{"id": 1}], indent=2)
    assert storage.saves == 1
    assert MemoryStorage("not json").exists()
    with pytest.raises(LedgerFormatError):
        MemoryStorage("not json").load()
