import datetime
import json

import pytest
from spendr.cli import main
from spendr.models import Expense
from spendr.storage import JsonFileStorage


@pytest.fixture
def ledger_file(tmp_path):
    return tmp_path / "expense.json"


def _seed(path, *expenses):
    JsonFileStorage(str(path)).save([e.to_dict() for e in expenses])


def _run(path, *argv):
    return main(["--file", str(path), *argv])


def test_add_then_list(ledger_file, capsys):
    assert _run(ledger_file, "add", "--desc", "Lunch", "--amt", "120", "--cat", "Food") == 0
    assert "# Expense added successfully. (ID: 1)" in capsys.readouterr().out

    assert _run(ledger_file, "list") == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("# ID    Date")
    assert lines[1].split() == ["#", "1", datetime.date.today().isoformat(), "Lunch", "120", "Food"]


def test_add_rejects_non_numeric_amount(ledger_file, capsys):
    with pytest.raises(SystemExit) as exc:
        _run(ledger_file, "add", "--desc", "Lunch", "--amt", "abc")
    assert exc.value.code == 2
    assert "not a valid amount" in capsys.readouterr().err
    assert not ledger_file.exists()


def test_list_empty(ledger_file, capsys):
    assert _run(ledger_file, "list") == 0
    assert capsys.readouterr().out.strip() == "No expenses recorded."


def test_delete(ledger_file, capsys):
    _seed(ledger_file, Expense(id=1, description="a", amount=1), Expense(id=2, description="b", amount=2))
    assert _run(ledger_file, "delete", "--id", "1") == 0
    assert "# Expense deleted successfully (ID: 1)" in capsys.readouterr().out
    assert [d["id"] for d in json.loads(ledger_file.read_text(encoding="utf-8"))] == [2]


def test_delete_not_found(ledger_file, capsys):
    _seed(ledger_file, Expense(id=1, amount=1))
    before = ledger_file.read_bytes()
    assert _run(ledger_file, "delete", "--id", "9") == 0
    assert "Expense with ID 9 not found." in capsys.readouterr().out
    assert ledger_file.read_bytes() == before


def test_filter(ledger_file, capsys):
    _seed(
        ledger_file,
        Expense(id=1, description="Pizza", category="Food", amount=10, date="2024-03-05"),
        Expense(id=2, description="Train", category="Travel", amount=20, date="2024-03-06"),
    )
    assert _run(ledger_file, "filter", "--cat", "Food") == 0
    out = capsys.readouterr().out
    assert "# Expenses in the category 'Food': " in out
    assert "# Pizza: Rs.10 on 2024-03-05" in out
    assert "Train" not in out

    _run(ledger_file, "filter", "--cat", "food")
    assert "No expenses found in the category 'food'." in capsys.readouterr().out

    _run(ledger_file, "filter", "--cat", "food", "--ignore-case")
    assert "# Pizza: Rs.10 on 2024-03-05" in capsys.readouterr().out


def test_filter_on_empty_ledger(ledger_file, capsys):
    _run(ledger_file, "filter", "--cat", "Food")
    assert capsys.readouterr().out.strip() == "No expenses recorded."


def test_summary_month_and_budget(ledger_file, capsys):
    _seed(
        ledger_file,
        Expense(id=1, amount=100, date="2024-03-05"),
        Expense(id=2, amount=50, date="2024-04-01"),
    )
    assert _run(ledger_file, "summary", "--month", "3", "--budget", "50") == 0
    out = capsys.readouterr().out
    assert "# Total expenses for March: Rs.100" in out
    assert "Warning: You have exceeded your budget of Rs.50 for March" in out

    _run(ledger_file, "summary", "--budget", "500")
    out = capsys.readouterr().out
    assert "# Total expenses: Rs.150" in out
    assert "Warning" not in out


def test_summary_rejects_bad_month(ledger_file):
    with pytest.raises(SystemExit) as exc:
        _run(ledger_file, "summary", "--month", "13")
    assert exc.value.code == 2


def test_export(ledger_file, tmp_path, capsys):
    out_file = tmp_path / "out.csv"
    _seed(ledger_file, Expense(id=1, description="Pizza", category="Food", amount=10.5, date="2024-03-05"))
    assert _run(ledger_file, "export", "--out", str(out_file)) == 0
    assert f"# Expenses exported to {out_file}" in capsys.readouterr().out
    assert out_file.read_text(encoding="utf-8").splitlines() == [
        "id,description,category,amount,date",
        "1,Pizza,Food,10.5,2024-03-05",
    ]


def test_export_default_path_from_environment(ledger_file, tmp_path, monkeypatch):
    target = tmp_path / "env.csv"
    monkeypatch.setenv("SPENDR_EXPORT_FILE", str(target))
    assert _run(ledger_file, "export") == 0
    assert target.exists()


def test_export_failure_exit_code(ledger_file, tmp_path, capsys):
    assert _run(ledger_file, "export", "--out", str(tmp_path / "nope" / "out.csv")) == 1
    assert "Error: could not write" in capsys.readouterr().err


def test_malformed_ledger_exit_code(ledger_file, capsys):
    ledger_file.write_text("[{broken", encoding="utf-8")
    assert _run(ledger_file, "list") == 1
    assert "Error:" in capsys.readouterr().err


def test_data_file_from_environment(tmp_path, monkeypatch, capsys):
    target = tmp_path / "env.json"
    monkeypatch.setenv("SPENDR_DATA_FILE", str(target))
    assert main(["add", "--amt", "5"]) == 0
    assert json.loads(target.read_text(encoding="utf-8"))[0]["amount"] == 5.0


def test_version(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--version"])
    assert exc.value.code == 0
    assert "spendr-cli 1.0.0" in capsys.readouterr().out


def test_summary_tolerates_null_amount(ledger_file, capsys):
    ledger_file.write_text(json.dumps([
        {"id": 1, "description": "x", "category": "Food", "amount": None, "date": "2024-03-05"},
        {"id": 2, "description": "y", "category": "Food", "amount": 10, "date": "2024-03-06"},
    ]), encoding="utf-8")
    assert _run(ledger_file, "summary") == 0
    assert "# Total expenses: Rs.10" in capsys.readouterr().out

    assert _run(ledger_file, "filter", "--cat", "Food") == 0
    assert "# x: Rs.0 on 2024-03-05" in capsys.readouterr().out
