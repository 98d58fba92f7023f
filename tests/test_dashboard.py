import json
import os

from streamlit.testing.v1 import AppTest

APP = os.path.join(os.path.dirname(__file__), "..", "app.py")


def test_add_expense_then_summary(tmp_path, monkeypatch):
    ledger = tmp_path / "expense.json"
    monkeypatch.setenv("SPENDR_DATA_FILE", str(ledger))

    at = AppTest.from_file(APP).run()
    assert not at.exception
    at.text_input[0].input("Dinner")
    at.text_input[1].input("42")
    at.text_input[2].input("Food")
    at.button[0].click().run()
    assert not at.exception
    assert [s.value for s in at.success] == ["Expense added."]

    [record] = json.loads(ledger.read_text(encoding="utf-8"))
    assert (record["description"], record["amount"], record["category"]) == ("Dinner", 42.0, "Food")

    at.sidebar.selectbox[0].select("Summary").run()
    assert not at.exception
    assert any("Total expenses: Rs.42" in m.value for m in at.markdown)


def test_add_expense_rejects_bad_amount(tmp_path, monkeypatch):
    ledger = tmp_path / "expense.json"
    monkeypatch.setenv("SPENDR_DATA_FILE", str(ledger))

    at = AppTest.from_file(APP).run()
    at.text_input[1].input("abc")
    at.button[0].click().run()
    assert [e.value for e in at.error] == ["'abc' is not a valid amount"]
    assert not ledger.exists()
