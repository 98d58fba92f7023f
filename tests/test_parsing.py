import pytest
from spendr.errors import InvalidInputError
from spendr.parsing import parse_amount, parse_budget, parse_expense_id, parse_month


def test_parse_amount():
    assert parse_amount("12.50") == 12.5
    assert parse_amount(" 100 ") == 100.0
    assert parse_amount(7) == 7.0
    assert parse_amount("-5") == -5.0


@pytest.mark.parametrize("bad", ["", "abc", "12,50", "nan", "inf", None])
def test_parse_amount_rejects(bad):
    with pytest.raises(InvalidInputError):
        parse_amount(bad)


def test_parse_expense_id():
    assert parse_expense_id("3") == 3
    for bad in ("0", "-1", "1.5", "x"):
        with pytest.raises(InvalidInputError):
            parse_expense_id(bad)


def test_parse_month():
    assert parse_month("1") == 1
    assert parse_month("12") == 12
    for bad in ("0", "13", "March"):
        with pytest.raises(InvalidInputError):
            parse_month(bad)


def test_parse_budget():
    assert parse_budget("500") == 500.0
    with pytest.raises(InvalidInputError):
        parse_budget("lots")
