from datetime import date

import pytest

from moneymood.expenses.aggregator import (
    by_category,
    by_month,
    expenses_in_month,
    monthly_summary,
    total,
)
from moneymood.expenses.models import ExpenseCategory, ExpenseRecord
from moneymood.utils.errors import ValidationError


def _expense(id, converted, category="food", day=date(2025, 1, 10)):
    return ExpenseRecord(
        id=id,
        amount=converted,
        currency="JPY",
        converted_amount=converted,
        exchange_rate=1,
        category=ExpenseCategory(category),
        date=day,
    )


EXPENSES = [
    _expense("1", 1200.5, "food"),
    _expense("2", 300, "transport"),
    _expense("3", 800.25, "food", date(2025, 2, 3)),
    _expense("4", 15000, "bills", date(2025, 2, 28)),
]


def test_total_empty():
    assert total([]) == 0


def test_total():
    assert total(EXPENSES) == pytest.approx(17300.75)


def test_total_order_independent():
    assert total(reversed(EXPENSES)) == pytest.approx(total(EXPENSES))


def test_by_category():
    assert by_category(EXPENSES) == pytest.approx({
        "food": 2000.75,
        "transport": 300,
        "bills": 15000,
    })
    assert "health" not in by_category(EXPENSES)
    assert by_category([]) == {}


def test_by_category_sums_to_total():
    assert sum(by_category(EXPENSES).values()) == pytest.approx(total(EXPENSES))


def test_by_month():
    assert by_month(EXPENSES) == pytest.approx({"2025-01": 1500.5, "2025-02": 15800.25})


def test_expenses_in_month():
    assert [e.id for e in expenses_in_month(EXPENSES, "2025-02")] == ["3", "4"]
    assert expenses_in_month(EXPENSES, "2024-12") == []
    with pytest.raises(ValidationError):
        expenses_in_month(EXPENSES, "2025/02")


def test_monthly_summary():
    summary = monthly_summary(EXPENSES, "2025-01")
    assert summary.count == 2
    assert summary.total_expense == pytest.approx(1500.5)
    assert summary.average_expense == pytest.approx(750.25)

    empty = monthly_summary(EXPENSES, "2025-03")
    assert empty.count == 0
    assert empty.average_expense == 0
