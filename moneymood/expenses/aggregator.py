"""Pure aggregation over expense records."""
from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, Iterable, List

from moneymood.expenses.models import ExpenseRecord
from moneymood.utils.validation import validate_month


@dataclass
class MonthlySummary:
    month: str  # YYYY-MM
    total_expense: float
    average_expense: float
    count: int


def total(expenses: Iterable[ExpenseRecord]) -> float:
    """Sum of converted amounts; 0 for an empty collection."""
    return sum((expense.converted_amount for expense in expenses), 0)


def by_category(expenses: Iterable[ExpenseRecord]) -> Dict[str, float]:
    """Subtotal per category. Categories with no expenses are omitted."""
    totals: Dict[str, float] = defaultdict(float)
    for expense in expenses:
        totals[expense.category.value] += expense.converted_amount
    return dict(totals)


def by_month(expenses: Iterable[ExpenseRecord]) -> Dict[str, float]:
    """Subtotal per YYYY-MM month, in chronological order."""
    totals: Dict[str, float] = defaultdict(float)
    for expense in expenses:
        totals[expense.month] += expense.converted_amount
    return dict(sorted(totals.items()))


def expenses_in_month(expenses: Iterable[ExpenseRecord], month: str) -> List[ExpenseRecord]:
    month = validate_month(month)
    return [expense for expense in expenses if expense.month == month]


def monthly_summary(expenses: Iterable[ExpenseRecord], month: str) -> MonthlySummary:
    selected = expenses_in_month(expenses, month)
    month_total = total(selected)
    return MonthlySummary(
        month=month,
        total_expense=month_total,
        average_expense=month_total / len(selected) if selected else 0,
        count=len(selected),
    )
