"""Expense records, aggregation, ledger and export bundles."""

from .aggregator import MonthlySummary, by_category, by_month, expenses_in_month, monthly_summary, total
from .export import ImportResult, build_export_bundle, load_bundle, parse_export_bundle, save_bundle
from .ledger import ExpenseLedger
from .models import CATEGORY_LABELS, ExpenseCategory, ExpenseRecord

__all__ = [
    "CATEGORY_LABELS",
    "ExpenseCategory",
    "ExpenseLedger",
    "ExpenseRecord",
    "ImportResult",
    "MonthlySummary",
    "build_export_bundle",
    "by_category",
    "by_month",
    "expenses_in_month",
    "load_bundle",
    "monthly_summary",
    "parse_export_bundle",
    "save_bundle",
    "total",
]
