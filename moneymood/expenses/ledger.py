"""Application-owned list of expense records."""
from dataclasses import replace
from datetime import date, datetime, timezone
from typing import Any, Dict, Iterable, List, Optional

from moneymood.currency.converter import ExpenseConverter
from moneymood.expenses import aggregator
from moneymood.expenses.models import ExpenseCategory, ExpenseRecord, new_expense_id
from moneymood.life_state.classifier import describe
from moneymood.life_state.models import LifeStateReport
from moneymood.utils.errors import ExpenseNotFoundError, ValidationError
from moneymood.utils.logging import get_logger
from moneymood.utils.validation import validate_amount, validate_category, validate_expense_date


logger = get_logger(__name__)

# Fields a user edit may replace; id is never reassigned
EDITABLE_FIELDS = frozenset({
    "amount", "currency", "converted_amount", "exchange_rate", "category", "memo", "date",
})


class ExpenseLedger:
    """
    Creates, edits and removes expenses.

    New records only come from converter output, so ``converted_amount``
    and ``exchange_rate`` are snapshots of the rate at creation. Edits
    replace fields wholesale and never re-run the conversion.
    """

    def __init__(
        self,
        converter: ExpenseConverter,
        expenses: Optional[Iterable[ExpenseRecord]] = None,
    ):
        self.converter = converter
        self._expenses: List[ExpenseRecord] = list(expenses or [])

    @property
    def expenses(self) -> List[ExpenseRecord]:
        return list(self._expenses)

    def __len__(self) -> int:
        return len(self._expenses)

    async def add_expense(
        self,
        amount,
        currency,
        category: str,
        memo: str = "",
        date: Optional[Any] = None,
    ) -> ExpenseRecord:
        category = ExpenseCategory(validate_category(category, [c.value for c in ExpenseCategory]))
        expense_date = validate_expense_date(date) if date is not None else _today()

        conversion = await self.converter.convert(amount, currency)

        now = datetime.now(timezone.utc)
        record = ExpenseRecord(
            id=new_expense_id(),
            amount=conversion.amount,
            currency=conversion.currency,
            converted_amount=conversion.home_amount,
            exchange_rate=conversion.exchange_rate,
            category=category,
            date=expense_date,
            memo=memo or "",
            created_at=now,
            updated_at=now,
        )
        self._expenses.append(record)
        logger.info(
            f"Added expense {record.id}: {record.amount} {record.currency} -> {record.converted_amount:.2f}",
            extra={"currency": record.currency},
        )
        return record

    def get_expense(self, expense_id: str) -> ExpenseRecord:
        for record in self._expenses:
            if record.id == expense_id:
                return record
        raise ExpenseNotFoundError(f"Expense not found: {expense_id}")

    def update_expense(self, expense_id: str, **changes: Any) -> ExpenseRecord:
        unknown = set(changes) - EDITABLE_FIELDS
        if unknown:
            raise ValidationError(f"Cannot edit fields: {', '.join(sorted(unknown))}")

        if "amount" in changes:
            changes["amount"] = validate_amount(changes["amount"], max_amount=self.converter.max_amount)
        if "currency" in changes:
            changes["currency"] = self.converter.validate_currency(changes["currency"])
        if "category" in changes:
            changes["category"] = ExpenseCategory(
                validate_category(changes["category"], [c.value for c in ExpenseCategory])
            )
        if "date" in changes:
            changes["date"] = validate_expense_date(changes["date"])

        current = self.get_expense(expense_id)
        updated = replace(current, updated_at=datetime.now(timezone.utc), **changes)
        self._expenses = [updated if r.id == expense_id else r for r in self._expenses]
        logger.info(f"Updated expense {expense_id}")
        return updated

    def delete_expense(self, expense_id: str) -> None:
        self.get_expense(expense_id)
        self._expenses = [r for r in self._expenses if r.id != expense_id]
        logger.info(f"Deleted expense {expense_id}")

    def clear(self) -> None:
        self._expenses = []

    def expenses_in_month(self, month: str) -> List[ExpenseRecord]:
        return aggregator.expenses_in_month(self._expenses, month)

    def total(self) -> float:
        return aggregator.total(self._expenses)

    def by_category(self) -> Dict[str, float]:
        return aggregator.by_category(self._expenses)

    def life_state(self) -> LifeStateReport:
        return describe(self.total())


def _today() -> date:
    return date.today()
