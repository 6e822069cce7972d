"""
Expense record model.

Records serialise to the camelCase JSON shape stored under
``moneymood-expenses`` and carried in export bundles.
"""
import uuid
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, Optional

from moneymood.currency.models import SUPPORTED_CURRENCIES
from moneymood.utils.errors import InvalidInputError, ValidationError


EXPENSES_STORAGE_KEY = "moneymood-expenses"
SETTINGS_STORAGE_KEY = "moneymood-settings"


class ExpenseCategory(str, Enum):
    """Closed set of spending categories."""
    FOOD = "food"
    TRANSPORT = "transport"
    ENTERTAINMENT = "entertainment"
    SHOPPING = "shopping"
    BILLS = "bills"
    HEALTH = "health"
    EDUCATION = "education"
    OTHER = "other"


CATEGORY_LABELS: Dict[str, str] = {
    "food": "🍽️ Food",
    "transport": "🚗 Transport",
    "entertainment": "🎮 Entertainment",
    "shopping": "🛍️ Shopping",
    "bills": "📄 Bills",
    "health": "🏥 Health",
    "education": "📚 Education",
    "other": "📝 Other",
}


def new_expense_id() -> str:
    return str(uuid.uuid4())


@dataclass(frozen=True)
class ExpenseRecord:
    """One spending event, valued in home currency at creation time."""

    id: str
    amount: float
    currency: str
    converted_amount: float  # home currency, frozen at creation
    exchange_rate: float  # converted_amount / amount; 1 for home currency
    category: ExpenseCategory
    date: date
    memo: str = ""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def month(self) -> str:
        """YYYY-MM key this expense is attributed to."""
        return self.date.isoformat()[:7]

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "id": self.id,
            "amount": self.amount,
            "currency": self.currency,
            "convertedAmount": self.converted_amount,
            "category": self.category.value,
            "memo": self.memo,
            "date": self.date.isoformat(),
            "exchangeRate": self.exchange_rate,
        }
        if self.created_at is not None:
            data["createdAt"] = self.created_at.isoformat()
        if self.updated_at is not None:
            data["updatedAt"] = self.updated_at.isoformat()
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ExpenseRecord":
        """
        Rebuild a record from its stored JSON shape.

        Raises:
            InvalidInputError: A required field is missing
            ValidationError: A field has the wrong type or value
        """
        if not isinstance(data, dict):
            raise InvalidInputError(f"Expense must be an object, got {type(data).__name__}")

        required = ("id", "amount", "currency", "convertedAmount", "exchangeRate", "category", "date")
        missing = [key for key in required if data.get(key) is None]
        if missing:
            raise InvalidInputError(f"Expense is missing fields: {', '.join(missing)}")

        currency = data["currency"]
        if currency not in SUPPORTED_CURRENCIES:
            raise ValidationError(f"Unsupported currency in expense: {currency}")

        try:
            category = ExpenseCategory(data["category"])
        except (TypeError, ValueError):
            raise ValidationError(f"Unknown category: {data['category']}")

        try:
            return cls(
                id=str(data["id"]),
                amount=_number(data["amount"], "amount"),
                currency=currency,
                converted_amount=_number(data["convertedAmount"], "convertedAmount"),
                exchange_rate=_number(data["exchangeRate"], "exchangeRate"),
                category=category,
                date=date.fromisoformat(data["date"]),
                memo=data.get("memo") or "",
                created_at=_timestamp(data.get("createdAt")),
                updated_at=_timestamp(data.get("updatedAt")),
            )
        except (TypeError, ValueError) as e:
            raise ValidationError(f"Malformed expense {data.get('id')}: {e}") from e


def _number(value: Any, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"{name} must be a number, got {value!r}")
    return float(value)


def _timestamp(value: Any) -> Optional[datetime]:
    if not value:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"Timestamp must be an ISO string, got {value!r}")
    # Browsers write a trailing Z
    return datetime.fromisoformat(value.replace("Z", "+00:00"))
