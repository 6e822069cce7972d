"""Input validation utilities."""
import math
import re
from datetime import date, datetime
from numbers import Real
from typing import Any, Iterable, Optional

from moneymood.utils.errors import InvalidInputError, ValidationError


MAX_AMOUNT = 1e8

_AMOUNT_TEXT = re.compile(r"^-?[0-9]*\.?[0-9]*$")
_FULL_WIDTH_DIGITS = re.compile(r"[０-９]")
_MONTH = re.compile(r"^\d{4}-(0[1-9]|1[0-2])$")


def validate_amount(amount: Any, max_amount: float = MAX_AMOUNT) -> float:
    """
    Validate a conversion amount.
    
    Args:
        amount: Amount to validate
        max_amount: Inclusive upper bound
    
    Returns:
        Validated amount as float
    
    Raises:
        ValidationError: If amount is not finite, not positive or too large
    """
    if isinstance(amount, bool) or not isinstance(amount, Real):
        raise ValidationError(f"Amount must be a number, got: {amount!r}")

    try:
        amount = float(amount)
    except OverflowError:
        raise ValidationError(f"Amount out of range (max {max_amount:g})")
    if math.isnan(amount) or math.isinf(amount):
        raise ValidationError(f"Amount must be a finite number, got: {amount}")

    if amount <= 0:
        raise ValidationError(f"Amount must be positive, got: {amount}")
    
    if amount > max_amount:
        raise ValidationError(f"Amount too large: {amount} (max {max_amount:g})")
    
    return amount


def parse_amount_text(value: str, max_amount: float = MAX_AMOUNT) -> float:
    """Parse amount text typed into a form field.

    Only half-width digits with an optional decimal point and at most two
    decimal places are accepted.
    """
    if value is None or not value.strip():
        raise ValidationError("Amount is required")
    value = value.strip()

    if _FULL_WIDTH_DIGITS.search(value):
        raise ValidationError("Use half-width digits (e.g. 1000)")

    if not _AMOUNT_TEXT.match(value):
        raise ValidationError("Amount may only contain digits (e.g. 1000 or 1000.50)")

    if "." in value and len(value.split(".")[1]) > 2:
        raise ValidationError("At most two decimal places are allowed")

    try:
        number = float(value)
    except ValueError:
        raise ValidationError(f"Not a valid number: {value}")

    return validate_amount(number, max_amount=max_amount)


def validate_currency_code(code: Any) -> str:
    """Normalize a 3-letter currency code to uppercase."""
    if not isinstance(code, str) or not code.strip():
        raise InvalidInputError("Currency code is required")

    code = code.strip().upper()
    if len(code) != 3 or not code.isalpha():
        raise InvalidInputError(
            f"Invalid currency code: {code}. Expect 3-letter ISO code."
        )
    return code


def validate_category(category: Any, valid: Iterable[str]) -> str:
    """Validate a spending category against the closed set."""
    valid = list(valid)
    if not isinstance(category, str) or category.lower().strip() not in valid:
        raise ValidationError(
            f"Invalid category: {category}. Must be one of {valid}"
        )
    return category.lower().strip()


def validate_expense_date(
    value: Any, today: Optional[date] = None, max_years: int = 1
) -> date:
    """Validate an expense date, accepting a date or a YYYY-MM-DD string.

    Dates more than ``max_years`` before or after today are rejected.
    """
    if isinstance(value, datetime):
        value = value.date()
    elif isinstance(value, str):
        try:
            value = date.fromisoformat(value.strip())
        except ValueError:
            raise ValidationError(f"Invalid date: {value}. Expect YYYY-MM-DD")
    elif not isinstance(value, date):
        raise ValidationError("Date is required")

    today = today or date.today()
    earliest = _shift_years(today, -max_years)
    latest = _shift_years(today, max_years)
    if value < earliest:
        raise ValidationError(f"Date {value} is more than {max_years} year(s) in the past")
    if value > latest:
        raise ValidationError(f"Date {value} is more than {max_years} year(s) in the future")
    return value


def validate_month(month: str) -> str:
    """Validate a YYYY-MM month key."""
    if not isinstance(month, str) or not _MONTH.match(month.strip()):
        raise ValidationError(f"Invalid month: {month}. Expect YYYY-MM")
    return month.strip()


def _shift_years(day: date, years: int) -> date:
    try:
        return day.replace(year=day.year + years)
    except ValueError:
        # Feb 29 in a non-leap target year
        return day.replace(year=day.year + years, day=28)
