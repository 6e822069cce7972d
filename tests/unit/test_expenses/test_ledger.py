from datetime import date, timedelta

import pytest

from moneymood.expenses.ledger import ExpenseLedger
from moneymood.expenses.models import ExpenseCategory
from moneymood.utils.errors import (
    CurrencyNotSupportedError,
    ExpenseNotFoundError,
    ValidationError,
)


@pytest.fixture
def ledger(converter):
    return ExpenseLedger(converter)


@pytest.mark.asyncio
async def test_add_home_currency_expense(ledger, rate_client):
    record = await ledger.add_expense(5000, "JPY", "food", memo="ramen")

    assert record.converted_amount == 5000
    assert record.exchange_rate == 1
    assert record.category == ExpenseCategory.FOOD
    assert record.date == date.today()
    assert record.created_at is not None
    assert rate_client.calls == 0
    assert ledger.total() == 5000
    assert ledger.life_state().state.tier == "luxury"


@pytest.mark.asyncio
async def test_add_foreign_expense(ledger):
    record = await ledger.add_expense(10, "USD", "transport", date=date.today().isoformat())

    assert record.converted_amount == pytest.approx(10 / 0.0070)
    assert record.exchange_rate == pytest.approx(record.converted_amount / 10)
    assert len(ledger) == 1


@pytest.mark.asyncio
async def test_ids_are_unique(ledger):
    a = await ledger.add_expense(1, "JPY", "other")
    b = await ledger.add_expense(1, "JPY", "other")
    assert a.id != b.id


@pytest.mark.asyncio
async def test_failed_conversion_adds_nothing(ledger):
    with pytest.raises(CurrencyNotSupportedError):
        await ledger.add_expense(10, "XXX", "food")
    with pytest.raises(ValidationError):
        await ledger.add_expense(10, "JPY", "travel")
    with pytest.raises(ValidationError):
        await ledger.add_expense(10, "JPY", "food", date=date.today() + timedelta(days=400))
    assert len(ledger) == 0


@pytest.mark.asyncio
async def test_records_are_rate_snapshots(ledger, rate_client, clock):
    first = await ledger.add_expense(10, "USD", "food")
    clock.advance(600)
    rate_client.rates["USD"] = 0.0035

    second = await ledger.add_expense(10, "USD", "food")

    assert ledger.get_expense(first.id).converted_amount == pytest.approx(10 / 0.0070)
    assert second.converted_amount == pytest.approx(10 / 0.0035)


@pytest.mark.asyncio
async def test_update_replaces_fields_without_reconverting(ledger, rate_client):
    record = await ledger.add_expense(10, "USD", "food")
    calls = rate_client.calls

    updated = ledger.update_expense(record.id, memo="dinner", category="shopping", converted_amount=2000)

    assert updated.id == record.id
    assert updated.memo == "dinner"
    assert updated.category == ExpenseCategory.SHOPPING
    assert updated.converted_amount == 2000
    assert updated.exchange_rate == record.exchange_rate
    assert rate_client.calls == calls
    assert ledger.total() == 2000


@pytest.mark.asyncio
async def test_update_rejects_bad_edits(ledger):
    record = await ledger.add_expense(100, "JPY", "food")
    with pytest.raises(ValidationError):
        ledger.update_expense(record.id, id="other")
    with pytest.raises(ValidationError):
        ledger.update_expense(record.id, amount=-1)
    with pytest.raises(CurrencyNotSupportedError):
        ledger.update_expense(record.id, currency="XXX")
    with pytest.raises(ExpenseNotFoundError):
        ledger.update_expense("missing", memo="x")


@pytest.mark.asyncio
async def test_delete_and_clear(ledger):
    a = await ledger.add_expense(100, "JPY", "food")
    await ledger.add_expense(200, "JPY", "bills")

    ledger.delete_expense(a.id)
    assert [e.amount for e in ledger.expenses] == [200]
    with pytest.raises(ExpenseNotFoundError):
        ledger.delete_expense(a.id)

    ledger.clear()
    assert ledger.total() == 0


@pytest.mark.asyncio
async def test_breakdowns(ledger):
    await ledger.add_expense(60000, "JPY", "bills")
    await ledger.add_expense(40000, "JPY", "food")

    assert ledger.by_category() == {"bills": 60000, "food": 40000}
    report = ledger.life_state()
    assert report.state.tier == "ghost"
    assert report.remaining_amount == 0
    month = date.today().isoformat()[:7]
    assert len(ledger.expenses_in_month(month)) == 2
