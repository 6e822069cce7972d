from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Optional

import typer

from moneymood.config import Config, load_config, reset_config
from moneymood.currency import build_converter
from moneymood.expenses.aggregator import by_category, expenses_in_month, total
from moneymood.expenses.export import load_bundle, save_bundle
from moneymood.expenses.ledger import ExpenseLedger
from moneymood.expenses.models import ExpenseCategory
from moneymood.health import get_health_status
from moneymood.life_state.classifier import describe
from moneymood.cli.display import DisplayManager
from moneymood.utils.errors import MoneyMoodError


app = typer.Typer(add_completion=False, help="MoneyMood expense tracker CLI")
display = DisplayManager()

DEFAULT_DATA_FILE = "moneymood-data.json"


class State:
    config_path: str = "config.yaml"


state = State()


@app.callback()
def main(
    config: str = typer.Option("config.yaml", "--config", "-c", help="Path to config.yaml"),
):
    state.config_path = config


def _config() -> Config:
    reset_config()
    return load_config(state.config_path)


def _fail(error: Exception) -> None:
    display.show_error(str(error))
    raise typer.Exit(code=1)


@app.command("currencies")
def currencies():
    """List supported currency codes."""
    cfg = _config()
    converter = build_converter(cfg)
    codes = cfg.supported_currencies or sorted(converter.supported)
    display.show_currencies(codes, cfg.home_currency)


@app.command("rates")
def rates():
    """Show current rates (live, or the fallback table when offline)."""
    cfg = _config()
    converter = build_converter(cfg)
    entries = asyncio.run(converter.provider.get_rates())
    display.show_rates(entries, cfg.home_currency)


@app.command("convert")
def convert(
    amount: float = typer.Argument(..., help="Amount in the source currency"),
    currency: str = typer.Argument(..., help="Source currency code, e.g. USD"),
):
    """Convert an amount into the home currency."""
    cfg = _config()
    converter = build_converter(cfg)
    try:
        conversion = asyncio.run(converter.convert(amount, currency))
    except MoneyMoodError as e:
        _fail(e)
    display.show_conversion(conversion, cfg.home_currency)


@app.command("add")
def add(
    amount: float = typer.Argument(..., help="Amount in the source currency"),
    currency: str = typer.Argument(..., help="Source currency code"),
    category: ExpenseCategory = typer.Option(ExpenseCategory.OTHER, "--category", "-k"),
    memo: str = typer.Option("", "--memo", "-m"),
    date: Optional[str] = typer.Option(None, "--date", "-d", help="YYYY-MM-DD, defaults to today"),
    data_file: Path = typer.Option(DEFAULT_DATA_FILE, "--file", "-f", help="Export bundle to update"),
):
    """Record an expense and print the updated life state."""
    cfg = _config()
    try:
        bundle = load_bundle(data_file)
        ledger = ExpenseLedger(build_converter(cfg), bundle.expenses)
        record = asyncio.run(
            ledger.add_expense(amount, currency, category.value, memo=memo, date=date)
        )
        save_bundle(data_file, ledger.expenses, bundle.settings)
    except MoneyMoodError as e:
        _fail(e)

    display.show_expense(record, cfg.home_currency)
    display.show_status(ledger.life_state(), ledger.by_category(), cfg.home_currency)


@app.command("status")
def status(
    data_file: Path = typer.Option(DEFAULT_DATA_FILE, "--file", "-f", help="Export bundle to read"),
    month: Optional[str] = typer.Option(None, "--month", help="Restrict to YYYY-MM"),
):
    """Show total spending, category breakdown and life state."""
    cfg = _config()
    try:
        bundle = load_bundle(data_file)
        expenses = bundle.expenses
        if month:
            expenses = expenses_in_month(expenses, month)
    except MoneyMoodError as e:
        _fail(e)

    for message in bundle.errors:
        typer.secho(f"Skipped: {message}", fg=typer.colors.YELLOW)

    title = f"Spending in {month}" if month else "Total spending"
    display.show_status(describe(total(expenses)), by_category(expenses), cfg.home_currency, title)


@app.command("health")
def health():
    """Check the rate source and cache."""
    cfg = _config()
    converter = build_converter(cfg)
    result = asyncio.run(get_health_status(converter.provider))
    display.show_health(result)


if __name__ == "__main__":
    app()
