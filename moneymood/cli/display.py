"""
Rich rendering for the MoneyMood CLI
"""

from typing import Any, Dict, Iterable, List

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.progress_bar import ProgressBar
from rich.table import Table

from moneymood.currency.models import Conversion, RateEntry
from moneymood.expenses.models import CATEGORY_LABELS, ExpenseRecord
from moneymood.life_state.models import LifeStateReport


class DisplayManager:
    """Renders rates, conversions and the life-state dashboard"""

    def __init__(self, console: Console = None):
        self.console = console or Console(width=100)

    def show_currencies(self, codes: Iterable[str], home: str) -> None:
        self.console.print(
            ", ".join(f"[bold]{c}[/bold]" if c == home else c for c in codes)
        )

    def show_rates(self, entries: List[RateEntry], home: str) -> None:
        table = Table(title=f"Rates per 1 {home}", box=box.SIMPLE_HEAVY)
        table.add_column("Currency", style="cyan")
        table.add_column("Rate", justify="right")
        table.add_column(f"{home} per unit", justify="right")
        table.add_column("Source")
        table.add_column("Updated")

        for entry in sorted(entries, key=lambda e: e.currency):
            table.add_row(
                entry.currency,
                f"{entry.rate:.6g}",
                f"{1 / entry.rate:,.4f}",
                entry.source.value,
                entry.last_updated.strftime("%Y-%m-%d %H:%M:%S"),
            )
        self.console.print(table)

    def show_conversion(self, conversion: Conversion, home: str) -> None:
        source = conversion.rate_source.value if conversion.rate_source else "none"
        self.console.print(
            f"{conversion.amount:,.2f} {conversion.currency} = "
            f"[bold]{conversion.home_amount:,.2f} {home}[/bold] "
            f"(rate {conversion.exchange_rate:.6g}, source: {source})"
        )

    def show_expense(self, record: ExpenseRecord, home: str) -> None:
        self.console.print(
            f"[green]Added[/green] {record.id[:8]} {record.date} "
            f"{CATEGORY_LABELS[record.category.value]} "
            f"{record.amount:,.2f} {record.currency} -> {record.converted_amount:,.2f} {home}"
        )

    def show_status(
        self,
        report: LifeStateReport,
        categories: Dict[str, float],
        home: str,
        title: str = "Total spending",
    ) -> None:
        state = report.state
        lines = [
            f"{title}: [bold]{state.total_expense:,.0f} {home}[/bold]",
            f"{report.emoji} [bold {report.color}]{state.tier}[/bold {report.color}]  {report.text}",
        ]
        if report.next_threshold is None:
            lines.append("Top tier reached")
        else:
            lines.append(
                f"{report.remaining_amount:,.0f} {home} until {report.next_threshold:,.0f} {home}"
            )
        self.console.print(Panel("\n".join(lines), title="MoneyMood", border_style=report.color))
        self.console.print(ProgressBar(total=100, completed=report.progress, width=60))

        if categories:
            table = Table(box=box.SIMPLE)
            table.add_column("Category")
            table.add_column(home, justify="right")
            for category, amount in sorted(categories.items(), key=lambda kv: -kv[1]):
                table.add_row(CATEGORY_LABELS.get(category, category), f"{amount:,.0f}")
            self.console.print(table)

    def show_health(self, health: Dict[str, Any]) -> None:
        colors = {"healthy": "green", "degraded": "yellow", "unhealthy": "red"}
        status = health["status"]
        self.console.print(f"Overall: [{colors[status]}]{status}[/{colors[status]}]")
        for name, component in health["components"].items():
            c = colors.get(component["status"], "white")
            self.console.print(f"  {name}: [{c}]{component['status']}[/{c}] {component['message']}")

    def show_error(self, message: str) -> None:
        self.console.print(f"[red]Error:[/red] {message}")
