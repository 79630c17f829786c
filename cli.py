#!/usr/bin/env python3
import logging
import sys
from decimal import Decimal, InvalidOperation

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Confirm, Prompt
from rich.table import Table
from rich.text import Text

from dividend_allocator import (
    Allocation,
    AllocationDefaults,
    AllocationError,
    Portfolio,
    Security,
)

logger = logging.getLogger(__name__)
console = Console()

DEFAULTS = AllocationDefaults()

STRATEGIES: list[str] = ["linear_program", "greedy"]
STRATEGY_LABELS: dict[str, str] = {
    "linear_program": "Linear Program (HiGHS)",
    "greedy": "Greedy (dividend per dollar)",
}


def securities_table(securities: list[Security], source: str) -> Table:
    """Build a Rich table listing candidate securities."""
    t = Table(
        title="Securities",
        box=box.ROUNDED,
        title_style="bold white",
        caption=source,
        caption_style="dim",
    )
    t.add_column("Ticker", style="cyan")
    t.add_column("Price", justify="right")
    t.add_column("Yield", justify="right", style="yellow")
    t.add_column("Div / $", justify="right", style="green")

    ranked = sorted(securities, key=lambda s: s.dividend_per_dollar, reverse=True)
    for s in ranked:
        t.add_row(
            s.symbol,
            f"${s.price:,.2f}",
            f"{float(s.dividend_yield):.2%}",
            f"{float(s.dividend_per_dollar):.5f}",
        )
    return t


def allocation_table(
    allocation: Allocation,
    budget: Decimal,
    concentration_limit: Decimal,
) -> Table:
    """Build a Rich table showing whole-share positions and dividend income."""
    label = STRATEGY_LABELS.get(allocation.strategy, allocation.strategy)
    t = Table(title=f"Allocation ({label})", box=box.ROUNDED, title_style="bold white")
    t.add_column("Ticker", style="cyan")
    t.add_column("Shares", justify="right")
    t.add_column("Exact", justify="right", style="dim")
    t.add_column("Exposure", justify="right")
    t.add_column("Weight", justify="right", style="yellow")

    cap = budget * concentration_limit
    invested = Decimal("0")
    for p in allocation.positions:
        exposure = p.rounded_exposure
        invested += exposure
        weight = exposure / budget if budget > 0 else Decimal("0")
        style = "red" if exposure > cap else "white"
        t.add_row(
            p.symbol,
            str(p.whole_shares),
            f"{p.shares:,.4f}",
            Text(f"${exposure:,.2f}", style=style),
            f"{float(weight):.1%}",
        )

    t.add_section()
    t.add_row("", "", "Invested", f"[bold]${invested:,.2f}[/bold]", "")
    uninvested = budget - invested
    if uninvested > 0:
        t.add_row("", "", "[yellow]Uninvested[/yellow]", f"[yellow]${uninvested:,.2f}[/yellow]", "")
    t.add_row(
        "",
        "",
        "[bold]Dividends[/bold]",
        f"[bold green]${allocation.objective_value:,.2f}[/bold green]",
        "",
    )
    return t


def _prompt_decimal(label: str, default: Decimal) -> Decimal:
    while True:
        raw = Prompt.ask(f"  {label}", default=str(default))
        try:
            return Decimal(raw.replace(",", ""))
        except InvalidOperation:
            console.print(f"  [red]Not a number: {raw}[/red]")


def _pick_strategy() -> str:
    console.print()
    for name in STRATEGIES:
        console.print(f"  [dim]{name}[/dim]: {STRATEGY_LABELS[name]}")
    return Prompt.ask("  Strategy", choices=STRATEGIES, default=STRATEGIES[0])


def display_allocation(
    portfolio: Portfolio,
    budget: Decimal,
    concentration_limit: Decimal,
    strategy: str,
) -> None:
    """Solve and print the allocation, or the reason it could not be solved."""
    try:
        allocation = portfolio.allocate(budget, concentration_limit, strategy=strategy)
    except AllocationError as e:
        logger.debug("Allocation failed: %s", e)
        console.print(f"[red]  {type(e).__name__}: {e}[/red]")
        return

    console.print(allocation_table(allocation, budget, concentration_limit))


def run_cli_loop(portfolio: Portfolio, source: str) -> None:
    while True:
        console.print()
        console.print(securities_table(portfolio.securities, source))

        console.print()
        budget = _prompt_decimal("Budget", DEFAULTS.BUDGET)
        limit = _prompt_decimal("Concentration limit", DEFAULTS.CONCENTRATION_LIMIT)
        strategy = _pick_strategy()

        console.print()
        display_allocation(portfolio, budget, limit, strategy)

        console.print()
        if not Confirm.ask("  Run again?", default=True):
            break


def main() -> None:
    """Entry point for the CLI application."""
    console.print()
    console.print(
        Panel("[bold]Dividend Allocator[/bold] · maximize dividend income", box=box.DOUBLE)
    )

    if len(sys.argv) > 1:
        path = sys.argv[1]
        try:
            portfolio = Portfolio.from_file(path)
        except (OSError, ValueError) as e:
            console.print(f"[red]Could not load {path}: {e}[/red]")
            sys.exit(1)
        source = path
    else:
        portfolio = Portfolio.reference()
        source = "reference securities"

    run_cli_loop(portfolio, source)


if __name__ == "__main__":
    main()
