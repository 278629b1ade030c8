"""Rich rendering for the catalog: listing table, item details, calculator.

All values pass through format_value(), including the history chart labels.
"""

from __future__ import annotations

import math

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from valuecat.formatting import format_value
from valuecat.models import Item, ItemHistory, Trend

_TREND_STYLES = {
    Trend.RISING: ("green", "▲"),
    Trend.FALLING: ("red", "▼"),
    Trend.STABLE: ("dim", "–"),
}

_BAR_WIDTH = 30


def _fmt_trend(trend: Trend) -> str:
    """Coloured arrow plus capitalised trend name."""
    color, arrow = _TREND_STYLES.get(trend, ("white", "?"))
    return f"[{color}]{arrow} {trend.value.capitalize()}[/{color}]"


def _fmt_change(change: str) -> str:
    """Green for '+…', red for '-…', dim otherwise."""
    if change.startswith("+"):
        return f"[green]{escape(change)}[/green]"
    if change.startswith("-"):
        return f"[red]{escape(change)}[/red]"
    return f"[dim]{escape(change)}[/dim]"


def _bar(value: float, peak: float) -> str:
    """Horizontal bar proportional to value / peak."""
    if value <= 0 or peak <= 0:
        return ""
    if math.isinf(value):
        return "█" * _BAR_WIDTH
    if math.isinf(peak):
        return "▏"
    return "█" * max(1, round(_BAR_WIDTH * value / peak))


def render_listing(items: list[Item], console: Console, title: str = "Item Values") -> None:
    """Render the public item listing."""
    if not items:
        console.print("[yellow]No items found.[/yellow]")
        return

    table = Table(title=title, show_header=True, header_style="bold")
    table.add_column("Item", style="bold", min_width=15)
    table.add_column("Current Value", style="magenta", justify="right")
    table.add_column("Trend")
    table.add_column("Change", justify="right")
    table.add_column("ID", style="dim")

    for item in items:
        table.add_row(
            escape(item.name),
            format_value(item.current_value),
            _fmt_trend(item.trend),
            _fmt_change(item.change),
            escape(item.id),
        )

    console.print()
    console.print(table)
    console.print()


def render_details(item: Item, history: list[ItemHistory], console: Console) -> None:
    """Render one item: headline, value history chart, additional fields."""
    console.print()
    console.print(f"[bold]{escape(item.name)}[/bold]  [magenta]{format_value(item.current_value)}[/magenta]  "
                  f"{_fmt_trend(item.trend)} {_fmt_change(item.change)}")
    if item.description:
        console.print(f"  {escape(item.description)}")
    if item.image_url:
        console.print(f"  [dim]{escape(item.image_url)}[/dim]")

    if history:
        chart = Table(title="Value History", show_header=True, header_style="bold")
        chart.add_column("Date", style="dim")
        chart.add_column("Value", justify="right")
        chart.add_column("", style="magenta", min_width=_BAR_WIDTH)
        peak = max(entry.value for entry in history)
        for entry in history:
            chart.add_row(escape(entry.date), format_value(entry.value), _bar(entry.value, peak))
        console.print()
        console.print(chart)
    else:
        console.print("\n  [dim]No value history recorded.[/dim]")

    if item.additional_fields:
        extra = Table(title="Additional Information", show_header=False)
        extra.add_column("Field", style="bold")
        extra.add_column("Value")
        for key, value in item.additional_fields.items():
            extra.add_row(escape(key.capitalize()), escape(str(value)))
        console.print()
        console.print(extra)
    console.print()


def render_calculation(
    rows: list[tuple[Item, int]],
    total: float,
    console: Console,
) -> None:
    """Render calculator lines and the formatted total."""
    table = Table(title="Value Calculator", show_header=True, header_style="bold")
    table.add_column("Item", min_width=15)
    table.add_column("Qty", justify="right")
    table.add_column("Each", justify="right", style="dim")
    table.add_column("Subtotal", justify="right", style="magenta")

    for item, quantity in rows:
        table.add_row(
            escape(item.name),
            str(quantity),
            format_value(item.current_value),
            format_value(item.current_value * quantity),
        )

    console.print()
    console.print(table)
    console.print(f"[bold]Total Value:[/bold] [bold magenta]{format_value(total)}[/bold magenta]")
    console.print()
