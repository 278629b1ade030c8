"""CLI for the valuecat item-value catalog.

Usage:
    python -m valuecat format 1500000                  # -> 1.5M
    python -m valuecat parse 2.5B                      # -> 2500000000
    python -m valuecat list --search egg --sort name   # Public listing
    python -m valuecat show "Golden Egg"               # Details + history chart
    python -m valuecat calc "Golden Egg=3" Crown=1     # Value calculator
    python -m valuecat add "Golden Egg" 1.5M           # Admin: create item
    python -m valuecat set-value "Golden Egg" 2M       # Admin: update value
    python -m valuecat edit "Golden Egg" --description "Shiny"
    python -m valuecat history "Golden Egg" 900K --date 2026-01-01
    python -m valuecat delete "Golden Egg"
"""

from __future__ import annotations

from dataclasses import replace
from datetime import date
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from valuecat.admin import ItemError, add_history, delete_item, save_item, to_value
from valuecat.catalog import SORT_FIELDS, SORT_ORDERS, browse, calculate_total, find_item, history_for, parse_selection
from valuecat.config import catalog_path
from valuecat.formatting import format_value, parse_value, plain_text
from valuecat.models import Catalog, Item, Trend
from valuecat.render import render_calculation, render_details, render_listing

app = typer.Typer(
    name="valuecat",
    help="Item value catalog: listing, details, calculator and admin edits",
    no_args_is_help=True,
)
console = Console(stderr=True)

_CATALOG_HELP = "Catalog snapshot (default: $VALUECAT_CATALOG or ./catalog.json)"


def _load(catalog: Optional[Path], create: bool = False) -> tuple[Catalog, Path]:
    """Load the snapshot or exit 1. With create, a missing file starts empty."""
    path = catalog_path(catalog)
    if create and not path.exists():
        return Catalog(), path
    loaded = Catalog.load(path)
    if loaded is None:
        if path.exists():
            console.print(f"[red]Error:[/red] Could not read catalog: {path}")
        else:
            console.print(f"[yellow]No catalog found at {path}[/yellow]")
        raise typer.Exit(1)
    return loaded, path


def _lookup(cat: Catalog, key: str) -> Item:
    item = find_item(cat, key)
    if item is None:
        console.print(f"[red]Error:[/red] Unknown item: {escape(key)}")
        raise typer.Exit(1)
    return item


def _parse_date(raw: Optional[str]) -> Optional[date]:
    if raw is None:
        return None
    try:
        return date.fromisoformat(raw)
    except ValueError:
        console.print(f"[red]Invalid date: {raw}[/red]. Use YYYY-MM-DD")
        raise typer.Exit(1)


def _parse_trend(raw: Optional[str]) -> Optional[Trend]:
    if raw is None:
        return None
    try:
        return Trend(raw)
    except ValueError:
        console.print(f"[red]Invalid trend: {raw}[/red]. Choose: rising, falling, stable")
        raise typer.Exit(1)


@app.command("format")
def cmd_format(
    value: str = typer.Argument(help="Raw value (e.g., '1500000' or 'inf')"),
) -> None:
    """Abbreviate a value: 1500000 -> 1.5M."""
    typer.echo(format_value(value))


@app.command("parse")
def cmd_parse(
    text: str = typer.Argument(help="Abbreviated value (e.g., '1.5M')"),
) -> None:
    """Expand an abbreviated value: 1.5M -> 1500000."""
    typer.echo(plain_text(parse_value(text)))


@app.command("list")
def cmd_list(
    search: str = typer.Option("", "--search", "-s", help="Filter by name (case-insensitive)"),
    sort: str = typer.Option("value", "--sort", help="Sort field: value, name"),
    order: str = typer.Option("desc", "--order", help="Sort order: desc, asc"),
    catalog: Optional[Path] = typer.Option(None, "--catalog", "-c", help=_CATALOG_HELP),
) -> None:
    """Show the item listing."""
    if sort not in SORT_FIELDS or order not in SORT_ORDERS:
        console.print(f"[red]Invalid sort: {sort} {order}[/red]. Choose: value|name, desc|asc")
        raise typer.Exit(1)
    cat, _ = _load(catalog)
    render_listing(browse(cat, search, by=sort, order=order), console)


@app.command("show")
def cmd_show(
    item: str = typer.Argument(help="Item id or name"),
    catalog: Optional[Path] = typer.Option(None, "--catalog", "-c", help=_CATALOG_HELP),
) -> None:
    """Show item details with its value history."""
    cat, _ = _load(catalog)
    found = _lookup(cat, item)
    render_details(found, history_for(cat, found.id), console)


@app.command("calc")
def cmd_calc(
    selections: list[str] = typer.Argument(help="Items as NAME=QTY (or id=QTY)"),
    catalog: Optional[Path] = typer.Option(None, "--catalog", "-c", help=_CATALOG_HELP),
) -> None:
    """Total the value of a set of items."""
    cat, _ = _load(catalog)
    chosen: dict[str, int] = {}
    by_id: dict[str, Item] = {}
    for raw in selections:
        key, quantity = parse_selection(raw)
        found = find_item(cat, key)
        if found is None:
            console.print(f"  [yellow]Skipping unknown item: {escape(key)}[/yellow]")
            continue
        if quantity <= 0:
            chosen.pop(found.id, None)
            continue
        chosen[found.id] = quantity
        by_id[found.id] = found

    total = calculate_total(cat.items, chosen)
    render_calculation([(by_id[i], q) for i, q in chosen.items()], total, console)


@app.command("add")
def cmd_add(
    name: str = typer.Argument(help="Item name"),
    value: str = typer.Argument(help="Current value (e.g., '1.5M')"),
    description: str = typer.Option("", "--description", "-d", help="Item description"),
    image_url: str = typer.Option("", "--image-url", help="Image URL (.jpg, .jpeg, .png, .webp)"),
    catalog: Optional[Path] = typer.Option(None, "--catalog", "-c", help=_CATALOG_HELP),
) -> None:
    """Admin: create a new item."""
    cat, path = _load(catalog, create=True)
    try:
        stored = save_item(cat, Item(
            id="",
            name=name,
            description=description,
            current_value=to_value(value),
            image_url=image_url,
        ))
    except ItemError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    cat.save(path)
    console.print(f"[green]Added[/green] {escape(stored.name)} ({format_value(stored.current_value)}) id={stored.id}")


@app.command("set-value")
def cmd_set_value(
    item: str = typer.Argument(help="Item id or name"),
    value: str = typer.Argument(help="New value (e.g., '2M')"),
    trend: Optional[str] = typer.Option(None, "--trend", "-t", help="rising, falling, stable"),
    change: Optional[str] = typer.Option(None, "--change", help="Change label (e.g., '+5%')"),
    on: Optional[str] = typer.Option(None, "--date", help="History date YYYY-MM-DD (default: today)"),
    catalog: Optional[Path] = typer.Option(None, "--catalog", "-c", help=_CATALOG_HELP),
) -> None:
    """Admin: update an item's value, recording history when it changes."""
    cat, path = _load(catalog)
    found = _lookup(cat, item)
    new_trend = _parse_trend(trend)
    day = _parse_date(on)
    try:
        edited = replace(found, current_value=to_value(value))
        if new_trend is not None:
            edited.trend = new_trend
        if change is not None:
            edited.change = change
        stored = save_item(cat, edited, today=day)
    except ItemError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    cat.save(path)
    console.print(
        f"[green]Updated[/green] {escape(stored.name)}: "
        f"{format_value(found.current_value)} -> {format_value(stored.current_value)}"
    )


@app.command("edit")
def cmd_edit(
    item: str = typer.Argument(help="Item id or name"),
    name: Optional[str] = typer.Option(None, "--name", "-n", help="New name"),
    description: Optional[str] = typer.Option(None, "--description", "-d", help="New description"),
    image_url: Optional[str] = typer.Option(None, "--image-url", help="New image URL ('' for the default image)"),
    catalog: Optional[Path] = typer.Option(None, "--catalog", "-c", help=_CATALOG_HELP),
) -> None:
    """Admin: edit an item's name, description or image, keeping its history."""
    cat, path = _load(catalog)
    found = _lookup(cat, item)
    edited = replace(found)
    if name is not None:
        edited.name = name
    if description is not None:
        edited.description = description
    if image_url is not None:
        edited.image_url = image_url
    try:
        stored = save_item(cat, edited)
    except ItemError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    cat.save(path)
    console.print(f"[green]Edited[/green] {escape(stored.name)} id={stored.id}")


@app.command("history")
def cmd_history(
    item: str = typer.Argument(help="Item id or name"),
    value: str = typer.Argument(help="Historical value (e.g., '900K')"),
    on: Optional[str] = typer.Option(None, "--date", help="Date YYYY-MM-DD (default: today)"),
    catalog: Optional[Path] = typer.Option(None, "--catalog", "-c", help=_CATALOG_HELP),
) -> None:
    """Admin: record a historical value for an item."""
    cat, path = _load(catalog)
    found = _lookup(cat, item)
    day = _parse_date(on)
    try:
        entry = add_history(cat, found.id, value, day)
    except ItemError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    cat.save(path)
    console.print(f"[green]Recorded[/green] {escape(found.name)} {format_value(entry.value)} on {entry.date}")


@app.command("delete")
def cmd_delete(
    item: str = typer.Argument(help="Item id or name"),
    catalog: Optional[Path] = typer.Option(None, "--catalog", "-c", help=_CATALOG_HELP),
) -> None:
    """Admin: delete an item and its history."""
    cat, path = _load(catalog)
    found = _lookup(cat, item)
    delete_item(cat, found.id)
    cat.save(path)
    console.print(f"[green]Deleted[/green] {escape(found.name)}")


if __name__ == "__main__":
    app()
