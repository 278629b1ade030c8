"""Public catalog operations: search, sort, lookup, history and the calculator."""

from __future__ import annotations

from typing import Iterable, Optional

from valuecat.models import Catalog, Item, ItemHistory

SORT_FIELDS = ("value", "name")
SORT_ORDERS = ("desc", "asc")


def search_items(items: Iterable[Item], term: str = "") -> list[Item]:
    """Items whose name contains term, case-insensitively."""
    needle = term.lower()
    return [item for item in items if needle in item.name.lower()]


def sort_items(items: Iterable[Item], by: str = "value", order: str = "desc") -> list[Item]:
    """Sort by 'value' or 'name', 'asc' or 'desc'.

    Raises:
        ValueError: on an unknown field or order.
    """
    if by not in SORT_FIELDS:
        raise ValueError(f"Unknown sort field: {by}. Choose: {', '.join(SORT_FIELDS)}")
    if order not in SORT_ORDERS:
        raise ValueError(f"Unknown sort order: {order}. Choose: {', '.join(SORT_ORDERS)}")

    if by == "name":
        key = lambda item: item.name.casefold()  # noqa: E731
    else:
        key = lambda item: item.current_value  # noqa: E731
    return sorted(items, key=key, reverse=(order == "desc"))


def browse(catalog: Catalog, term: str = "", by: str = "value", order: str = "desc") -> list[Item]:
    """The public listing: search first, then sort."""
    return sort_items(search_items(catalog.items, term), by=by, order=order)


def find_item(catalog: Catalog, key: str) -> Optional[Item]:
    """Look an item up by exact id, falling back to case-insensitive name."""
    for item in catalog.items:
        if item.id == key:
            return item
    folded = key.casefold()
    for item in catalog.items:
        if item.name.casefold() == folded:
            return item
    return None


def history_for(catalog: Catalog, item_id: str) -> list[ItemHistory]:
    """History entries of one item, oldest date first."""
    entries = [entry for entry in catalog.history if entry.item_id == item_id]
    entries.sort(key=lambda entry: entry.date)
    return entries


def parse_selection(text: str) -> tuple[str, int]:
    """Split calculator input 'name=qty' into (name, quantity).

    A bare name means one of it. A non-integer quantity counts as 0, which
    drops the selection.
    """
    key, sep, raw_qty = text.rpartition("=")
    if not sep:
        return text.strip(), 1
    try:
        quantity = int(raw_qty.strip())
    except ValueError:
        quantity = 0
    return key.strip(), quantity


def calculate_total(items: Iterable[Item], selections: dict[str, int]) -> float:
    """Sum of current_value × quantity for each selected item id.

    Unknown ids and non-positive quantities contribute nothing.
    """
    by_id = {item.id: item for item in items}
    total = 0.0
    for item_id, quantity in selections.items():
        item = by_id.get(item_id)
        if item and quantity > 0:
            total += item.current_value * quantity
    return total
