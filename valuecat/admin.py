"""Admin-side edits to a Catalog: save, delete, and manual history points.

Every function mutates the Catalog in place; persisting it is the caller's job
(Catalog.save). Failures raise ItemError so the CLI can report them.
"""

from __future__ import annotations

import re
import uuid
from dataclasses import replace
from datetime import date, datetime, timezone
from typing import Optional, Union

from valuecat.config import default_image
from valuecat.formatting import is_value_text, parse_value
from valuecat.models import Catalog, Item, ItemHistory, Trend

_IMAGE_URL_RE = re.compile(r"\.(jpg|jpeg|png|webp)$", re.IGNORECASE)


class ItemError(ValueError):
    """An admin edit was rejected."""


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _new_id() -> str:
    return str(uuid.uuid4())


def to_value(raw: Union[float, int, str]) -> float:
    """Accept either a number or abbreviated text like '1.5M'.

    Raises:
        ItemError: text that is not a numeral with an optional unit.
    """
    if isinstance(raw, str):
        text = raw.strip()
        if not is_value_text(text):
            raise ItemError(f"Invalid value: {raw!r}. Use a number with an optional K/M/B/T/Qd/Qn unit")
        return parse_value(text)
    return float(raw)


def validate_image_url(url: str) -> bool:
    """True if the URL points at a .jpg/.jpeg/.png/.webp image."""
    return _IMAGE_URL_RE.search(url) is not None


def save_item(catalog: Catalog, item: Item, today: Optional[date] = None) -> Item:
    """Create or update an item.

    An item whose id is already in the catalog is updated; when its value
    changed, a history point dated today records the new value. Anything else
    is created with a fresh id, change '0' and a stable trend.

    Args:
        catalog: Catalog to modify in place.
        item: The edited item. Not mutated; the stored copy is returned.
        today: Date stamped on the history point (defaults to the UTC date).

    Returns:
        The item as stored in the catalog.

    Raises:
        ItemError: blank name or an image URL that is not a supported image.
    """
    if not item.name.strip():
        raise ItemError("Item name is required")

    image_url = item.image_url.strip()
    if not image_url:
        image_url = default_image()
    elif not validate_image_url(image_url):
        raise ItemError("Invalid image URL. Must end with .jpg, .png, or .webp")

    timestamp = _now()
    stored = replace(item, image_url=image_url, updated_at=timestamp)

    for i, existing in enumerate(catalog.items):
        if item.id and existing.id == item.id:
            catalog.items[i] = stored
            if existing.current_value != stored.current_value:
                day = today or datetime.now(timezone.utc).date()
                catalog.history.append(ItemHistory(
                    id=_new_id(),
                    item_id=stored.id,
                    value=stored.current_value,
                    date=day.isoformat(),
                    created_at=timestamp,
                ))
            return stored

    stored = replace(
        stored,
        id=item.id or _new_id(),
        created_at=timestamp,
        change="0",
        trend=Trend.STABLE,
    )
    catalog.items.append(stored)
    return stored


def delete_item(catalog: Catalog, item_id: str) -> Item:
    """Remove an item and its history. Returns the removed item."""
    for i, existing in enumerate(catalog.items):
        if existing.id == item_id:
            del catalog.items[i]
            catalog.history = [h for h in catalog.history if h.item_id != item_id]
            return existing
    raise ItemError(f"Unknown item: {item_id}")


def add_history(
    catalog: Catalog,
    item_id: str,
    value: Union[float, int, str],
    day: Optional[date] = None,
) -> ItemHistory:
    """Record a historical value for an existing item."""
    if not any(item.id == item_id for item in catalog.items):
        raise ItemError(f"Unknown item: {item_id}")
    entry = ItemHistory(
        id=_new_id(),
        item_id=item_id,
        value=to_value(value),
        date=(day or datetime.now(timezone.utc).date()).isoformat(),
        created_at=_now(),
    )
    catalog.history.append(entry)
    return entry
