"""Data models for the valuecat catalog.

Trend enum, Item, ItemHistory, Catalog: the typed structures that flow
through catalog/admin → render → CLI. A Catalog is persisted as a single JSON
snapshot: {"items": [...], "history": [...]}.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Optional


class Trend(str, Enum):
    """Direction an item's value is moving."""

    RISING = "rising"
    FALLING = "falling"
    STABLE = "stable"

    @classmethod
    def coerce(cls, raw: Any) -> Trend:
        """Map stored text onto a Trend, unknown values count as stable."""
        try:
            return cls(raw)
        except ValueError:
            return cls.STABLE


@dataclass
class Item:
    """A catalog entry with its current value."""

    id: str
    name: str
    description: str = ""
    current_value: float = 0.0
    trend: Trend = Trend.STABLE
    change: str = "0"
    image_url: str = ""
    created_at: str = ""
    updated_at: str = ""
    additional_fields: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "current_value": self.current_value,
            "trend": self.trend.value,
            "change": self.change,
            "image_url": self.image_url,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
            "additional_fields": self.additional_fields,
        }

    @classmethod
    def from_dict(cls, d: dict) -> Item:
        """Deserialize from a snapshot row."""
        return cls(
            id=str(d.get("id", "")),
            name=d.get("name", ""),
            description=d.get("description") or "",
            current_value=float(d.get("current_value") or 0),
            trend=Trend.coerce(d.get("trend")),
            change=str(d.get("change", "0")),
            image_url=d.get("image_url") or "",
            created_at=d.get("created_at") or "",
            updated_at=d.get("updated_at") or "",
            additional_fields=dict(d.get("additional_fields") or {}),
        )


@dataclass
class ItemHistory:
    """One recorded value of an item on a given date (YYYY-MM-DD)."""

    id: str
    item_id: str
    value: float
    date: str
    created_at: str = ""

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "item_id": self.item_id,
            "value": self.value,
            "date": self.date,
            "created_at": self.created_at,
        }

    @classmethod
    def from_dict(cls, d: dict) -> ItemHistory:
        return cls(
            id=str(d.get("id", "")),
            item_id=str(d.get("item_id", "")),
            value=float(d.get("value") or 0),
            date=d.get("date", ""),
            created_at=d.get("created_at") or "",
        )


@dataclass
class Catalog:
    """All items plus their value history."""

    items: list[Item] = field(default_factory=list)
    history: list[ItemHistory] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "items": [item.to_dict() for item in self.items],
            "history": [entry.to_dict() for entry in self.history],
        }

    @classmethod
    def from_dict(cls, d: dict) -> Catalog:
        return cls(
            items=[Item.from_dict(row) for row in d.get("items", [])],
            history=[ItemHistory.from_dict(row) for row in d.get("history", [])],
        )

    def save(self, path: Path) -> None:
        """Write the snapshot, creating parent directories as needed."""
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            json.dumps(self.to_dict(), indent=2, ensure_ascii=False), encoding="utf-8"
        )

    @classmethod
    def load(cls, path: Path) -> Optional[Catalog]:
        """Load a snapshot. Returns None if it is missing or unreadable."""
        if not path.exists():
            return None
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError):
            return None
        if not isinstance(data, dict):
            return None
        try:
            return cls.from_dict(data)
        except (TypeError, ValueError, AttributeError):
            return None
