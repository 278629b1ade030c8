"""Shared fixtures: a small catalog and its snapshot on disk."""

from pathlib import Path

import pytest

from valuecat.models import Catalog, Item, ItemHistory, Trend


@pytest.fixture
def catalog() -> Catalog:
    """Three items, two with history (deliberately stored out of date order)."""
    return Catalog(
        items=[
            Item(id="egg", name="Golden Egg", current_value=1_500_000, trend=Trend.RISING,
                 change="+12%", image_url="https://img.example/egg.png",
                 additional_fields={"rarity": "legendary"}),
            Item(id="crown", name="crown", current_value=2e9, trend=Trend.FALLING, change="-3%"),
            Item(id="pet", name="Shadow Pet", current_value=750, change="0"),
        ],
        history=[
            ItemHistory(id="h2", item_id="egg", value=1_400_000, date="2026-02-01"),
            ItemHistory(id="h1", item_id="egg", value=1_000_000, date="2026-01-01"),
            ItemHistory(id="h3", item_id="crown", value=2.1e9, date="2026-01-15"),
        ],
    )


@pytest.fixture
def snapshot(tmp_path: Path, catalog: Catalog) -> Path:
    """The fixture catalog saved as a JSON snapshot."""
    path = tmp_path / "catalog.json"
    catalog.save(path)
    return path
