"""Tests for listing, lookup, history and calculator operations."""

import pytest

from valuecat.catalog import (
    browse,
    calculate_total,
    find_item,
    history_for,
    parse_selection,
    search_items,
    sort_items,
)


def _names(items):
    return [item.name for item in items]


# --- search / sort ---

def test_search_is_case_insensitive(catalog):
    assert _names(search_items(catalog.items, "EGG")) == ["Golden Egg"]


def test_search_empty_term_matches_all(catalog):
    assert len(search_items(catalog.items, "")) == 3


def test_sort_defaults_to_value_descending(catalog):
    assert _names(sort_items(catalog.items)) == ["crown", "Golden Egg", "Shadow Pet"]


def test_sort_by_value_ascending(catalog):
    assert _names(sort_items(catalog.items, order="asc")) == ["Shadow Pet", "Golden Egg", "crown"]


def test_sort_by_name_ignores_case(catalog):
    assert _names(sort_items(catalog.items, by="name", order="asc")) == ["crown", "Golden Egg", "Shadow Pet"]
    assert _names(sort_items(catalog.items, by="name", order="desc")) == ["Shadow Pet", "Golden Egg", "crown"]


def test_sort_rejects_unknown_field(catalog):
    with pytest.raises(ValueError):
        sort_items(catalog.items, by="price")
    with pytest.raises(ValueError):
        sort_items(catalog.items, order="up")


def test_browse_filters_then_sorts(catalog):
    assert _names(browse(catalog, "o", by="value", order="asc")) == ["Shadow Pet", "Golden Egg", "crown"]
    assert _names(browse(catalog, "pet")) == ["Shadow Pet"]


# --- lookup / history ---

def test_find_item_by_id_then_name(catalog):
    assert find_item(catalog, "egg").name == "Golden Egg"
    assert find_item(catalog, "golden egg").id == "egg"
    assert find_item(catalog, "missing") is None


def test_history_ordered_by_date(catalog):
    assert [h.id for h in history_for(catalog, "egg")] == ["h1", "h2"]
    assert history_for(catalog, "pet") == []


# --- calculator ---

def test_calculate_total(catalog):
    total = calculate_total(catalog.items, {"egg": 2, "pet": 4})
    assert total == pytest.approx(3_003_000)


def test_calculate_total_ignores_unknown_and_non_positive(catalog):
    assert calculate_total(catalog.items, {"nope": 5, "egg": 0, "crown": -1}) == 0


def test_calculate_total_empty(catalog):
    assert calculate_total(catalog.items, {}) == 0


@pytest.mark.parametrize("text, expected", [
    ("Golden Egg=3", ("Golden Egg", 3)),
    (" crown = 2 ", ("crown", 2)),
    ("crown=lots", ("crown", 0)),
    ("crown", ("crown", 1)),
    ("a=b=4", ("a=b", 4)),
])
def test_parse_selection(text, expected):
    assert parse_selection(text) == expected
