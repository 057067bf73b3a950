"""Search text + category filter over the flat menu.

An item is shown when its title contains the search text (case-insensitive)
and its category is switched on in the selection. Categories missing from the
selection count as switched off.
"""
from __future__ import annotations
from typing import Iterable, List, Mapping

from menu.domain.MenuItem import MenuItem
from menu.domain.Section import Section
from menu.logic.catalog.grouping import group_by_category

__all__ = ["title_contains", "item_matches", "filter_items", "filter_sections"]


def title_contains(title: str, search_text: str) -> bool:
    return search_text.lower() in title.lower()


def item_matches(item: MenuItem, search_text: str, selection: Mapping[str, bool]) -> bool:
    return title_contains(item.title, search_text) and selection.get(item.category) is True


def filter_items(items: Iterable[MenuItem], search_text: str,
                 selection: Mapping[str, bool]) -> List[MenuItem]:
    return [item for item in items if item_matches(item, search_text, selection)]


def filter_sections(items: Iterable[MenuItem], search_text: str,
                    selection: Mapping[str, bool]) -> List[Section]:
    """Filter then group; categories left without items get no section."""
    return group_by_category(filter_items(items, search_text, selection))
