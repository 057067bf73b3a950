"""Grouping of a flat menu into category sections."""
from __future__ import annotations
from typing import Dict, Iterable, List

from menu.domain.MenuItem import MenuItem
from menu.domain.Section import Section

__all__ = ["group_by_category", "flatten_sections", "categories_of"]


def group_by_category(items: Iterable[MenuItem]) -> List[Section]:
    """Return one Section per category, ordered by the category's first appearance.

    Items keep their relative input order inside each section.
    """
    buckets: Dict[str, List[MenuItem]] = {}
    for item in items:
        buckets.setdefault(item.category, []).append(item)
    return [Section(title=category, data=tuple(bucket)) for category, bucket in buckets.items()]


def flatten_sections(sections: Iterable[Section]) -> List[MenuItem]:
    return [item for section in sections for item in section.data]


def categories_of(items: Iterable[MenuItem]) -> List[str]:
    """Distinct categories in first-seen order."""
    return list(dict.fromkeys(item.category for item in items))
