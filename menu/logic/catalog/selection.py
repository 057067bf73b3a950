"""Per-category inclusion flags.

Selections are plain insertion-ordered dicts that are never modified once
handed out: every update returns a new dict.
"""
from __future__ import annotations
import logging
from typing import Dict, Iterable, Mapping

from menu.domain.MenuItem import MenuItem
from menu.logic.catalog.grouping import categories_of

logger = logging.getLogger(__name__)

SelectionState = Dict[str, bool]

__all__ = ["SelectionState", "derive_initial", "toggle"]


def derive_initial(items: Iterable[MenuItem]) -> SelectionState:
    """Every category present in `items` switched on, in first-seen order."""
    return {category: True for category in categories_of(items)}


def toggle(state: Mapping[str, bool], category: str) -> SelectionState:
    """Return a copy of `state` with `category` flipped; unknown categories leave it unchanged."""
    new_state = dict(state)
    if category not in new_state:
        logger.debug("Ignoring toggle of unknown category %r", category)
        return new_state
    new_state[category] = not new_state[category]
    return new_state
