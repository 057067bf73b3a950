"""Stateful menu browser.

Owns the single MenuState snapshot: resolves the catalog on load, derives the
category selection, and recomputes the filtered view whenever the search text
or the selection changes. Filtering always works on the catalog already held
in memory; only load() touches the network or the store.
"""
from __future__ import annotations
import logging
from dataclasses import replace
from typing import Dict, List, Optional, Tuple

from menu.domain.MenuState import MenuState
from menu.domain.Section import Section
from menu.events.Event_Bus import EventBus, GLOBAL_EVENT_BUS
from menu.events.event_helpers import publish_busy, publish_filtered_view, publish_menu_loaded
from menu.logic.catalog.filtering import filter_sections
from menu.logic.catalog.grouping import categories_of, group_by_category
from menu.logic.catalog.selection import derive_initial, toggle
from menu.logic.catalog.source import CatalogSource

logger = logging.getLogger(__name__)

__all__ = ["MenuBrowser"]


class MenuBrowser:
    def __init__(self, source: CatalogSource, event_bus: Optional[EventBus] = None):
        self._source = source
        self._event_bus = event_bus or GLOBAL_EVENT_BUS
        self._state = MenuState()
        self._pending_loads = 0
        self._load_generation = 0

    # --- Read side ----------------------------------------------------------
    @property
    def state(self) -> MenuState:
        return self._state

    @property
    def busy(self) -> bool:
        return self._state.busy

    @property
    def loaded(self) -> bool:
        return self._state.loaded

    @property
    def sections(self) -> Tuple[Section, ...]:
        return self._state.sections

    @property
    def categories(self) -> Tuple[str, ...]:
        return self._state.categories

    @property
    def selection(self) -> Dict[str, bool]:
        return dict(self._state.selection)

    @property
    def search_text(self) -> str:
        return self._state.search_text

    @property
    def filtered(self) -> Tuple[Section, ...]:
        return self._state.filtered

    # --- Events -------------------------------------------------------------
    async def load(self, *, keep_search: bool = False) -> MenuState:
        """Resolve the catalog and rebuild categories, selection and both views.

        The selection is always rebuilt from scratch (every category on). The
        search text is reset unless `keep_search` is set. When loads overlap,
        only the most recently started one is applied.
        """
        self._load_generation += 1
        generation = self._load_generation
        self._set_busy(self._pending_loads + 1)
        try:
            items = tuple(await self._source.resolve())
        finally:
            self._set_busy(self._pending_loads - 1)

        if generation != self._load_generation:
            logger.info("Discarding menu load %d superseded by load %d", generation, self._load_generation)
            return self._state

        search_text = self._state.search_text if keep_search else ""
        selection = derive_initial(items)
        self._state = replace(
            self._state,
            items=items,
            sections=tuple(group_by_category(items)),
            categories=tuple(categories_of(items)),
            selection=selection,
            search_text=search_text,
            filtered=tuple(filter_sections(items, search_text, selection)),
            loaded=True,
        )
        logger.info("Menu loaded: %d items in %d categories", len(items), len(self._state.categories))
        publish_menu_loaded(self._event_bus, self._state.sections, self._state.categories)
        publish_filtered_view(self._event_bus, self._state.filtered, search_text, selection)
        return self._state

    def set_search_text(self, text: str) -> List[Section]:
        return self._refilter(search_text=text or "")

    def toggle_category(self, category: str) -> List[Section]:
        return self._refilter(selection=toggle(self._state.selection, category))

    def _refilter(self, **changes) -> List[Section]:
        state = replace(self._state, **changes)
        filtered = filter_sections(state.items, state.search_text, state.selection)
        self._state = replace(state, filtered=tuple(filtered))
        publish_filtered_view(self._event_bus, filtered, state.search_text, state.selection)
        return filtered

    def _set_busy(self, pending: int) -> None:
        self._pending_loads = pending
        busy = pending > 0
        if busy != self._state.busy:
            self._state = replace(self._state, busy=busy)
            publish_busy(self._event_bus, busy)
