"""Event helper utilities.

Payload builders for the menu browser events, so every publisher sends the
same shapes.

Quick import:
    from menu.events.event_helpers import (
        publish_menu_loaded, publish_filtered_view, publish_busy
    )
"""
from __future__ import annotations
from typing import Iterable, Mapping
from menu.domain.Section import Section
from .Event_Bus import EventBus, MENU_BUSY, MENU_FILTERED, MENU_LOADED

__all__ = ['publish_menu_loaded', 'publish_filtered_view', 'publish_busy']


def publish_menu_loaded(bus: EventBus, sections: Iterable[Section], categories: Iterable[str]):
    """Publish a menu.loaded event with the unfiltered catalog."""
    bus.publish(MENU_LOADED, {
        'sections': list(sections),
        'categories': list(categories),
    })


def publish_filtered_view(bus: EventBus, sections: Iterable[Section], search_text: str,
                          selection: Mapping[str, bool]):
    """Publish a menu.filtered event; the selection is copied so subscribers can keep it."""
    bus.publish(MENU_FILTERED, {
        'sections': list(sections),
        'search_text': search_text,
        'selection': dict(selection),
    })


def publish_busy(bus: EventBus, busy: bool):
    bus.publish(MENU_BUSY, {'busy': busy})
