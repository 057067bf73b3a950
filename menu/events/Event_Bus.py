"""Simple Event Bus / Observer implementation for menu browser updates.

Event names:
  menu.loaded   -> payload {"sections": [Section], "categories": [str]}
  menu.filtered -> payload {"sections": [Section], "search_text": str, "selection": {str: bool}}
  menu.busy     -> payload {"busy": bool}

Subscribers are callables taking (event_name, payload).
"""
from __future__ import annotations
import logging
from collections import defaultdict
from typing import Callable, Any, Dict, List

logger = logging.getLogger(__name__)

# --- Event name constants (used across modules) ---
MENU_LOADED = "menu.loaded"
MENU_FILTERED = "menu.filtered"
MENU_BUSY = "menu.busy"


class EventBus:
	def __init__(self):
		self._subscribers: Dict[str, List[Callable[[str, Any], None]]] = defaultdict(list)

	def subscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		if callback not in self._subscribers[event_name]:
			self._subscribers[event_name].append(callback)

	def unsubscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		try:
			self._subscribers[event_name].remove(callback)
		except (ValueError, KeyError):
			pass

	def publish(self, event_name: str, payload: Any):
		for cb in list(self._subscribers.get(event_name, [])):
			try:
				cb(event_name, payload)
			except Exception:
				logger.exception("Error delivering %s to %r", event_name, cb)


# Shared bus for the application process
GLOBAL_EVENT_BUS = EventBus()

__all__ = ['EventBus', 'GLOBAL_EVENT_BUS', 'MENU_LOADED', 'MENU_FILTERED', 'MENU_BUSY']
