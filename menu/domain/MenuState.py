"""Snapshot of everything the menu browser publishes to the presentation layer."""
from dataclasses import dataclass, field
from typing import Dict, Tuple

from menu.domain.MenuItem import MenuItem
from menu.domain.Section import Section


@dataclass(frozen=True)
class MenuState:
    items: Tuple[MenuItem, ...] = ()
    sections: Tuple[Section, ...] = ()
    categories: Tuple[str, ...] = ()
    # Never mutated in place; replaced together with the whole snapshot
    selection: Dict[str, bool] = field(default_factory=dict)
    search_text: str = ""
    filtered: Tuple[Section, ...] = ()
    busy: bool = False
    loaded: bool = False
