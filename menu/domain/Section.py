"""Section: a category title and the menu items grouped under it."""
from dataclasses import dataclass
from typing import Any, Dict, Tuple

from menu.domain.MenuItem import MenuItem


@dataclass(frozen=True)
class Section:
    title: str
    data: Tuple[MenuItem, ...] = ()

    def __len__(self) -> int:
        return len(self.data)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "data": [item.to_dict() for item in self.data],
        }
