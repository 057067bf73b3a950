"""MenuItem domain entity: id, title, price (kept as text) and category."""
from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class MenuItem:
    id: str
    title: str
    price: str
    category: str

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "MenuItem":
        '''Builds an item from a stored row or a remote payload entry.

        Accepts `name` as a synonym for `title` and a category given either as
        a plain string or as an object carrying a `title`. The id and price are
        coerced to text; the price is never parsed.
        '''
        if not isinstance(data, dict):
            raise ValueError(f"Menu item must be an object, got {type(data).__name__}")
        item_id = data.get("id")
        title = data.get("title") or data.get("name")
        category = data.get("category")
        if isinstance(category, dict):
            category = category.get("title")
        if item_id is None or str(item_id) == "":
            raise ValueError(f"Menu item without id: {data!r}")
        if not title or not category:
            raise ValueError(f"Menu item {item_id} is missing a title or category")
        price = data.get("price")
        return MenuItem(
            id=str(item_id),
            title=str(title),
            price="" if price is None else str(price),
            category=str(category),
        )

    def to_dict(self) -> Dict[str, str]:
        '''Converts the item to a dictionary for JSON/SQLite persistence.'''
        return {
            "id": self.id,
            "title": self.title,
            "price": self.price,
            "category": self.category,
        }
