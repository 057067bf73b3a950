from typing import Dict, Final, List

DEFAULT_MENU_API_URL: Final[str] = (
    "https://raw.githubusercontent.com/Meta-Mobile-Developer-PC/"
    "Working-With-Data-API/main/menu-items-by-category.json"
)
DEFAULT_FETCH_TIMEOUT: Final[float] = 10.0
STORE_BACKENDS: Final[tuple] = ("sqlite", "json", "memory", "none")

# Bundled menu served when neither the remote source nor the local store has data
DEFAULT_MENU_ITEMS: Final[List[Dict[str, str]]] = [
    # Appetizers
    {"id": "1", "title": "Spinach Artichoke Dip", "price": "10.99", "category": "Appetizers"},
    {"id": "2", "title": "Hummus", "price": "8.99", "category": "Appetizers"},
    {"id": "3", "title": "Fried Calamari Rings", "price": "12.99", "category": "Appetizers"},
    {"id": "4", "title": "Fried Mushroom", "price": "9.99", "category": "Appetizers"},
    # Salads
    {"id": "5", "title": "Greek Salad", "price": "9.99", "category": "Salads"},
    {"id": "6", "title": "Caesar Salad", "price": "8.99", "category": "Salads"},
    {"id": "7", "title": "Tuna Salad", "price": "11.99", "category": "Salads"},
    {"id": "8", "title": "Grilled Chicken Salad", "price": "12.99", "category": "Salads"},
    # Beverages
    {"id": "9", "title": "Water", "price": "1.99", "category": "Beverages"},
    {"id": "10", "title": "Coke", "price": "2.99", "category": "Beverages"},
    {"id": "11", "title": "Beer", "price": "5.99", "category": "Beverages"},
    {"id": "12", "title": "Ice Tea", "price": "3.99", "category": "Beverages"},
]
