from pathlib import Path

# Centralized paths for menu storage files
DATA_DIR = (Path(__file__).parent.parent / 'data').resolve()
MENU_DB_FILE = DATA_DIR / 'little_lemon.db'
MENU_JSON_FILE = DATA_DIR / 'menu_items.json'

__all__ = ['DATA_DIR', 'MENU_DB_FILE', 'MENU_JSON_FILE']
