"""Configuration management for the menu browser."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

from menu.infra.paths import MENU_DB_FILE, MENU_JSON_FILE
from menu.utilities.constants import DEFAULT_FETCH_TIMEOUT, DEFAULT_MENU_API_URL

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Remote menu
MENU_API_URL: Final[str] = os.getenv('MENU_API_URL', DEFAULT_MENU_API_URL)
MENU_FETCH_TIMEOUT: Final[float] = float(os.getenv('MENU_FETCH_TIMEOUT', str(DEFAULT_FETCH_TIMEOUT)))

# Storage: sqlite | json | memory | none
MENU_STORE_BACKEND: Final[str] = os.getenv('MENU_STORE_BACKEND', 'sqlite').strip().lower()
MENU_DB_PATH: Final[Path] = Path(os.getenv('MENU_DB_FILE', str(MENU_DB_FILE)))
MENU_JSON_PATH: Final[Path] = Path(os.getenv('MENU_JSON_FILE', str(MENU_JSON_FILE)))

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'DEBUG' if DEBUG else 'INFO').upper()
