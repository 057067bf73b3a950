"""Menu storage backends (SQLite, JSON file, in-memory, unavailable).

Every backend exposes the same three coroutines used by CatalogSource:
  ensure_schema() -> None          idempotent, InitError when storage is unusable
  write_items(items) -> None       replaces the stored menu, PersistError on failure
  read_items() -> list[MenuItem]   stored order, [] when nothing was saved yet

Blocking file/SQLite work runs in a worker thread so the event loop only
suspends on these calls.
"""
from __future__ import annotations

import asyncio
import json
import logging
import os
import shutil
import sqlite3
import tempfile
from contextlib import closing
from pathlib import Path
from typing import Iterable, List, Optional

from menu.domain.MenuItem import MenuItem
from menu.domain.errors import InitError, PersistError
from menu.utilities.constants import STORE_BACKENDS

logger = logging.getLogger(__name__)


class MenuRepository:
    """Base class: async facade over the synchronous backend hooks."""

    name = "base"

    async def ensure_schema(self) -> None:
        await asyncio.to_thread(self._ensure_schema)

    async def write_items(self, items: Iterable[MenuItem]) -> None:
        await asyncio.to_thread(self._write_items, list(items))

    async def read_items(self) -> List[MenuItem]:
        return await asyncio.to_thread(self._read_items)

    def _ensure_schema(self) -> None:
        raise NotImplementedError

    def _write_items(self, items: List[MenuItem]) -> None:
        raise NotImplementedError

    def _read_items(self) -> List[MenuItem]:
        raise NotImplementedError


class SqliteMenuRepository(MenuRepository):
    name = "sqlite"

    def __init__(self, db_path: Path):
        self.db_path = Path(db_path)

    def _connect(self) -> sqlite3.Connection:
        return sqlite3.connect(self.db_path)

    def _ensure_schema(self) -> None:
        try:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
            with closing(self._connect()) as conn, conn:
                # position keeps the order the menu was received in
                conn.execute("""
                    CREATE TABLE IF NOT EXISTS menuitems (
                        position INTEGER PRIMARY KEY AUTOINCREMENT,
                        id TEXT NOT NULL UNIQUE,
                        title TEXT NOT NULL,
                        price TEXT NOT NULL,
                        category TEXT NOT NULL
                    )
                """)
        except (OSError, sqlite3.Error) as e:
            raise InitError(f"Cannot initialize menu database {self.db_path}: {e}") from e

    def _write_items(self, items: List[MenuItem]) -> None:
        rows = [(i.id, i.title, i.price, i.category) for i in items]
        try:
            with closing(self._connect()) as conn, conn:
                conn.execute("DELETE FROM menuitems")
                conn.executemany(
                    "INSERT INTO menuitems (id, title, price, category) VALUES (?, ?, ?, ?)",
                    rows,
                )
        except sqlite3.Error as e:
            raise PersistError(f"Failed to save {len(rows)} menu items: {e}") from e
        logger.info("Saved %d menu items to %s", len(rows), self.db_path)

    def _read_items(self) -> List[MenuItem]:
        try:
            with closing(self._connect()) as conn:
                rows = conn.execute(
                    "SELECT id, title, price, category FROM menuitems ORDER BY position"
                ).fetchall()
        except sqlite3.Error as e:
            raise PersistError(f"Failed to read menu items: {e}") from e
        return [MenuItem(id=r[0], title=r[1], price=r[2], category=r[3]) for r in rows]


class JsonMenuRepository(MenuRepository):
    name = "json"

    def __init__(self, json_path: Path):
        self.json_path = Path(json_path)

    def _atomic_write(self, payload: list) -> None:
        fd, tmp_path = tempfile.mkstemp(
            dir=self.json_path.parent, prefix=".menu_", suffix=".json"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                json.dump(payload, tmp, indent=2, ensure_ascii=False)
            shutil.move(tmp_path, self.json_path)
        finally:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)

    def _ensure_schema(self) -> None:
        try:
            self.json_path.parent.mkdir(parents=True, exist_ok=True)
            if not self.json_path.exists():
                self._atomic_write([])
        except OSError as e:
            raise InitError(f"Cannot initialize menu file {self.json_path}: {e}") from e

    def _write_items(self, items: List[MenuItem]) -> None:
        try:
            self._atomic_write([item.to_dict() for item in items])
        except OSError as e:
            raise PersistError(f"Failed to save menu file {self.json_path}: {e}") from e
        logger.info("Saved %d menu items to %s", len(items), self.json_path)

    def _read_items(self) -> List[MenuItem]:
        if not self.json_path.exists():
            return []
        try:
            with open(self.json_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            return [MenuItem.from_dict(entry) for entry in data]
        except OSError as e:
            raise PersistError(f"Failed to read menu file {self.json_path}: {e}") from e
        except (json.JSONDecodeError, TypeError, ValueError) as e:
            raise PersistError(f"Invalid menu file {self.json_path}: {e}") from e


class MemoryMenuRepository(MenuRepository):
    """Keeps the menu in process memory; nothing survives a restart."""

    name = "memory"

    def __init__(self, items: Optional[Iterable[MenuItem]] = None):
        self._items: List[MenuItem] = list(items) if items else []

    async def ensure_schema(self) -> None:
        return None

    async def write_items(self, items: Iterable[MenuItem]) -> None:
        self._items = list(items)

    async def read_items(self) -> List[MenuItem]:
        return list(self._items)


class UnavailableMenuRepository(MenuRepository):
    """Storage switched off: every call reports the store as unavailable."""

    name = "none"

    async def ensure_schema(self) -> None:
        raise InitError("Menu storage is disabled")

    async def write_items(self, items: Iterable[MenuItem]) -> None:
        raise InitError("Menu storage is disabled")

    async def read_items(self) -> List[MenuItem]:
        raise InitError("Menu storage is disabled")


def build_repository(backend: str, *, db_path: Optional[Path] = None,
                     json_path: Optional[Path] = None) -> MenuRepository:
    """Return the storage backend named by `backend` (see STORE_BACKENDS)."""
    backend = (backend or "").strip().lower()
    if backend == "sqlite":
        if db_path is None:
            raise ValueError("sqlite backend requires db_path")
        return SqliteMenuRepository(db_path)
    if backend == "json":
        if json_path is None:
            raise ValueError("json backend requires json_path")
        return JsonMenuRepository(json_path)
    if backend == "memory":
        return MemoryMenuRepository()
    if backend == "none":
        return UnavailableMenuRepository()
    raise ValueError(f"Unknown menu store backend {backend!r}; expected one of {', '.join(STORE_BACKENDS)}")
