"""Menu resolution through the remote -> local store -> bundled defaults chain.

CatalogSource.resolve() never raises: provider failures (FetchError,
PersistError, InitError) are logged where they happen and the next tier is
tried. The bundled default menu is the last tier and always succeeds.
"""
from __future__ import annotations
import logging
from typing import List, Optional, Protocol

from menu.domain.MenuItem import MenuItem
from menu.domain.errors import FetchError, InitError, MenuError
from menu.infra.Menu_Repository import MenuRepository
from menu.utilities.constants import DEFAULT_MENU_ITEMS

logger = logging.getLogger(__name__)

__all__ = ["CatalogFetcher", "CatalogSource", "default_menu_items"]


class CatalogFetcher(Protocol):
    async def fetch_catalog(self) -> List[MenuItem]: ...


def default_menu_items() -> List[MenuItem]:
    return [MenuItem.from_dict(entry) for entry in DEFAULT_MENU_ITEMS]


class CatalogSource:
    def __init__(self, fetcher: CatalogFetcher, repository: MenuRepository,
                 defaults: Optional[List[MenuItem]] = None):
        self.fetcher = fetcher
        self.repository = repository
        self._defaults = list(defaults) if defaults else default_menu_items()

    async def resolve(self) -> List[MenuItem]:
        """Return the menu from the best tier available (never empty, never raises)."""
        try:
            store_ready = await self._prepare_store()
            fetched = await self._fetch_remote()
            if fetched and store_ready:
                await self._persist(fetched)
            if store_ready:
                stored = await self._read_store()
                if stored:
                    return stored
            if fetched:
                logger.info("Serving %d freshly fetched menu items without storage", len(fetched))
                return fetched
        except Exception:
            logger.exception("Unexpected error while resolving the menu")
        logger.warning("Falling back to the bundled menu (%d items)", len(self._defaults))
        return list(self._defaults)

    async def _prepare_store(self) -> bool:
        try:
            await self.repository.ensure_schema()
            return True
        except InitError as e:
            logger.warning("Menu storage unavailable, continuing without persistence: %s", e)
            return False

    async def _fetch_remote(self) -> Optional[List[MenuItem]]:
        try:
            return list(await self.fetcher.fetch_catalog())
        except FetchError as e:
            logger.error("Error fetching menu from API: %s", e)
            return None
        except Exception:
            logger.exception("Unexpected error fetching menu from API")
            return None

    async def _persist(self, items: List[MenuItem]) -> None:
        try:
            await self.repository.write_items(items)
        except MenuError as e:
            logger.error("Failed to persist fetched menu: %s", e)

    async def _read_store(self) -> Optional[List[MenuItem]]:
        try:
            items = await self.repository.read_items()
        except MenuError as e:
            logger.error("Failed to read menu from storage: %s", e)
            return None
        if not items:
            logger.info("Menu storage is empty")
        return items
