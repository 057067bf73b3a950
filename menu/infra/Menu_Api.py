"""Remote menu provider: downloads the Little Lemon menu JSON over HTTP."""
import logging
from typing import Any, List, Optional

import httpx

from menu.domain.MenuItem import MenuItem
from menu.domain.errors import FetchError
from menu.utilities.config import MENU_API_URL, MENU_FETCH_TIMEOUT

logger = logging.getLogger(__name__)


def parse_menu_payload(data: Any) -> List[MenuItem]:
    """Turn a decoded payload (`{"menu": [...]}` or a bare list) into menu items.

    The whole payload is rejected if any entry is malformed or if it holds no
    items at all.
    """
    entries = data.get("menu") if isinstance(data, dict) else data
    if not isinstance(entries, list):
        raise FetchError("Menu payload has no 'menu' list")
    try:
        items = [MenuItem.from_dict(entry) for entry in entries]
    except ValueError as e:
        raise FetchError(f"Invalid menu entry: {e}") from e
    if not items:
        raise FetchError("Menu payload is empty")
    return items


class MenuApiClient:
    """Single-attempt fetch of the remote menu; no retries."""

    def __init__(self, url: str = MENU_API_URL, timeout: float = MENU_FETCH_TIMEOUT,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.url = url
        self.timeout = timeout
        self._transport = transport

    async def fetch_catalog(self) -> List[MenuItem]:
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.get(self.url)
        except httpx.HTTPError as e:
            raise FetchError(f"Menu request to {self.url} failed: {e}") from e

        if not response.is_success:
            raise FetchError(f"Menu request to {self.url} returned HTTP {response.status_code}")
        try:
            data = response.json()
        except ValueError as e:
            raise FetchError(f"Menu response is not valid JSON: {e}") from e

        items = parse_menu_payload(data)
        logger.info("Fetched %d menu items from %s", len(items), self.url)
        return items
