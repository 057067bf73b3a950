from contextlib import asynccontextmanager
from typing import Optional
import logging

from fastapi import FastAPI

from menu.api.routes import catalog
from menu.infra.Menu_Api import MenuApiClient
from menu.infra.Menu_Repository import build_repository
from menu.logic.browser.menu_browser import MenuBrowser
from menu.logic.catalog.source import CatalogSource
from menu.utilities.config import (
    MENU_API_URL,
    MENU_DB_PATH,
    MENU_FETCH_TIMEOUT,
    MENU_JSON_PATH,
    MENU_STORE_BACKEND,
)

# Logging
logger = logging.getLogger("menu_app")


def build_browser() -> MenuBrowser:
    """Wire the browser from configuration (remote API + configured store)."""
    repository = build_repository(MENU_STORE_BACKEND, db_path=MENU_DB_PATH, json_path=MENU_JSON_PATH)
    fetcher = MenuApiClient(MENU_API_URL, MENU_FETCH_TIMEOUT)
    logger.info("Menu source: %s, storage backend: %s", MENU_API_URL, repository.name)
    return MenuBrowser(CatalogSource(fetcher, repository))


def create_app(browser: Optional[MenuBrowser] = None) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await app.state.browser.load()
        yield

    app = FastAPI(title="Little Lemon Menu API", lifespan=lifespan)
    app.state.browser = browser or build_browser()
    app.include_router(catalog.router)
    return app


app = create_app()
