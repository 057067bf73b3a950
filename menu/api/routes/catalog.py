from typing import Any, Dict, Iterable

from fastapi import APIRouter, HTTPException, Request

from menu.domain.Section import Section
from menu.logic.browser.menu_browser import MenuBrowser
from menu.utilities.validators import SearchInput

router = APIRouter(prefix="/api/menu")


def _browser(request: Request) -> MenuBrowser:
    return request.app.state.browser


def _sections(sections: Iterable[Section]):
    return [section.to_dict() for section in sections]


def _filtered_view(browser: MenuBrowser) -> Dict[str, Any]:
    filtered = browser.filtered
    return {
        "search_text": browser.search_text,
        "selection": browser.selection,
        "sections": _sections(filtered),
        "count": sum(len(section) for section in filtered),
    }


@router.get("")
async def get_menu(request: Request):
    """Unfiltered catalog grouped by category, plus the category list."""
    browser = _browser(request)
    return {
        "busy": browser.busy,
        "categories": list(browser.categories),
        "sections": _sections(browser.sections),
    }


@router.get("/filtered")
async def get_filtered(request: Request):
    return _filtered_view(_browser(request))


@router.put("/search")
async def put_search(request: Request, payload: SearchInput):
    browser = _browser(request)
    browser.set_search_text(payload.text)
    return _filtered_view(browser)


@router.post("/categories/{category}/toggle")
async def toggle_category(request: Request, category: str):
    browser = _browser(request)
    if category not in browser.selection:
        raise HTTPException(status_code=404, detail="Category not found")
    browser.toggle_category(category)
    return _filtered_view(browser)


@router.post("/reload")
async def reload_menu(request: Request):
    browser = _browser(request)
    await browser.load(keep_search=True)
    return _filtered_view(browser)
