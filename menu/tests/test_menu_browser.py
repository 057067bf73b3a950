import asyncio
import pytest
from menu.domain.MenuItem import MenuItem
from menu.events.Event_Bus import EventBus, MENU_BUSY, MENU_FILTERED, MENU_LOADED
from menu.logic.browser.menu_browser import MenuBrowser

CATALOG = [
    MenuItem("2", "Hummus", "8.99", "Appetizers"),
    MenuItem("5", "Greek Salad", "9.99", "Salads"),
    MenuItem("9", "Water", "1.99", "Beverages"),
]


class FakeSource:
    def __init__(self, *catalogs):
        self.catalogs = list(catalogs) or [CATALOG]
        self.calls = 0
        self.gate = None

    async def resolve(self):
        catalog = self.catalogs[min(self.calls, len(self.catalogs) - 1)]
        self.calls += 1
        if self.gate is not None:
            await self.gate.wait()
        return list(catalog)


def _recorder(bus):
    events = []
    for name in (MENU_LOADED, MENU_FILTERED, MENU_BUSY):
        bus.subscribe(name, lambda event_name, payload: events.append((event_name, payload)))
    return events


@pytest.mark.asyncio
async def test_initial_load_builds_views():
    browser = MenuBrowser(FakeSource(), EventBus())
    assert not browser.loaded
    await browser.load()
    assert browser.loaded
    assert browser.categories == ("Appetizers", "Salads", "Beverages")
    assert browser.selection == {"Appetizers": True, "Salads": True, "Beverages": True}
    assert browser.search_text == ""
    assert [s.title for s in browser.sections] == ["Appetizers", "Salads", "Beverages"]
    assert browser.filtered == browser.sections


@pytest.mark.asyncio
async def test_busy_only_while_resolving():
    source = FakeSource()
    source.gate = asyncio.Event()
    bus = EventBus()
    events = _recorder(bus)
    browser = MenuBrowser(source, bus)

    task = asyncio.create_task(browser.load())
    await asyncio.sleep(0)
    assert browser.busy
    source.gate.set()
    await task
    assert not browser.busy

    browser.set_search_text("sa")
    browser.toggle_category("Salads")
    busy_events = [payload["busy"] for name, payload in events if name == MENU_BUSY]
    assert busy_events == [True, False]


@pytest.mark.asyncio
async def test_search_and_toggle_do_not_resolve_again():
    source = FakeSource()
    browser = MenuBrowser(source, EventBus())
    await browser.load()

    sections = browser.set_search_text("sa")
    assert [(s.title, [i.title for i in s.data]) for s in sections] == [("Salads", ["Greek Salad"])]

    browser.set_search_text("")
    sections = browser.toggle_category("Appetizers")
    assert [s.title for s in sections] == ["Salads", "Beverages"]
    assert browser.selection["Appetizers"] is False
    assert source.calls == 1


@pytest.mark.asyncio
async def test_unknown_category_toggle_leaves_view_unchanged():
    browser = MenuBrowser(FakeSource(), EventBus())
    await browser.load()
    before = browser.filtered
    browser.toggle_category("Desserts")
    assert browser.filtered == before
    assert "Desserts" not in browser.selection


@pytest.mark.asyncio
async def test_reload_rebuilds_selection_from_new_catalog():
    second = CATALOG[1:] + [MenuItem("13", "Lemon Dessert", "6.99", "Desserts")]
    browser = MenuBrowser(FakeSource(CATALOG, second), EventBus())
    await browser.load()
    browser.toggle_category("Salads")
    browser.set_search_text("e")

    await browser.load(keep_search=True)
    assert browser.selection == {"Salads": True, "Beverages": True, "Desserts": True}
    assert browser.search_text == "e"
    assert [s.title for s in browser.filtered] == ["Salads", "Beverages", "Desserts"]

    await browser.load()
    assert browser.search_text == ""


@pytest.mark.asyncio
async def test_events_published():
    bus = EventBus()
    events = _recorder(bus)
    browser = MenuBrowser(FakeSource(), bus)
    await browser.load()
    browser.set_search_text("wat")

    names = [name for name, _ in events]
    assert names == [MENU_BUSY, MENU_BUSY, MENU_LOADED, MENU_FILTERED, MENU_FILTERED]
    loaded = events[2][1]
    assert loaded["categories"] == ["Appetizers", "Salads", "Beverages"]
    last = events[-1][1]
    assert last["search_text"] == "wat"
    assert [s.title for s in last["sections"]] == ["Beverages"]


@pytest.mark.asyncio
async def test_overlapping_loads_apply_latest():
    first = [MenuItem("1", "Old Soup", "5.00", "Soups")]
    source = FakeSource(first, CATALOG)
    source.gate = asyncio.Event()
    browser = MenuBrowser(source, EventBus())

    slow = asyncio.create_task(browser.load())
    fast = asyncio.create_task(browser.load())
    await asyncio.sleep(0)
    source.gate.set()
    await asyncio.gather(slow, fast)

    assert browser.categories == ("Appetizers", "Salads", "Beverages")
    assert not browser.busy


def test_failing_subscriber_does_not_block_others():
    bus = EventBus()
    received = []

    def broken(event_name, payload):
        raise RuntimeError("boom")

    bus.subscribe(MENU_BUSY, broken)
    bus.subscribe(MENU_BUSY, lambda event_name, payload: received.append(payload))
    bus.publish(MENU_BUSY, {"busy": True})
    assert received == [{"busy": True}]


@pytest.mark.asyncio
async def test_search_during_reload_keeps_new_catalog():
    soups = [MenuItem("1", "Onion Soup", "5.00", "Soups")]
    appetizers = [MenuItem("2", "Fried Mushroom", "9.99", "Appetizers")]
    source = FakeSource(soups, appetizers)
    browser = MenuBrowser(source, EventBus())
    await browser.load()

    source.gate = asyncio.Event()
    reload_task = asyncio.create_task(browser.load(keep_search=True))
    await asyncio.sleep(0)
    assert browser.busy
    browser.set_search_text("o")
    source.gate.set()
    await reload_task

    assert browser.categories == ("Appetizers",)
    assert not browser.busy
    assert browser.search_text == "o"
    assert [s.title for s in browser.filtered] == ["Appetizers"]
