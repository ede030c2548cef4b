"""
Fixtures for unit tests of the page objects.

Playwright objects are replaced with ``MagicMock`` stand-ins. Locators
returned for the same query are cached so tests can assert on the exact
locator a page object clicked or filled.
"""

from collections.abc import Callable, Sequence
from dataclasses import replace
from unittest.mock import MagicMock

import pytest

from uiflows import Environment


def make_cells(values: Sequence[str | None]) -> MagicMock:
    """Locator over a list of elements whose text contents are ``values``."""
    cells = MagicMock(name="cells")
    cells.count.return_value = len(values)
    cells.nth.side_effect = lambda i: MagicMock(**{"text_content.return_value": values[i]})
    cells.first.text_content.return_value = values[0] if values else None
    return cells


def make_row(cells: Sequence[str], spans: Sequence[str] = ()) -> MagicMock:
    """
    A grid row mock.

    ``row.locator("div")`` yields ``cells`` and ``row.locator("div span")``
    yields ``spans``; any other selector yields a cached plain mock.
    """
    row = MagicMock(name="row")
    cache: dict[str, MagicMock] = {}

    def locator(selector: str) -> MagicMock:
        if selector not in cache:
            if selector == "div":
                cache[selector] = make_cells(cells)
            elif selector == "div span":
                cache[selector] = make_cells(spans)
            else:
                cache[selector] = MagicMock(name=selector)
        return cache[selector]

    row.locator.side_effect = locator
    return row


def category_row(position: int, name: str, slug: str | None = None) -> MagicMock:
    """A row shaped like the Categories grid: eleven cells, status in a span."""
    cells = [
        str(position), "", name, slug or name.lower().replace(" ", "-"), "Active",
        "1", "-", "Sandbox Admin", "01 Jan 2025", "01 Jan 2025", "",
    ]
    return make_row(cells, spans=["Active"])


def make_page() -> MagicMock:
    """
    Page mock with cached locators.

    ``locator``, ``get_by_role``, ``get_by_text`` and ``get_by_placeholder``
    return the same mock for the same arguments. Rows registered through
    ``page.set_rows(selector, rows)`` are served for the grid row selector;
    the rows list may be mutated afterwards.
    """
    page = MagicMock(name="page")
    cache: dict[tuple, MagicMock] = {}
    grid: dict[str, MagicMock] = {}

    def cached(kind: str) -> Callable[..., MagicMock]:
        def lookup(*args, **kwargs) -> MagicMock:
            if kind == "locator" and args and args[0] in grid:
                return grid[args[0]]
            key = (kind, tuple(repr(a) for a in args), tuple(sorted((k, repr(v)) for k, v in kwargs.items())))
            if key not in cache:
                cache[key] = MagicMock(name=f"{kind}{args}")
            return cache[key]
        return lookup

    def set_rows(selector: str, rows: list[MagicMock]) -> MagicMock:
        rows_locator = MagicMock(name="rows")
        rows_locator.count.side_effect = lambda: len(rows)
        rows_locator.nth.side_effect = lambda i: rows[i]
        grid[selector] = rows_locator
        return rows_locator

    page.locator.side_effect = cached("locator")
    page.get_by_role.side_effect = cached("get_by_role")
    page.get_by_text.side_effect = cached("get_by_text")
    page.get_by_placeholder.side_effect = cached("get_by_placeholder")
    page.set_rows = set_rows
    return page


@pytest.fixture
def page() -> MagicMock:
    return make_page()


@pytest.fixture
def quick_env(fake_env: Environment) -> Environment:
    """Environment with a short assertion timeout so failed lookups end fast."""
    return replace(fake_env, expect_timeout_ms=200)
