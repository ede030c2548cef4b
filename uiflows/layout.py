"""Computed-style and geometry probes for layout assertions."""

from __future__ import annotations

from playwright.sync_api import Locator


def computed_style(locator: Locator, prop: str) -> str:
    """
    Return the computed value of a CSS property.

    Args:
        locator: Element to inspect.
        prop: CSS property in kebab case, e.g. ``"grid-template-columns"``.
    """
    return locator.evaluate("(el, prop) => getComputedStyle(el).getPropertyValue(prop)", prop)


def grid_column_count(locator: Locator) -> int:
    """Number of tracks in the element's resolved ``grid-template-columns``."""
    value = computed_style(locator, "grid-template-columns").strip()
    if not value or value == "none":
        return 0
    return len(value.split())


def has_horizontal_overflow(locator: Locator) -> bool:
    """True when the element's content is wider than its visible box."""
    return locator.evaluate("el => el.scrollWidth > el.clientWidth")


def natural_size(image: Locator) -> tuple[int, int]:
    """Intrinsic ``(width, height)`` of a loaded image."""
    size = image.evaluate("el => ({width: el.naturalWidth, height: el.naturalHeight})")
    return size["width"], size["height"]


def client_width(locator: Locator) -> int:
    """Rendered inner width of the element in CSS pixels."""
    return locator.evaluate("el => el.clientWidth")


def horizontally_aligned(first: Locator, second: Locator, tolerance: float) -> bool:
    """
    Compare the left edges of two elements.

    Raises:
        AssertionError: If either element has no bounding box.
    """
    first_box = first.bounding_box()
    second_box = second.bounding_box()
    assert first_box is not None, "first element is not rendered"
    assert second_box is not None, "second element is not rendered"
    return abs(first_box["x"] - second_box["x"]) < tolerance
