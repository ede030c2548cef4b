"""
Unit tests for computed-style and geometry probes.
"""

from unittest.mock import MagicMock

import pytest

from uiflows import layout

pytestmark = pytest.mark.unit


def test_computed_style_passes_property_to_browser():
    locator = MagicMock()
    locator.evaluate.return_value = "flex"

    assert layout.computed_style(locator, "display") == "flex"
    assert locator.evaluate.call_args.args[1] == "display"


@pytest.mark.parametrize("value, expected", [("584px 584px", 2), ("1168px", 1), ("none", 0), ("", 0)])
def test_grid_column_count(value, expected):
    locator = MagicMock()
    locator.evaluate.return_value = value

    assert layout.grid_column_count(locator) == expected


def test_natural_size():
    image = MagicMock()
    image.evaluate.return_value = {"width": 200, "height": 120}

    assert layout.natural_size(image) == (200, 120)


def test_horizontally_aligned_within_tolerance():
    first, second = MagicMock(), MagicMock()
    first.bounding_box.return_value = {"x": 120.0, "y": 10, "width": 50, "height": 20}
    second.bounding_box.return_value = {"x": 121.5, "y": 80, "width": 90, "height": 30}

    assert layout.horizontally_aligned(first, second, tolerance=5)
    assert not layout.horizontally_aligned(first, second, tolerance=1)


def test_unrendered_element_fails_alignment_check():
    first, second = MagicMock(), MagicMock()
    first.bounding_box.return_value = None

    with pytest.raises(AssertionError, match="not rendered"):
        layout.horizontally_aligned(first, second, tolerance=5)
