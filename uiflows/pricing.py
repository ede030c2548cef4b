"""
Price parsing and discount arithmetic for storefront product cards.

The storefront shows a sale price, a struck-through original price and a
discount badge ("20% off"). The badge must equal the percentage derived
from the two prices, rounded half up.
"""

from __future__ import annotations

import logging
import math
import re

logger = logging.getLogger(__name__)

# "₹1,299.50", "₹45"
PRICE_PATTERN = re.compile(r"^₹\d+(,\d{3})*(\.\d{1,2})?$")
PRICE_ANYWHERE_PATTERN = re.compile(r"₹\d+(,\d{3})*(\.\d{1,2})?")

_NON_NUMERIC = re.compile(r"[^\d.]")


def parse_price(text: str | None) -> float | None:
    """
    Extract the numeric value from a displayed price.

    Args:
        text: Text such as ``"₹1,299.50"`` or ``"MRP ₹60"``.

    Returns:
        The value as float, or None if the text carries no number.
    """
    if not text:
        return None
    digits = _NON_NUMERIC.sub("", text).strip(".")
    if not digits:
        return None
    try:
        return float(digits)
    except ValueError:
        return None


def parse_percent(text: str | None) -> int:
    """Extract the integer percentage from a badge such as ``"12% off"``; 0 if absent."""
    if not text:
        return 0
    digits = re.sub(r"[^\d]", "", text)
    return int(digits) if digits else 0


def expected_discount_percent(original: float, sale: float) -> int:
    """
    Compute the discount percentage the storefront should display.

    Args:
        original: Original (struck-through) price; must be positive.
        sale: Sale price.

    Returns:
        ``round((original - sale) / original * 100)`` rounded half up.
    """
    if original <= 0:
        raise ValueError(f"original price must be positive, got {original}")
    return math.floor((original - sale) / original * 100 + 0.5)


def check_discount(original_text: str | None, sale_text: str | None, discount_text: str | None) -> int:
    """
    Assert that a displayed discount badge matches the displayed prices.

    When the original price is missing or equal to the sale price, no
    discount may be shown.

    Args:
        original_text: Displayed original price.
        sale_text: Displayed sale price.
        discount_text: Displayed discount badge.

    Returns:
        The expected discount percentage.

    Raises:
        AssertionError: If the badge disagrees with the prices.
    """
    original = parse_price(original_text)
    sale = parse_price(sale_text)
    shown = parse_percent(discount_text)

    if original and sale is not None and original != sale:
        expected = expected_discount_percent(original, sale)
    else:
        expected = 0

    logger.info(
        "Original: %r, Sale: %r, Displayed discount: %s%%, Calculated: %s%%",
        original_text, sale_text, shown, expected,
    )
    assert shown == expected, (
        f"Displayed discount {shown}% does not match {expected}% "
        f"computed from original {original_text!r} and sale {sale_text!r}"
    )
    return expected


def is_valid_price(text: str) -> bool:
    """True if ``text`` is exactly a rupee price like ``₹1,299.50``."""
    return bool(PRICE_PATTERN.match(text.strip()))
