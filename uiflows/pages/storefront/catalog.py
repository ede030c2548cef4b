"""
Category grid and product catalog sections of the storefront home page.

Product cards carry a sale price, an optional struck-through original price
and a discount badge; :meth:`ProductCatalog.assert_discounts_consistent`
checks the badge against the prices.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from playwright.sync_api import Locator, expect

from uiflows import pricing
from uiflows.layout import natural_size
from uiflows.pages.base_page import BasePage

logger = logging.getLogger(__name__)

# Letters, digits, space, comma, dot, dash, slash, parentheses, ampersand
CATEGORY_LABEL_PATTERN = re.compile(r"^[a-zA-Z0-9\s,.\-/()&]+$")
HTTP_URL_PATTERN = re.compile(r"^https?://")


def optional_text(locator: Locator) -> str:
    """Trimmed text of the first match, or ``""`` when nothing matches."""
    if locator.count() == 0:
        return ""
    return (locator.first.text_content() or "").strip()


def assert_image_loaded(image: Locator, min_size: int | None = None) -> str:
    """
    Assert an image is visible, served over http(s) and large enough.

    Args:
        image: Image locator.
        min_size: Minimum natural width and height in pixels, if checked.

    Returns:
        The image src.
    """
    expect(image).to_be_visible()
    src = image.get_attribute("src") or ""
    assert HTTP_URL_PATTERN.match(src), f"Image src is not an http(s) URL: {src!r}"
    if min_size is not None:
        width, height = natural_size(image)
        logger.info("Image %s resolution: %dx%d", src, width, height)
        assert width >= min_size and height >= min_size, (
            f"Image {src} is {width}x{height}, expected at least {min_size}x{min_size}"
        )
    return src


class CategoryGrid(BasePage):
    """Page object for the round category tiles on the home page."""

    CONTAINER_SELECTOR = "div.grid > div.flex.flex-col"

    @property
    def containers(self) -> Locator:
        return self.page.locator(self.CONTAINER_SELECTOR)

    @property
    def labels(self) -> Locator:
        return self.page.locator(f"{self.CONTAINER_SELECTOR} > p")

    @property
    def images(self) -> Locator:
        return self.page.locator(f"{self.CONTAINER_SELECTOR} img")

    def label_texts(self) -> list[str]:
        """Return every category label, logging each."""
        texts = [(text or "").strip() for text in self.labels.all_text_contents()]
        logger.info("Number of categories found: %d", len(texts))
        for i, text in enumerate(texts, start=1):
            logger.info("Category %d: %s", i, text)
        return texts

    def assert_labels_valid(self) -> None:
        """Assert labels exist, are visible and use only allowed characters."""
        count = self.labels.count()
        assert count > 0, "No category labels rendered"
        for i in range(count):
            label = self.labels.nth(i)
            expect(label).to_be_visible()
            text = (label.text_content() or "").strip()
            assert text, f"Category label {i + 1} is empty"
            assert CATEGORY_LABEL_PATTERN.match(text), f"Category label {text!r} has unexpected characters"

    def assert_images_valid(self, min_size: int | None = None) -> None:
        count = self.images.count()
        assert count > 0, "No category images rendered"
        for i in range(count):
            assert_image_loaded(self.images.nth(i), min_size)

    def open_first(self) -> str:
        """
        Click the first category tile and wait for the listing page.

        Returns:
            The clicked category label.
        """
        first = self.containers.first
        expect(first).to_be_visible()
        label = (first.locator("p").text_content() or "").strip()
        logger.info("Clicking on first category: %s", label)
        first.click()
        self.page.wait_for_url(re.compile(r"category_slugs="))
        self.wait_for_page_load()
        return label


@dataclass(frozen=True)
class ProductCard:
    """Values read from one product card."""

    title: str
    description: str
    price: str
    original_price: str
    discount: str
    image_src: str | None


class ProductCatalog(BasePage):
    """Page object for the product category tabs and their product cards."""

    TAB_CONTAINER_SELECTOR = "div.flex.overflow-x-auto"
    CARD_SELECTOR = 'div[class*="min-w-[300px]"]'
    PRICE_SELECTOR = "span.text-lg.font-bold"
    ORIGINAL_PRICE_SELECTOR = "span.line-through"
    DISCOUNT_SELECTOR = r"span.text-\[\#3c8031\]"
    ACTIVE_TAB_CLASS = "border-green-500"
    NON_CATEGORY_BUTTONS = ("Add Item", "Add to Cart")
    SIGNUP_PROMPT_SELECTOR = "div.relative.overflow-hidden.rounded-lg.bg-white.shadow-xl"

    @property
    def tab_container(self) -> Locator:
        return self.page.locator(self.TAB_CONTAINER_SELECTOR).first

    @property
    def tabs(self) -> Locator:
        return self.page.locator(self.TAB_CONTAINER_SELECTOR).locator("button")

    @property
    def cards(self) -> Locator:
        return self.page.locator(self.CARD_SELECTOR)

    def scroll_into_view(self) -> None:
        self.tab_container.scroll_into_view_if_needed()

    def tab_labels(self) -> list[tuple[int, str]]:
        """
        Return ``(index, label)`` for every category tab.

        Card buttons that share the container ("Add Item", "Add to Cart")
        are skipped.
        """
        valid = []
        for index, raw in enumerate(self.tabs.all_text_contents()):
            label = raw.strip()
            if label and label not in self.NON_CATEGORY_BUTTONS:
                logger.info("Tab %d: %s", len(valid) + 1, label)
                valid.append((index, label))
        return valid

    def select_tab(self, index: int) -> None:
        """Click the tab at ``index`` and wait for product cards."""
        self.tabs.nth(index).click()
        self.cards.first.wait_for(state="visible", timeout=self.env.expect_timeout_ms)

    def tab_is_active(self, index: int) -> bool:
        classes = self.tabs.nth(index).get_attribute("class") or ""
        return self.ACTIVE_TAB_CLASS in classes.split()

    def read_card(self, card: Locator) -> ProductCard:
        image = card.locator("img")
        return ProductCard(
            title=optional_text(card.locator("h3")),
            description=optional_text(card.locator("p")),
            price=optional_text(card.locator(self.PRICE_SELECTOR)),
            original_price=optional_text(card.locator(self.ORIGINAL_PRICE_SELECTOR)),
            discount=optional_text(card.locator(self.DISCOUNT_SELECTOR)),
            image_src=image.first.get_attribute("src") if image.count() else None,
        )

    def read_cards(self) -> list[ProductCard]:
        count = self.cards.count()
        logger.info("Found %d product cards", count)
        return [self.read_card(self.cards.nth(i)) for i in range(count)]

    def assert_cards_complete(self) -> None:
        """Assert each card shows image, title, description, a price and Add Item."""
        count = self.cards.count()
        assert count > 0, "No product cards rendered"
        for i in range(count):
            card = self.cards.nth(i)
            assert_image_loaded(card.locator("img").first)
            product = self.read_card(card)
            logger.info("Product %d: %s | %s | %s", i + 1, product.title, product.description, product.price)
            assert product.title, f"Product {i + 1} has no title"
            assert product.description, f"Product {i + 1} has no description"
            assert re.search(r"₹\d+", product.price), f"Product {i + 1} price {product.price!r} has no amount"
            expect(card.get_by_role("button", name="Add Item")).to_be_visible()

    def assert_discounts_consistent(self) -> int:
        """
        Check every card's discount badge against its prices.

        Cards missing any of the three values are skipped.

        Returns:
            Number of cards checked.
        """
        checked = 0
        for i, product in enumerate(self.read_cards(), start=1):
            if not (product.price and product.original_price and product.discount):
                logger.warning("Skipping product card %d due to missing price or discount info", i)
                continue
            pricing.check_discount(product.original_price, product.price, product.discount)
            checked += 1
        return checked

    @property
    def signup_prompt(self) -> Locator:
        return self.page.locator(self.SIGNUP_PROMPT_SELECTOR)

    def open_signup_prompt(self, index: int = 0) -> None:
        """Click Add Item on the card at ``index``; guests get the sign-up prompt."""
        self.cards.nth(index).get_by_role("button", name="Add Item").click()
        expect(self.signup_prompt).to_be_visible()

    def assert_signup_prompt(self) -> None:
        """Assert the sign-up prompt shows its headings, mobile input and buttons."""
        prompt = self.signup_prompt
        expect(prompt.get_by_role("heading", name="Kitchen Cabbie")).to_be_visible()
        expect(prompt.get_by_role("heading", name="Sign Up / Log In")).to_be_visible()
        expect(prompt.locator("#mobileNumber")).to_be_editable()
        expect(prompt.get_by_role("button", name="Continue")).to_be_visible()
        expect(prompt.get_by_role("button", name="Skip")).to_be_visible()

    def assert_prices_formatted(self) -> None:
        """Assert every sale price reads like ``₹1,299.50``."""
        prices = self.page.locator(self.PRICE_SELECTOR)
        count = prices.count()
        assert count > 0, "No prices rendered"
        for i in range(count):
            text = (prices.nth(i).text_content() or "").strip()
            logger.info("Checking price %d: %s", i + 1, text)
            assert pricing.is_valid_price(text), f"Malformed price {text!r}"
