"""Featured Deals and Add on Masalas sections of the storefront home page."""

from __future__ import annotations

import logging
import re

from playwright.sync_api import Locator, expect

from uiflows import pricing
from uiflows.layout import grid_column_count, horizontally_aligned
from uiflows.pages.base_page import BasePage
from uiflows.pages.storefront.catalog import assert_image_loaded, optional_text

logger = logging.getLogger(__name__)

WEIGHT_SUFFIX_PATTERN = re.compile(r"\|\s?\d+(g|kg)$", re.IGNORECASE)


class FeaturedDeals(BasePage):
    """Page object for the two-column Featured Deals grid."""

    SECTION_SELECTOR = r"div.grid.grid-cols-1.md\:grid-cols-2.gap-8"
    CARD_SELECTOR = "div.grid > div.bg-white.shadow-lg.inset-shadow-2xs.rounded-xl.flex"

    @property
    def section(self) -> Locator:
        return self.page.locator(self.SECTION_SELECTOR)

    @property
    def cards(self) -> Locator:
        return self.page.locator(self.CARD_SELECTOR)

    def scroll_into_view(self) -> None:
        expect(self.section).to_be_visible()
        self.section.scroll_into_view_if_needed()

    def card_count(self) -> int:
        return self.cards.count()

    def column_count(self) -> int:
        """Number of grid columns the section currently renders."""
        columns = grid_column_count(self.section)
        logger.info("Featured deals grid columns: %d", columns)
        return columns

    def assert_cards_complete(self, min_image_size: int | None = 100) -> None:
        """
        Assert every deal card has an image, labels, description and an
        enabled Explore button.
        """
        count = self.card_count()
        assert count > 0, "No deal cards rendered"
        for i in range(count):
            card = self.cards.nth(i)
            expect(card).to_be_visible()
            src = assert_image_loaded(card.locator("img"), min_image_size)
            alt = card.locator("img").get_attribute("alt")
            assert alt, f"Deal {i + 1} image {src} has no alt text"

            for label in card.locator("div.flex.space-x-2 > span").all_text_contents():
                assert label.strip(), f"Deal {i + 1} has an empty label"

            descriptions = card.locator("div.mt-3.text-gray-700 > ul > li").all_text_contents()
            assert descriptions, f"Deal {i + 1} has no description"
            for text in descriptions:
                assert text.strip(), f"Deal {i + 1} has an empty description line"

            explore = card.locator('button:has-text("Explore")')
            expect(explore).to_be_visible()
            expect(explore).to_be_enabled()

    def assert_titles_aligned(self, tolerance: float = 20) -> None:
        """Assert each card's title and Explore button share a left edge."""
        for i in range(self.card_count()):
            card = self.cards.nth(i)
            assert horizontally_aligned(
                card.locator("h3"), card.locator('button:has-text("Explore")'), tolerance
            ), f"Deal {i + 1} title and Explore button are misaligned"

    def assert_descriptions_priced(self) -> None:
        """Assert every description line mentions a rupee price."""
        for i in range(self.card_count()):
            for text in self.cards.nth(i).locator("div.mt-3.text-gray-700 > ul > li").all_text_contents():
                assert pricing.PRICE_ANYWHERE_PATTERN.search(text), f"Deal {i + 1} line {text!r} has no price"


class AddOnMasalas(BasePage):
    """Page object for the Add on Masalas carousel."""

    TITLE = "Add on Masalas"
    SECTION_XPATH = "xpath=//h2[text()='Add on Masalas']/following-sibling::div"
    PRODUCT_XPATH = SECTION_XPATH + "//div[contains(@class,'min-w-[200px]')]"
    PRICE_SELECTOR = "span.text-base.font-family-bold"
    IMAGE_SELECTOR = 'img[alt$="Powder"], img[alt$="Masala"], img[alt*="Briyani"]'

    @property
    def title(self) -> Locator:
        return self.page.locator("h2", has_text=self.TITLE)

    @property
    def section(self) -> Locator:
        return self.page.locator(self.SECTION_XPATH)

    @property
    def products(self) -> Locator:
        return self.page.locator(self.PRODUCT_XPATH)

    @property
    def next_arrow(self) -> Locator:
        return self.page.locator(self.SECTION_XPATH + "//button[2]")

    def scroll_into_view(self) -> None:
        self.title.scroll_into_view_if_needed()
        expect(self.title).to_be_visible()

    def assert_products_listed(self) -> int:
        self.section.first.scroll_into_view_if_needed()
        count = self.products.count()
        assert count > 0, "No masala products rendered"
        expect(self.page.locator("button", has_text="Add to Cart").first).to_be_enabled()
        return count

    def assert_images_hosted_on(self, origin_fragment: str) -> None:
        """Assert every masala image is visible and served from ``origin_fragment``."""
        images = self.page.locator(self.IMAGE_SELECTOR)
        count = images.count()
        logger.info("Found %d images matching criteria", count)
        for i in range(count):
            image = images.nth(i)
            image.scroll_into_view_if_needed()
            expect(image).to_be_visible()
            src = image.get_attribute("src") or ""
            logger.info("Image #%d alt: %r src: %s", i + 1, image.get_attribute("alt"), src)
            assert origin_fragment in src, f"Image {src} not served from {origin_fragment}"

    def assert_prices_whole_rupees(self) -> None:
        prices = self.page.locator(self.PRICE_SELECTOR)
        for i in range(prices.count()):
            text = prices.nth(i).inner_text().strip()
            logger.info("Price #%d: %r", i + 1, text)
            assert re.match(r"^₹\d+$", text), f"Malformed masala price {text!r}"

    def assert_discounts_consistent(self) -> int:
        """
        Check each product's discount badge against its prices.

        Missing values read as empty text, so a product without an original
        price must show no discount.

        Returns:
            Number of products checked.
        """
        count = self.products.count()
        logger.info("Found %d product cards under %s", count, self.TITLE)
        for i in range(count):
            card = self.products.nth(i)
            card.scroll_into_view_if_needed()
            pricing.check_discount(
                optional_text(card.locator("span.line-through")),
                optional_text(card.locator("span.font-family-bold")),
                optional_text(card.locator("span", has_text="off")),
            )
        return count

    def assert_descriptions_weighted(self) -> None:
        """Assert each product has a name and a description ending in a weight."""
        for i in range(self.products.count()):
            card = self.products.nth(i)
            name = optional_text(card.locator("h3"))
            description = optional_text(card.locator("p"))
            logger.info("Card #%d - Name: %r, Description: %r", i + 1, name, description)
            assert name, f"Masala {i + 1} has no name"
            assert WEIGHT_SUFFIX_PATTERN.search(description), f"Masala {i + 1} description {description!r} has no weight"
