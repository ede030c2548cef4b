"""Storefront home page: search bar plus the content sections below it."""

from __future__ import annotations

import logging

from playwright.sync_api import Locator, Page, expect

from uiflows.config import Environment
from uiflows.pages.base_page import BasePage
from uiflows.pages.storefront.banner import BannerCarousel
from uiflows.pages.storefront.catalog import CategoryGrid, ProductCatalog
from uiflows.pages.storefront.deals import AddOnMasalas, FeaturedDeals

logger = logging.getLogger(__name__)


class StorefrontHomePage(BasePage):
    """
    Page object for the storefront home page.

    Section objects (banner, categories, products, deals, masalas) share the
    same page handle and are exposed as attributes.
    """

    SEARCH_PLACEHOLDER = "Search the Product you want"
    NO_RESULTS = "Oops, we couldnt find any"

    def __init__(self, page: Page, env: Environment):
        super().__init__(page, env)
        self.banner = BannerCarousel(page, env)
        self.categories = CategoryGrid(page, env)
        self.products = ProductCatalog(page, env)
        self.deals = FeaturedDeals(page, env)
        self.masalas = AddOnMasalas(page, env)

    def navigate(self) -> "StorefrontHomePage":
        """
        Open the home page and wait for the network to settle.

        Returns:
            Self for method chaining.
        """
        self.navigate_to(self.env.home_url)
        self.wait_for_page_load()
        return self

    @property
    def search_box(self) -> Locator:
        return self.page.get_by_role("textbox", name=self.SEARCH_PLACEHOLDER)

    @property
    def search_icon(self) -> Locator:
        return self.page.get_by_role("img", name="search-icon")

    def search(self, term: str = "") -> None:
        """
        Type ``term`` into the search box (if given) and click the icon.

        Args:
            term: Search text; empty submits an empty search.
        """
        logger.info("Searching for %r", term)
        if term:
            self.search_box.fill(term)
        self.search_icon.click()

    def result_heading(self, product_name: str) -> Locator:
        return self.page.get_by_role("heading", name=product_name)

    def assert_search_bar_ready(self) -> None:
        """Assert the search box and icon are shown and usable."""
        expect(self.search_box).to_be_visible()
        expect(self.search_box).to_have_attribute("placeholder", self.SEARCH_PLACEHOLDER)
        expect(self.search_icon).to_be_visible()
        expect(self.search_icon).to_be_enabled()

    def assert_result_visible(self, product_name: str) -> None:
        expect(self.result_heading(product_name)).to_be_visible()

    def assert_no_results(self) -> None:
        expect(self.text(self.NO_RESULTS)).to_be_visible()

    def open_result(self, product_name: str) -> None:
        """Click a search result and wait for the product page."""
        heading = self.result_heading(product_name)
        expect(heading).to_be_visible()
        heading.click()
        self.wait_for_page_load()
