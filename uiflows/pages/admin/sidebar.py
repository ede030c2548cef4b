"""Left navigation menu of the admin panel."""

from __future__ import annotations

import logging

from playwright.sync_api import Locator, expect

from uiflows.pages.base_page import BasePage
from uiflows.steps import step

logger = logging.getLogger(__name__)


class SidebarMenu(BasePage):
    """Page object for the admin sidebar navigation list."""

    EXPECTED_MENU_ITEMS = (
        "Dashboard",
        "Category",
        "Product",
        "Banner",
        "Hub",
        "Employee's",
        "Customer",
        "Order",
        "Address",
        "Inventory",
    )

    @property
    def container(self) -> Locator:
        """Locator for the navigation list region."""
        return self.page.get_by_role("list")

    def item(self, label: str) -> Locator:
        """Locator for one menu entry."""
        return self.container.get_by_text(label)

    def open(self, label: str) -> None:
        """Click a menu entry."""
        logger.info("Clicking on '%s' in the sidebar...", label)
        self.item(label).click()

    def missing_items(self) -> list[str]:
        """
        Return the expected labels that are not currently visible.

        This is a snapshot: it does not wait for late-rendering entries.
        """
        return [label for label in self.EXPECTED_MENU_ITEMS if not self.item(label).first.is_visible()]

    def validate(self, soft: bool = False) -> None:
        """
        Assert that every expected menu entry is visible.

        Each label is its own assertion. By default the first missing label
        fails the step; with ``soft=True`` all labels are checked once the list
        has rendered and a single failure lists every missing one.
        """
        with step("Validate left navigation menu items"):
            if not soft:
                for label in self.EXPECTED_MENU_ITEMS:
                    logger.info("Checking sidebar item: %s", label)
                    expect(self.item(label)).to_be_visible()
                return

            expect(self.container.first).to_be_visible()
            missing = self.missing_items()
            assert not missing, f"Sidebar items not visible: {missing}"
