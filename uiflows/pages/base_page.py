"""
Base Page class for the Page Object Model.

This class provides common functionality shared by all page objects,
including navigation, outcome messages, waits, and screenshots.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Pattern

from playwright.sync_api import Locator, Page, expect

from uiflows.config import Environment

logger = logging.getLogger(__name__)


class BasePage:
    """
    Base class for all page objects.

    Attributes:
        page: Playwright page instance.
        env: Resolved environment configuration.
    """

    def __init__(self, page: Page, env: Environment):
        """
        Initialize the base page.

        Args:
            page: Playwright page instance.
            env: Environment with URLs, credentials and timeouts.
        """
        self.page = page
        self.env = env

    # -------------------------------------------------------------------------
    # Navigation Methods
    # -------------------------------------------------------------------------

    def navigate_to(self, url: str) -> None:
        """
        Navigate to an absolute URL.

        Args:
            url: Destination URL.
        """
        logger.info("Navigating to %s", url)
        self.page.goto(url)

    def wait_for_page_load(self) -> None:
        """Wait for the network to go idle after a navigation."""
        self.page.wait_for_load_state("networkidle")

    def wait_for_element(self, locator: Locator, timeout: int | None = None) -> None:
        """
        Wait for an element to be visible.

        Args:
            locator: Playwright locator for the element.
            timeout: Maximum wait time in milliseconds; defaults to the
                environment's assertion timeout.
        """
        locator.wait_for(state="visible", timeout=timeout or self.env.expect_timeout_ms)

    # -------------------------------------------------------------------------
    # Assertion Methods
    # -------------------------------------------------------------------------

    def text(self, value: str | Pattern[str], exact: bool = False) -> Locator:
        """Locator for an element showing ``value``."""
        return self.page.get_by_text(value, exact=exact)

    def assert_url_contains(self, expected: str) -> None:
        """
        Assert that current URL contains expected string.

        Args:
            expected: String expected to be in the URL.
        """
        expect(self.page).to_have_url(re.compile(re.escape(expected)))

    def assert_message_visible(self, message: str) -> None:
        """
        Assert that an outcome message (toast, inline error) is shown.

        Args:
            message: Expected message text.
        """
        logger.info("Expecting message: %s", message)
        expect(self.text(message)).to_be_visible()

    def assert_text_hidden(self, value: str, exact: bool = True) -> None:
        """Assert that no visible element shows ``value``."""
        expect(self.text(value, exact=exact)).not_to_be_visible()

    # -------------------------------------------------------------------------
    # Utility Methods
    # -------------------------------------------------------------------------

    def set_viewport(self, width: int, height: int) -> None:
        """Resize the viewport."""
        logger.info("Setting viewport to %dx%d", width, height)
        self.page.set_viewport_size({"width": width, "height": height})

    def take_screenshot(self, name: str) -> str:
        """
        Take a screenshot of the current page.

        Args:
            name: Name for the screenshot file.

        Returns:
            Path to the saved screenshot.
        """
        screenshot_dir = Path(self.env.artifacts_dir) / "screenshots"
        screenshot_dir.mkdir(parents=True, exist_ok=True)
        path = screenshot_dir / f"{name}.png"
        self.page.screenshot(path=str(path))
        return str(path)
