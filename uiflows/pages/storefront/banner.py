"""Hero banner carousel on the storefront home page."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from playwright.sync_api import Locator, expect

from uiflows.pages.base_page import BasePage
from uiflows.waits import wait_until

logger = logging.getLogger(__name__)


class BannerCarousel(BasePage):
    """Page object for the banner slider, its arrows and bullet indicators."""

    IMAGE_SELECTOR = 'div.relative img[alt^="Banner"]'
    BULLETS_SELECTOR = "div.absolute.bottom-3.flex.space-x-2 > div"
    ACTIVE_BULLET_SELECTOR = "div.absolute.bottom-3.flex.space-x-2 > div.bg-white.scale-110"
    FRAME_SELECTOR = "div.relative.w-full.flex.items-center.justify-center.rounded-lg.overflow-hidden"

    @property
    def image(self) -> Locator:
        return self.page.locator(self.IMAGE_SELECTOR)

    @property
    def frame(self) -> Locator:
        return self.page.locator(self.FRAME_SELECTOR)

    @property
    def previous_button(self) -> Locator:
        return self.page.locator('button[aria-label="Previous Banner"]')

    @property
    def next_button(self) -> Locator:
        return self.page.locator('button[aria-label="Next Banner"]')

    @property
    def bullets(self) -> Locator:
        return self.page.locator(self.BULLETS_SELECTOR)

    @property
    def active_bullet(self) -> Locator:
        return self.page.locator(self.ACTIVE_BULLET_SELECTOR)

    def current_src(self) -> str | None:
        return self.image.get_attribute("src")

    def _wait_for_src(self, predicate, message: str, timeout: float) -> str | None:
        wait_until(lambda: predicate(self.current_src()), timeout=timeout, message=message)
        return self.current_src()

    def show_next(self, timeout: float = 5.0) -> str | None:
        """
        Click the next arrow and wait for the slide to change.

        Returns:
            The new image src.
        """
        initial = self.current_src()
        logger.info("Initial src: %s", initial)
        self.next_button.click()
        new_src = self._wait_for_src(lambda src: src != initial, "banner did not advance", timeout)
        logger.info("After next click: %s", new_src)
        return new_src

    def show_previous(self, expected_src: str | None = None, timeout: float = 5.0) -> str | None:
        """
        Click the previous arrow and wait for the slide to change.

        Args:
            expected_src: When given, wait until exactly this src is shown.
        """
        initial = self.current_src()
        self.previous_button.click()
        if expected_src is None:
            reverted = self._wait_for_src(lambda src: src != initial, "banner did not go back", timeout)
        else:
            reverted = self._wait_for_src(lambda src: src == expected_src, f"banner did not return to {expected_src}", timeout)
        logger.info("After previous click: %s", reverted)
        return reverted

    def wait_for_auto_slide(self, timeout: float = 10.0) -> str | None:
        """Wait (without clicking) until the carousel advances on its own."""
        initial = self.current_src()
        return self._wait_for_src(lambda src: src != initial, "banner did not auto-slide", timeout)

    def assert_src_matches_one_of(self, fragments: Sequence[str]) -> None:
        """Assert the shown banner's src contains one of ``fragments``."""
        expect(self.image).to_be_visible()
        src = self.current_src() or ""
        assert any(fragment in src for fragment in fragments), f"Unexpected banner src {src!r}"

    def assert_single_active_bullet(self, expected_bullets: int | None = None) -> None:
        """Assert exactly one bullet is active (and optionally the bullet count)."""
        if expected_bullets is not None:
            expect(self.bullets).to_have_count(expected_bullets)
        expect(self.active_bullet).to_have_count(1)
