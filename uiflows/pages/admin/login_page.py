"""Login page object for the admin panel."""

from __future__ import annotations

import logging

from playwright.sync_api import Locator, Page, expect

from uiflows.config import Environment
from uiflows.errors import MissingCredentialsError
from uiflows.pages.base_page import BasePage
from uiflows.steps import step

logger = logging.getLogger(__name__)


class LoginPage(BasePage):
    """
    Page object for the admin login page.

    Provides methods for:
    - Entering the mobile number and password
    - Submitting the login form
    """

    def __init__(self, page: Page, env: Environment):
        super().__init__(page, env)

    def navigate(self) -> "LoginPage":
        """
        Navigate to the login page.

        Returns:
            Self for method chaining.
        """
        self.navigate_to(self.env.login_url)
        return self

    @property
    def mobile_input(self) -> Locator:
        """Locator for the mobile number field."""
        return self.page.get_by_role("textbox", name="Mobile Number")

    @property
    def password_input(self) -> Locator:
        """Locator for the password field."""
        return self.page.get_by_role("textbox", name="Password")

    @property
    def login_button(self) -> Locator:
        """Locator for the login submit button."""
        return self.page.get_by_role("button", name="Login")

    def login(self, username: str | None = None, password: str | None = None) -> None:
        """
        Navigate to the login page, fill credentials and submit.

        Credentials default to the environment's. Any missing control fails
        the step with Playwright's timeout error.

        Args:
            username: Mobile number to enter.
            password: Password to enter.

        Raises:
            MissingCredentialsError: If no credentials are available.
        """
        username = username or self.env.username
        password = password or self.env.password
        if not username or not password:
            raise MissingCredentialsError(
                "Admin credentials are not configured; set UIFLOWS_USERNAME and UIFLOWS_PASSWORD"
            )

        with step("Navigate to Admin Login Page"):
            self.navigate()

        with step("Fill Mobile Number and Password"):
            logger.info("Filling login credentials...")
            self.mobile_input.fill(username)
            self.password_input.fill(password)

        with step("Click Login Button"):
            self.login_button.click()

    def assert_logged_in(self) -> None:
        """Assert the login form has been replaced by the authenticated view."""
        expect(self.login_button).to_be_hidden()

    def assert_login_error(self, message: str) -> None:
        """Assert the login form stayed up and shows ``message``."""
        expect(self.login_button).to_be_visible()
        self.assert_message_visible(message)
