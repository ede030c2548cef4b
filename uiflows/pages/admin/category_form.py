"""
Create/Edit Category form of the admin panel.

The form is a modal opened from the Categories page. The image is chosen
through a file-manager dialog: folders are clicked one by one, then the
count-bearing "Open (n)" button confirms the selection.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence

from playwright.sync_api import Locator, Page, expect

from uiflows.config import Environment
from uiflows.pages.base_page import BasePage
from uiflows.steps import step

logger = logging.getLogger(__name__)

NAME_REQUIRED = "Name is required."
SLUG_REQUIRED = "Slug is required."
IMAGE_REQUIRED = re.compile(r'"?image"? is not allowed to be', re.IGNORECASE)


class CategoryForm(BasePage):
    """
    Page object for the category create/edit modal.

    Provides methods for:
    - Opening, cancelling and submitting the form
    - Selecting an image through the file manager
    - Filling fields
    - Validating required-field errors
    """

    FORM_LABELS = ("Name", "Slug", "Level", "Image", "Order")

    def __init__(self, page: Page, env: Environment):
        super().__init__(page, env)

    # -------------------------------------------------------------------------
    # Locators
    # -------------------------------------------------------------------------

    @property
    def open_button(self) -> Locator:
        """Locator for the button that opens the create form."""
        return self.page.get_by_role("button", name="+ Create Category")

    @property
    def heading(self) -> Locator:
        """Locator for the create form heading."""
        return self.page.get_by_role("heading", name="Create Category")

    @property
    def name_input(self) -> Locator:
        return self.page.get_by_role("textbox", name="Category Name")

    @property
    def slug_input(self) -> Locator:
        return self.page.get_by_role("textbox", name="Slug")

    @property
    def order_input(self) -> Locator:
        return self.page.get_by_placeholder("Enter order number")

    @property
    def submit_button(self) -> Locator:
        """Locator for the Create submit button (not "+ Create Category")."""
        return self.page.get_by_role("button", name="Create", exact=True)

    @property
    def update_button(self) -> Locator:
        return self.page.get_by_role("button", name="Update")

    @property
    def cancel_button(self) -> Locator:
        return self.page.get_by_role("button", name="Cancel")

    @property
    def browse_button(self) -> Locator:
        return self.page.get_by_role("button", name="Browse Image")

    @property
    def confirm_image_button(self) -> Locator:
        """Locator for the file manager's "Open (n)" confirmation button."""
        return self.page.get_by_role("button", name=re.compile(r"^Open \(\d+\)$"))

    def field_label(self, label: str) -> Locator:
        return self.page.locator("label").filter(has_text=label)

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    def open(self) -> "CategoryForm":
        """
        Open the create form and wait for its heading.

        Returns:
            Self for method chaining.
        """
        with step("Open Create Category Form"):
            logger.info("Opening Create Category form...")
            self.open_button.click()
            expect(self.heading).to_be_visible()
        return self

    def select_image(self, path_segments: Sequence[str]) -> None:
        """
        Pick an image through the file manager.

        Each segment (folder, then file) is clicked in order; a segment that
        never becomes visible fails the step without backtracking.

        Args:
            path_segments: Folder names followed by the file name.
        """
        if not path_segments:
            raise ValueError("path_segments must name at least one file")

        with step("Select image via file manager"):
            self.browse_button.click()
            for segment in path_segments:
                logger.info("Clicking folder/file: %s", segment)
                self.page.get_by_text(segment, exact=True).click()
            self.confirm_image_button.click()
            expect(self.confirm_image_button).to_be_hidden()
            logger.info("Image selected and opened.")

    def fill(self, name: str, slug: str, order: int | None = None) -> None:
        """
        Fill the text fields of the form.

        Args:
            name: Category name.
            slug: Category slug.
            order: Optional display order.
        """
        with step("Fill Category Form"):
            logger.info("Filling name: %s", name)
            self.name_input.fill(name)
            logger.info("Filling slug: %s", slug)
            self.slug_input.fill(slug)
            expect(self.order_input).to_be_visible()
            if order is not None:
                logger.info("Filling order: %s", order)
                self.order_input.fill(str(order))

    def submit(self) -> None:
        """Click the Create button."""
        with step("Submit Create Category Form"):
            self.submit_button.click()

    def cancel(self) -> None:
        """Close the form without saving."""
        with step("Cancel Create Category Form"):
            self.cancel_button.click()

    def create(
        self,
        name: str,
        slug: str,
        image_path: Sequence[str],
        order: int | None = None,
    ) -> None:
        """
        Open the form, choose an image and fill the fields.

        Submission is left to the caller so it can assert on the outcome.
        """
        self.open()
        self.select_image(image_path)
        self.fill(name, slug, order)

    # -------------------------------------------------------------------------
    # Assertions
    # -------------------------------------------------------------------------

    def validate_form_ui(self) -> None:
        """Open the form and assert its labels and action buttons are shown."""
        self.open()
        with step("Validate Create Category Form UI Elements"):
            for label in self.FORM_LABELS:
                logger.info("Checking field: %s", label)
                expect(self.field_label(label)).to_be_visible()
            expect(self.cancel_button).to_be_visible()
            expect(self.submit_button).to_be_visible()
            logger.info("Action buttons 'Cancel' and 'Create' are visible.")

    def validate_required_field_errors(self, name: str = "Chicken", slug: str = "chicken-a") -> None:
        """
        Submit the open form three times, adding one required field each time.

        The application reports one blocking error at a time in field order:
        Name, then Slug, then Image. Each submission asserts the error for
        the first field still missing.

        Args:
            name: Value used for the name field.
            slug: Value used for the slug field.
        """
        with step("Submit form with all fields empty"):
            self.submit_button.click()
            expect(self.text(NAME_REQUIRED)).to_be_visible()

        with step("Fill only name and submit"):
            self.name_input.fill(name)
            self.submit_button.click()
            expect(self.text(SLUG_REQUIRED)).to_be_visible()

        with step("Fill name and slug, but no image, and submit"):
            self.slug_input.fill(slug)
            self.submit_button.click()
            expect(self.text(IMAGE_REQUIRED)).to_be_visible()

    def assert_closed(self) -> None:
        """Assert the create form is no longer shown."""
        expect(self.heading).not_to_be_visible()
