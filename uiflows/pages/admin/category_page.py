"""
Categories listing page of the admin panel.

Covers navigation from the sidebar, page chrome, the category grid and the
edit/delete actions on a row located by its display name.
"""

from __future__ import annotations

import logging

from playwright.sync_api import Locator, Page, expect

from uiflows.config import Environment
from uiflows.pages.admin.category_form import CategoryForm
from uiflows.pages.admin.sidebar import SidebarMenu
from uiflows.pages.base_page import BasePage
from uiflows.steps import step
from uiflows.table import ColumnSpec, TableInspector

logger = logging.getLogger(__name__)

CREATED = "Created successfully"
UPDATED = "Updated successfully"
DELETED = "Deleted successfully"
ALREADY_EXISTS = "This category already exists"


class CategoryPage(BasePage):
    """
    Page object for the Categories page.

    Provides methods for:
    - Navigating here from the sidebar
    - Validating heading, subtext and column headers
    - Reading the category grid
    - Editing and deleting a category by name
    """

    MENU_LABEL = "Category"
    HEADING = "Categories"
    SUBTEXT = "Manage your product categories"

    ROW_SELECTOR = ".grid.items-start.bg-white"

    COLUMN_HEADERS = (
        "S.No",
        "Image",
        "Name",
        "Slug",
        "Status",
        "Level",
        "Parent",
        "Created By",
        "Created At",
        "Updated At",
        "Actions",
    )
    UNREAD_COLUMNS = ("Image", "Actions")

    NAME_COLUMN = ColumnSpec("Name", 2)
    ROW_COLUMNS = (
        ColumnSpec("S.No", 0),
        NAME_COLUMN,
        ColumnSpec("Slug", 3),
        ColumnSpec("Status", 0, "div span"),
        ColumnSpec("Level", 5),
        ColumnSpec("Parent", 6),
        ColumnSpec("Created By", 7),
        ColumnSpec("Created At", 8),
        ColumnSpec("Updated At", 9),
    )

    def __init__(self, page: Page, env: Environment):
        super().__init__(page, env)
        self.sidebar = SidebarMenu(page, env)
        self.form = CategoryForm(page, env)
        self.table = TableInspector(page, self.ROW_SELECTOR)

    # -------------------------------------------------------------------------
    # Locators
    # -------------------------------------------------------------------------

    @property
    def heading(self) -> Locator:
        return self.page.get_by_role("heading", name=self.HEADING)

    @property
    def subtext(self) -> Locator:
        return self.page.get_by_text(self.SUBTEXT)

    def column_header(self, label: str) -> Locator:
        return self.page.get_by_text(label, exact=True)

    @property
    def confirm_delete_button(self) -> Locator:
        """Locator for the Delete button inside the confirmation modal."""
        return self.page.locator("xpath=//button[normalize-space(text())='Delete']")

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    def navigate(self) -> "CategoryPage":
        """
        Open the Categories page from the sidebar and validate its chrome.

        Navigation and content validation are separate steps so a broken
        menu entry is told apart from a broken page.

        Returns:
            Self for method chaining.
        """
        with step("Navigate to Category Page"):
            self.sidebar.open(self.MENU_LABEL)

        with step("Validate Category Page Header and Description"):
            logger.info("Validating heading and subtext on Category page...")
            expect(self.heading).to_be_visible()
            expect(self.subtext).to_be_visible()
        return self

    # -------------------------------------------------------------------------
    # Table
    # -------------------------------------------------------------------------

    def validate_column_headers(self) -> None:
        """Assert that every expected column header is visible."""
        with step("Validate Category Table Column Headers"):
            for header in self.COLUMN_HEADERS:
                logger.info("Checking column header: %s", header)
                expect(self.column_header(header)).to_be_visible()

    def validate_row_layout(self) -> None:
        """Check the declared row columns against the expected headers and a rendered row."""
        TableInspector.validate_columns(
            self.ROW_COLUMNS,
            self.COLUMN_HEADERS,
            self.UNREAD_COLUMNS,
            observed=self.table.observed_column_count(),
        )

    def read_table_rows(self) -> list[dict[str, str]]:
        """
        Read and log every category row.

        Returns:
            One ``{column: value}`` mapping per row, in display order.
        """
        with step("Validate Category Table Row Data"):
            self.validate_row_layout()
            return self.table.read_rows(self.ROW_COLUMNS)

    def row_names(self) -> list[str]:
        """Return the Name column of every row."""
        return [self.table.cell_text(self.table.rows.nth(i), self.NAME_COLUMN) for i in range(self.table.row_count())]

    def find_row(self, name: str) -> Locator:
        """
        Locate the single row whose Name equals ``name`` exactly.

        The grid re-renders after create/update, so the scan is retried for
        up to the expect timeout before giving up.
        """
        return self.table.find_unique_row(self.NAME_COLUMN, name, timeout=self.env.expect_timeout_ms / 1000)

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def edit_category_by_name(self, name: str, new_name: str) -> None:
        """
        Rename the category whose Name equals ``name``.

        Raises:
            RowNotFoundError: If no row has that name.
            DuplicateRowError: If several rows have that name.
        """
        with step(f"Edit category {name}"):
            row = self.find_row(name)
            logger.info("[Edit] Found row with name: %s", name)
            row.locator('button[title="Edit"]').click()
            expect(self.form.name_input).to_be_visible()

            self.form.name_input.fill(new_name)
            self.form.update_button.click()

            expect(self.text(new_name, exact=True)).to_be_visible()

    def delete_category_by_name(self, name: str) -> None:
        """
        Delete the category whose Name equals ``name`` and confirm the modal.

        Raises:
            RowNotFoundError: If no row has that name.
            DuplicateRowError: If several rows have that name.
        """
        with step(f"Delete category {name}"):
            row = self.find_row(name)
            logger.info("[Delete] Found row with name: %s", name)
            row.locator('button[title="Delete"]').click()
            self.confirm_delete_button.click()

            self.assert_text_hidden(name)
