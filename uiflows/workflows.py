"""
Function-style entry points for the admin workflows.

Each function builds the page objects it needs over the caller's page handle
so suites can compose workflows without holding page objects themselves.
"""

from __future__ import annotations

from collections.abc import Sequence

from playwright.sync_api import Page

from uiflows.config import Environment
from uiflows.pages.admin.category_form import CategoryForm
from uiflows.pages.admin.category_page import CategoryPage
from uiflows.pages.admin.login_page import LoginPage
from uiflows.pages.admin.sidebar import SidebarMenu


def login_as_admin(page: Page, env: Environment) -> None:
    """Log in with the environment's admin credentials and wait for the landing view."""
    login_page = LoginPage(page, env)
    login_page.login()
    login_page.assert_logged_in()


def validate_left_sidebar_menu(page: Page, env: Environment) -> None:
    SidebarMenu(page, env).validate()


def navigate_to_category_page(page: Page, env: Environment) -> CategoryPage:
    return CategoryPage(page, env).navigate()


def validate_category_page_content(page: Page, env: Environment) -> None:
    CategoryPage(page, env).validate_column_headers()


def validate_category_table_rows(page: Page, env: Environment) -> list[dict[str, str]]:
    return CategoryPage(page, env).read_table_rows()


def validate_create_category_form(page: Page, env: Environment) -> None:
    CategoryForm(page, env).validate_form_ui()


def open_create_category_form(page: Page, env: Environment) -> None:
    CategoryForm(page, env).open()


def select_image_through_file_manager(page: Page, env: Environment, path_segments: Sequence[str]) -> None:
    CategoryForm(page, env).select_image(path_segments)


def create_category(
    page: Page,
    env: Environment,
    name: str,
    slug: str,
    image_path: Sequence[str],
    order: int | None = None,
) -> None:
    """Open the create form, choose the image and fill the fields (no submit)."""
    CategoryForm(page, env).create(name, slug, image_path, order)


def submit_create_category_form(page: Page, env: Environment) -> None:
    CategoryForm(page, env).submit()


def validate_create_category_errors(page: Page, env: Environment) -> None:
    """Run the Name, Slug, Image required-field sequence on an open form."""
    CategoryForm(page, env).validate_required_field_errors()


def edit_category_by_name(page: Page, env: Environment, name: str, new_name: str) -> None:
    CategoryPage(page, env).edit_category_by_name(name, new_name)


def delete_category_by_name(page: Page, env: Environment, name: str) -> None:
    CategoryPage(page, env).delete_category_by_name(name)
