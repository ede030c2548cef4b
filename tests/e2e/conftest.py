"""
Fixtures for the live end-to-end suite.

The suite runs against the deployed admin panel and storefront. It is
skipped when credentials are not configured (UIFLOWS_USERNAME and
UIFLOWS_PASSWORD) or the login page cannot be reached.
"""

from __future__ import annotations

import logging

import pytest
import requests
from playwright.sync_api import Page

from uiflows import Environment, load_environment
from uiflows.pages.admin.category_page import CategoryPage
from uiflows.pages.storefront.home_page import StorefrontHomePage
from uiflows.workflows import login_as_admin, navigate_to_category_page

logger = logging.getLogger(__name__)


def _reachable(url: str) -> bool:
    try:
        return requests.get(url, timeout=10).status_code < 500
    except requests.RequestException as exc:
        logger.warning("%s is not reachable: %s", url, exc)
        return False


@pytest.fixture(scope="session")
def env() -> Environment:
    """Environment for the live deployment, or skip the suite."""
    environment = load_environment("live")
    if not environment.has_credentials:
        pytest.skip("Live credentials are not configured; set UIFLOWS_USERNAME and UIFLOWS_PASSWORD")
    if not _reachable(environment.login_url):
        pytest.skip(f"Live admin panel at {environment.login_url} is not reachable")
    return environment


@pytest.fixture
def category_page(page: Page, env: Environment) -> CategoryPage:
    """Log in and open the Categories page."""
    login_as_admin(page, env)
    return navigate_to_category_page(page, env)


@pytest.fixture
def home_page(page: Page, env: Environment) -> StorefrontHomePage:
    if not _reachable(env.home_url):
        pytest.skip(f"Live storefront at {env.home_url} is not reachable")
    return StorefrontHomePage(page, env).navigate()
