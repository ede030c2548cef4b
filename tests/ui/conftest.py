"""
Playwright fixtures for the sandbox UI tests.

This module starts the sandbox application on a free local port and points
an Environment at it, so the uiflows workflows run against a real browser
without touching the live deployment.

Key Concepts Demonstrated:
- Live server fixture for Playwright
- Per-test database reset
- Injected Environment instead of hard-coded URLs
- Logged-in page fixtures
"""

import logging
import threading
from collections.abc import Generator
from dataclasses import replace

import pytest
import requests
from flask import Flask
from playwright.sync_api import Page
from werkzeug.serving import make_server

from sandbox import create_app, db
from sandbox.models import seed_categories
from uiflows import Environment, load_environment
from uiflows.errors import WaitTimeoutError
from uiflows.pages.admin.category_page import CategoryPage
from uiflows.pages.storefront.home_page import StorefrontHomePage
from uiflows.waits import wait_until
from uiflows.workflows import login_as_admin

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Server Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture(scope="session")
def sandbox_app(tmp_path_factory) -> Flask:
    """Create the sandbox application on a throwaway SQLite file."""
    db_path = tmp_path_factory.mktemp("sandbox") / "sandbox.db"
    return create_app(
        "testing",
        overrides={"SQLALCHEMY_DATABASE_URI": f"sqlite:///{db_path}?check_same_thread=False"},
    )


def _is_healthy(url: str) -> bool:
    try:
        return requests.get(f"{url}/api/health", timeout=2).status_code == 200
    except requests.RequestException:
        return False


@pytest.fixture(scope="session")
def live_server(sandbox_app: Flask) -> Generator[str, None, None]:
    """
    Serve the sandbox from a background thread.

    Yields:
        str: Base URL of the running server.
    """
    server = make_server("127.0.0.1", 0, sandbox_app, threaded=True)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()

    base_url = f"http://127.0.0.1:{server.server_port}"
    try:
        wait_until(lambda: _is_healthy(base_url), timeout=15, message=f"sandbox at {base_url}")
    except WaitTimeoutError as exc:
        server.shutdown()
        pytest.fail(str(exc))
    logger.info("Sandbox running at %s", base_url)

    yield base_url

    server.shutdown()
    thread.join(timeout=5)


@pytest.fixture(autouse=True)
def clean_db(sandbox_app: Flask) -> None:
    """Restore the seeded categories before each test."""
    with sandbox_app.app_context():
        db.drop_all()
        db.create_all()
        seed_categories(sandbox_app.config["SEED"])


# -----------------------------------------------------------------------------
# Environment Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture(scope="session")
def env(live_server: str, sandbox_app: Flask) -> Environment:
    """Environment pointing at the running sandbox with its admin credentials."""
    return replace(
        load_environment("sandbox").for_base_url(live_server),
        username=sandbox_app.config["ADMIN_USERNAME"],
        password=sandbox_app.config["ADMIN_PASSWORD"],
    )


# -----------------------------------------------------------------------------
# Page Object Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def admin_page(page: Page, env: Environment) -> Page:
    """A page already logged in to the admin panel."""
    login_as_admin(page, env)
    return page


@pytest.fixture
def category_page(admin_page: Page, env: Environment) -> CategoryPage:
    """The Categories page, opened from the sidebar."""
    return CategoryPage(admin_page, env).navigate()


@pytest.fixture
def home_page(page: Page, env: Environment) -> StorefrontHomePage:
    """The storefront home page, loaded."""
    return StorefrontHomePage(page, env).navigate()
