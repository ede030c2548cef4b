"""
Shared pytest fixtures for the uiflows test suites.

This module contains fixtures that are shared across the unit, ui and e2e
suites: fixture data, generated names, a throwaway Environment, the
browser fixtures used by the ui and e2e suites and the screenshot-on-failure
hook.

Key Concepts Demonstrated:
- Fixture scopes (function, session)
- Static fixture data loaded once per session
- Test data factories
- Screenshot capture on failure
- Browser context per test
"""

import json
import logging
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest
from faker import Faker
from playwright.sync_api import Browser, BrowserContext, BrowserType, Page, expect
from playwright.sync_api import Error as PlaywrightError

from uiflows import Environment, generate_readable_name

logger = logging.getLogger(__name__)

FIXTURES_DIR = Path(__file__).parent / "fixtures"

# Initialize Faker for incidental test data
fake = Faker()
Faker.seed(2024)


# -----------------------------------------------------------------------------
# Data Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture(scope="session")
def category_data() -> dict[str, Any]:
    """
    Load the named category records used by the category scenarios.

    Returns:
        Mapping with ``validCategory``, ``productCategory`` and
        ``duplicateCategory`` records.
    """
    with open(FIXTURES_DIR / "category-data.json", encoding="utf-8") as handle:
        return json.load(handle)


@pytest.fixture
def name_factory() -> Callable[[str], str]:
    """
    Factory fixture for unique, readable category names.

    Example:
        def test_something(name_factory):
            name = name_factory("chicken")  # chicken-QWERTY
    """
    return generate_readable_name


@pytest.fixture
def fake_env(tmp_path) -> Environment:
    """An Environment pointing at unreachable hosts, for unit tests."""
    return Environment(
        login_url="https://admin.example.test/login",
        home_url="https://shop.example.test/home",
        username=fake.msisdn()[:10],
        password=fake.password(),
        action_timeout_ms=1000,
        expect_timeout_ms=1000,
        artifacts_dir=str(tmp_path / "artifacts"),
    )


# -----------------------------------------------------------------------------
# Screenshot on Failure
# -----------------------------------------------------------------------------

@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """
    Capture screenshot on test failure.

    Applies to any test that received a Playwright ``page`` fixture.
    """
    outcome = yield
    report = outcome.get_result()

    if report.when == "call" and report.failed:
        page = item.funcargs.get("page")
        env = item.funcargs.get("env")
        if page is None or env is None:
            return

        screenshot_dir = Path(env.artifacts_dir) / "screenshots"
        screenshot_dir.mkdir(parents=True, exist_ok=True)
        test_name = item.name.replace("/", "_").replace("::", "_")
        screenshot_path = screenshot_dir / f"{test_name}.png"

        try:
            page.screenshot(path=str(screenshot_path))
            logger.info("Screenshot saved: %s", screenshot_path)
        except Exception as e:
            logger.warning("Failed to capture screenshot: %s", e)


# -----------------------------------------------------------------------------
# Browser Fixtures (ui and e2e suites)
# -----------------------------------------------------------------------------

@pytest.fixture(scope="session")
def browser(browser_type: BrowserType, browser_type_launch_args: dict) -> Generator[Browser, None, None]:
    """
    Launch the browser once per session.

    Replaces pytest-playwright's fixture so that a machine without an
    installed browser skips the browser suites instead of erroring.
    """
    try:
        launched = browser_type.launch(**browser_type_launch_args)
    except PlaywrightError as exc:
        pytest.skip(f"{browser_type.name} could not be launched: {exc}")
    yield launched
    launched.close()


@pytest.fixture(scope="session")
def browser_context_args(env: Environment) -> dict:
    """
    Configure browser context options.

    Returns:
        dict: Browser context configuration.
    """
    return {
        "viewport": env.viewport,
        "ignore_https_errors": True,
    }


@pytest.fixture(scope="function")
def context(browser: Browser, browser_context_args: dict, env: Environment) -> Generator[BrowserContext, None, None]:
    """
    Create a fresh browser context for each test.

    A new context ensures test isolation - cookies, localStorage,
    and session data are not shared between tests.
    """
    context = browser.new_context(**browser_context_args)
    context.set_default_timeout(env.action_timeout_ms)
    context.set_default_navigation_timeout(env.action_timeout_ms)
    expect.set_options(timeout=env.expect_timeout_ms)
    yield context
    context.close()


@pytest.fixture(scope="function")
def page(context: BrowserContext) -> Generator[Page, None, None]:
    """Create a new page (tab) for each test."""
    page = context.new_page()
    yield page
    page.close()
