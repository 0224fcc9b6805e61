"""
================================================================================
UI Testing Pytest Configuration
================================================================================

This module configures pytest for UI tests, providing fixtures for browser
management, page objects, and test setup/teardown.

Key Features:
- One browser session per test (Driver.create_from_env / close_browser)
- Page Object fixtures
- Screenshot capture on failure, attached to Allure

================================================================================
"""

from typing import AsyncGenerator

import pytest
from playwright.async_api import Page

from autotest_tools.common import init_logger
from testsuites.ui_testing.framework.driver import Driver, DriverSetup
from testsuites.ui_testing.framework.settings import UISettings
from testsuites.ui_testing.pages.home_page import HomePage
from testsuites.ui_testing.pages.search_results_page import SearchResultsPage


# ================================================================================
# Pytest Configuration
# ================================================================================

def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "ui: mark test as UI test"
    )
    config.addinivalue_line(
        "markers", "e2e: mark test as end-to-end test against the live site"
    )
    config.addinivalue_line(
        "markers", "P0: mark test as critical priority"
    )


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """
    Keep each phase report on the item (`item.rep_setup`, `item.rep_call`)
    so fixtures can react to the test outcome during teardown.
    """
    outcome = yield
    report = outcome.get_result()
    setattr(item, f"rep_{report.when}", report)


# ================================================================================
# Browser Fixtures
# ================================================================================

@pytest.fixture(scope="session", autouse=True)
def _ui_logging() -> None:
    init_logger()


@pytest.fixture
def ui_settings() -> UISettings:
    """Settings resolved from config files and environment variables."""
    return UISettings.from_config()


@pytest.fixture
async def driver_setup(request, ui_settings: UISettings) -> AsyncGenerator[DriverSetup, None]:
    """
    Launch the configured browser for one test and close it afterwards.

    When the test body fails, a full-page `failure-<test>` screenshot is
    saved and attached to Allure before the browser goes away.
    """
    setup = await Driver.create_from_env(ui_settings)
    try:
        yield setup
    finally:
        report = getattr(request.node, "rep_call", None)
        if report is not None and report.failed:
            await setup.driver.capture_failure_state(f"failure-{request.node.name}")
        await Driver.close_browser()


@pytest.fixture
def driver(driver_setup: DriverSetup) -> Driver:
    return driver_setup.driver


@pytest.fixture
def page(driver_setup: DriverSetup) -> Page:
    return driver_setup.page


# ================================================================================
# Page Object Fixtures
# ================================================================================

@pytest.fixture
def home_page(page: Page, driver: Driver) -> HomePage:
    """
    Provides HomePage instance.
    """
    return HomePage(page, driver)


@pytest.fixture
def search_results_page(page: Page, driver: Driver) -> SearchResultsPage:
    """
    Provides SearchResultsPage instance.
    """
    return SearchResultsPage(page, driver)
