"""
================================================================================
Bright Horizons Home Page & Search UI Tests (Async / Playwright)
================================================================================

Live-site scenario:
  - Footer exposes at least 4 descriptive section titles
  - Header search finds the expected article as the first result

Runs only when RUN_E2E is set (network access to BASE_URL required).

================================================================================
"""

import allure
import pytest
from loguru import logger

from testsuites.ui_testing.framework.driver import Driver
from testsuites.ui_testing.pages.home_page import HomePage
from testsuites.ui_testing.pages.search_results_page import SearchResultsPage

SEARCH_TERM = "Employee Education in 2018: Strategies to Watch"

MIN_FOOTER_SECTIONS = 4
MIN_FOOTER_TITLE_LENGTH = 15
PAGE_SETTLE_MS = 3000
SCENARIO_TIMEOUT_S = 120


@allure.epic("UI Testing")
@allure.feature("Bright Horizons Website")
class TestBrightHorizons:
    """Home page footer and site search (async)."""

    @allure.story("Footer & Search")
    @allure.title("Footer sections are descriptive and search finds the article")
    @allure.severity(allure.severity_level.BLOCKER)
    @pytest.mark.P0
    @pytest.mark.e2e
    @pytest.mark.timeout(SCENARIO_TIMEOUT_S)
    @pytest.mark.asyncio
    async def test_footer_and_search(
        self,
        driver: Driver,
        home_page: HomePage,
        search_results_page: SearchResultsPage,
    ):
        """Verify footer titles, then search for an article and check the first hit."""
        try:
            with allure.step("Open home page"):
                await driver.navigate_to()
                await driver.wait_for_page_load()
                await driver.wait(PAGE_SETTLE_MS)

            with allure.step("Verify footer sections"):
                await home_page.scroll_to_bottom()

                footer_titles = await home_page.get_footer_section_titles()
                logger.info(f"Footer section titles: {footer_titles}")

                assert len(footer_titles) >= MIN_FOOTER_SECTIONS, (
                    f"Expected at least {MIN_FOOTER_SECTIONS} footer sections, "
                    f"got {len(footer_titles)}"
                )
                for title in footer_titles:
                    assert len(title) >= MIN_FOOTER_TITLE_LENGTH, (
                        f"Footer title too short: '{title}'"
                    )

                await home_page.take_screenshot("footer-sections")

            with allure.step(f"Search for '{SEARCH_TERM}'"):
                await home_page.scroll_to_top()
                await driver.wait(PAGE_SETTLE_MS)
                await home_page.perform_search(SEARCH_TERM)
                await driver.wait(PAGE_SETTLE_MS)

            with allure.step("Verify first search result"):
                is_match = await search_results_page.verify_first_search_result_text(SEARCH_TERM)
                await search_results_page.take_screenshot("final-state", full_page=True)

                assert is_match, f"First search result does not match '{SEARCH_TERM}'"

        except Exception:
            logger.error("❌ Scenario failed, capturing error state")
            await driver.capture_failure_state("error-state")
            raise
