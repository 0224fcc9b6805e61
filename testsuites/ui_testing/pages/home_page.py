"""
================================================================================
Home Page Object (Async / Playwright)
================================================================================

Bright Horizons landing page:
  - Header search (toggle -> input -> submit)
  - Footer section titles

Selectors are XPath because the site exposes no test ids.

================================================================================
"""

from __future__ import annotations

from typing import List

import allure
from loguru import logger

from testsuites.ui_testing.framework.page_base import BasePage


class HomePage(BasePage):
    """Home page object (async)."""

    URL_PATH = "/"

    # Header search
    SEARCH_ICON = (
        "//a[@id='search-toggle'] | "
        "//a[contains(@class, 'search')] | "
        "//button[contains(@class, 'search')]"
    )
    SEARCH_INPUT = "//input[@id='search-field'][1]"
    SEARCH_BUTTON = "//button[@type='submit']"

    # Footer
    FOOTER_SECTIONS = "//footer//div[contains(@class, 'col') or contains(@class, 'column')]"
    FOOTER_SECTION_TITLES = "//footer//h3 | //footer//div[contains(@class, 'title')]"

    @allure.step("Open home page")
    async def open(self) -> "HomePage":
        """Navigate to the home page and wait for it to settle."""
        await self.navigate()
        await self.wait_for_page_load()
        return self

    @allure.step("Collect footer section titles")
    async def get_footer_section_titles(self) -> List[str]:
        """
        Return footer titles in DOM order, trimmed, without empty entries.
        """
        titles = await self.get_element(self.FOOTER_SECTION_TITLES).all_text_contents()
        cleaned = [title.strip() for title in titles]
        return [title for title in cleaned if title]

    async def get_footer_section_count(self) -> int:
        """Number of footer column containers (diagnostics only)."""
        return await self.get_element(self.FOOTER_SECTIONS).count()

    @allure.step("Search site for '{search_term}'")
    async def perform_search(self, search_term: str) -> None:
        """
        Search from the header, with screenshots before and after.

        The page is scrolled back to the top first so the header search
        toggle is reachable.
        """
        await self.scroll_to_top(settle_ms=1000)

        await self.take_screenshot("before-search-attempt")

        await super().perform_search(
            self.SEARCH_ICON,
            self.SEARCH_INPUT,
            self.SEARCH_BUTTON,
            search_term,
        )

        await self.take_screenshot("after-search-completed")
        logger.info(f"Search submitted, current URL: {self.page.url}")
