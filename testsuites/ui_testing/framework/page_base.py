"""
================================================================================
Base Page Object
================================================================================

Foundation class for Page Object Model implementation.

Provides:
    - Navigation relative to BASE_URL
    - Element interactions delegated to the Driver (fallback ladders live there)
    - Verification helpers (exact text, minimum length, visibility)
    - Screenshot capture with Allure steps

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import allure
from playwright.async_api import Locator, Page

from .driver import Driver
from .fallback_ladder import InteractionOutcome
from .smart_locator import SmartLocator


class BasePage:
    """
    Base class for all page objects.

    Usage:
        class HomePage(BasePage):
            URL_PATH = "/"
            SEARCH_INPUT = "//input[@id='search-field'][1]"

            async def search(self, term: str):
                await self.type_text(self.SEARCH_INPUT, term)
    """

    # Override in subclasses
    URL_PATH: str = "/"

    def __init__(
        self,
        page: Page,
        driver: Optional[Driver] = None,
    ):
        """
        Initialize page object.

        Args:
            page: Playwright Page object
            driver: Driver for this page; the current Driver is used (and
                pointed at `page`) when omitted
        """
        self.page = page
        self.driver = driver or Driver.get_instance(page)

    @property
    def settings(self):
        return self.driver.settings

    @property
    def url(self) -> str:
        """Get full page URL."""
        return f"{self.settings.base_url.rstrip('/')}{self.URL_PATH}"

    async def navigate(self) -> None:
        """Navigate to this page."""
        with allure.step(f"Navigate to {self.url}"):
            await self.driver.navigate_to(self.url)

    async def wait_for_page_load(self) -> None:
        """Wait for DOM content plus a short settle delay."""
        await self.driver.wait_for_page_load()

    async def scroll_to_bottom(self) -> None:
        """Scroll to 80% of the page height and wait WAIT_TIME."""
        with allure.step("Scroll towards page bottom"):
            await self.driver.scroll_to_bottom()

    async def scroll_to_top(self, settle_ms: int = 1000) -> None:
        with allure.step("Scroll to top"):
            await self.driver.scroll_to_top(settle_ms)

    def get_element(self, selector: str) -> Locator:
        return self.driver.get_element(selector)

    def smart_locator(self, name: str, selectors) -> SmartLocator:
        """
        Build a SmartLocator over an ordered list of probes.

        Args:
            name: Human-readable element name for logging/Allure
            selectors: Selectors in priority order
        """
        return SmartLocator(self.page, element_name=name, selectors=selectors)

    # =========================================================================
    # Element Interactions
    # =========================================================================

    async def click(self, selector: str) -> InteractionOutcome:
        """Click the first match of `selector` (with fallbacks)."""
        with allure.step(f"Click: {selector}"):
            return await self.driver.click(selector)

    async def type_text(
        self,
        selector: str,
        text: str,
        delay: int = 100,
    ) -> InteractionOutcome:
        """Type `text` into the first match of `selector` (with fallbacks)."""
        with allure.step(f"Type into {selector}: {text}"):
            return await self.driver.type_text(selector, text, delay=delay)

    async def get_text(self, selector: str) -> str:
        return await self.driver.get_text(selector)

    async def is_visible(self, selector: str, timeout: int = 5000) -> bool:
        return await self.driver.is_visible(selector, timeout)

    async def wait_for_visible(self, selector: str, timeout: int = 10000) -> None:
        await self.driver.wait_for_visible(selector, timeout)

    async def perform_search(
        self,
        search_icon_selector: str,
        search_input_selector: str,
        search_button_selector: str,
        search_term: str,
    ) -> None:
        """Open the search box, enter `search_term` and submit."""
        with allure.step(f"Search for: {search_term}"):
            await self.driver.perform_search(
                search_icon_selector,
                search_input_selector,
                search_button_selector,
                search_term,
            )

    # =========================================================================
    # Verifications
    # =========================================================================

    async def verify_text_min_length(self, selector: str, min_length: int) -> bool:
        with allure.step(f"Verify text length of {selector} >= {min_length}"):
            return await self.driver.verify_text_min_length(selector, min_length)

    async def verify_exact_text(self, selector: str, expected_text: str) -> bool:
        with allure.step(f"Verify text of {selector} equals '{expected_text.strip()}'"):
            return await self.driver.verify_exact_text(selector, expected_text)

    # =========================================================================
    # Screenshot Utilities
    # =========================================================================

    async def take_screenshot(self, name: str, full_page: bool = False) -> Path:
        """
        Take screenshot `<SCREENSHOT_DIR>/<name>.png` and attach it to Allure.
        """
        with allure.step(f"Screenshot: {name}"):
            return await self.driver.take_screenshot(name, full_page=full_page)


__all__ = [
    "BasePage",
]
