"""
================================================================================
Driver
================================================================================

The single interaction component of the UI framework.

A Driver wraps one Playwright page and exposes resilient primitives:
    - click / type_text with fallback ladders
    - text, visibility and wait helpers
    - screenshot capture into SCREENSHOT_DIR
    - composed search / scroll / page-load flows
    - boolean text verifications

Page objects receive a Driver explicitly. `Driver.create_from_env()`,
`Driver.get_instance()` and `Driver.close_browser()` additionally keep track
of the *current* Driver and its BrowserManager for code that only holds a
page.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from pathlib import Path
from typing import NamedTuple, Optional

import allure
from loguru import logger
from playwright.async_api import Browser, Locator, Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from .browser_manager import BrowserManager
from .fallback_ladder import (
    ElementNotFoundError,
    FallbackLadder,
    InteractionOutcome,
    InteractionStrategy,
)
from .settings import UISettings


# In-page scripts used by the fallback strategies
JS_CLICK = "node => { if (node instanceof HTMLElement) { node.click(); } }"

JS_SET_VALUE = """(node, value) => {
    if (node instanceof HTMLInputElement || node instanceof HTMLTextAreaElement) {
        node.value = '';
        node.value = value;
        node.dispatchEvent(new Event('input', { bubbles: true }));
        node.dispatchEvent(new Event('change', { bubbles: true }));
    }
}"""

SCROLL_TO_BOTTOM = "() => window.scrollTo(0, document.body.scrollHeight * 0.8)"
SCROLL_TO_TOP = "() => window.scrollTo(0, 0)"

# Fixed settle delays (ms)
JS_SETTLE_MS = 1000
SEARCH_STEP_PAUSE_MS = 500
SEARCH_SETTLE_MS = 2000
PAGE_LOAD_SETTLE_MS = 1000


class DriverSetup(NamedTuple):
    """What create_from_env() hands back to a test."""
    driver: "Driver"
    browser: Browser
    page: Page


class Driver:
    """
    Interaction primitives over one Playwright page.

    Usage:
        setup = await Driver.create_from_env()
        try:
            await setup.driver.navigate_to()
            await setup.driver.click("//a[@id='search-toggle']")
        finally:
            await Driver.close_browser()
    """

    _instance: Optional["Driver"] = None
    _manager: Optional[BrowserManager] = None

    def __init__(self, page: Page, settings: Optional[UISettings] = None):
        """
        Args:
            page: Playwright page to drive
            settings: UI settings; loaded from configuration when omitted
        """
        self._page = page
        self.settings = settings or UISettings.from_config()

    # =========================================================================
    # Session Lifecycle
    # =========================================================================

    @classmethod
    def get_instance(cls, page: Page) -> "Driver":
        """
        Return the current Driver, pointing it at `page`.

        Creates and registers a Driver when none exists yet.
        """
        if cls._instance is None:
            cls._instance = cls(page)
        else:
            cls._instance._page = page
        return cls._instance

    @classmethod
    async def create_from_env(cls, settings: Optional[UISettings] = None) -> DriverSetup:
        """
        Launch the configured browser and register a Driver for its page.

        The engine comes from BROWSER (chromium, firefox, webkit/safari,
        edge); window, viewport and screen are 1920x1080.

        Returns:
            DriverSetup(driver, browser, page)
        """
        if cls._manager is not None:
            logger.warning("A browser session is already open; closing it first")
            await cls.close_browser()

        manager = BrowserManager(settings)
        page = await manager.start()
        cls._manager = manager

        driver = cls.get_instance(page)
        driver.settings = manager.settings
        return DriverSetup(driver=driver, browser=manager.browser, page=page)

    @classmethod
    async def close_browser(cls) -> None:
        """Close the current browser session, if any, and forget the Driver."""
        manager, cls._manager = cls._manager, None
        cls._instance = None
        if manager is not None:
            await manager.close()

    @classmethod
    def current_manager(cls) -> Optional[BrowserManager]:
        return cls._manager

    @property
    def page(self) -> Page:
        """Get the current page."""
        return self._page

    def get_element(self, selector: str) -> Locator:
        """Get a locator for an XPath or CSS selector."""
        return self._page.locator(selector)

    # =========================================================================
    # Navigation
    # =========================================================================

    async def navigate_to(self, url: Optional[str] = None) -> None:
        """
        Navigate to `url`, defaulting to the configured BASE_URL.
        """
        target = url or self.settings.base_url
        await self._page.goto(target)
        logger.info(f"Navigated to: {target}")

    async def wait(self, ms: int) -> None:
        await self._page.wait_for_timeout(ms)

    async def wait_for_load_state(
        self,
        state: str = "domcontentloaded",
        timeout: Optional[int] = None,
    ) -> bool:
        """
        Wait for a load state; a timeout is logged, not raised.

        Returns:
            True if the state was reached in time
        """
        try:
            if timeout is None:
                await self._page.wait_for_load_state(state)
            else:
                await self._page.wait_for_load_state(state, timeout=timeout)
            return True
        except PlaywrightTimeoutError:
            logger.warning(f"Timed out waiting for load state '{state}', continuing")
            return False

    async def wait_for_page_load(self) -> None:
        """Wait for DOM content, then a short settle delay."""
        await self.wait_for_load_state("domcontentloaded")
        await self.wait(PAGE_LOAD_SETTLE_MS)

    async def scroll_to_bottom(self) -> None:
        """Scroll to 80% of the body height, then wait WAIT_TIME."""
        await self._page.evaluate(SCROLL_TO_BOTTOM)
        await self.wait(self.settings.wait_time)

    async def scroll_to_top(self, settle_ms: int = 1000) -> None:
        await self._page.evaluate(SCROLL_TO_TOP)
        await self.wait(settle_ms)

    # =========================================================================
    # Element Interactions
    # =========================================================================

    async def _element_exists(self, selector: str) -> bool:
        return await self.get_element(selector).count() > 0

    async def click(self, selector: str) -> InteractionOutcome:
        """
        Click the first element matching `selector`.

        Ladder: standard click -> in-page `node.click()`.

        Raises:
            ElementNotFoundError: Nothing matches the selector
        """
        element = self.get_element(selector).first
        timeout = self.settings.action_timeout

        async def standard_click() -> None:
            await element.click(timeout=timeout)

        async def js_click() -> None:
            await element.evaluate(JS_CLICK, timeout=timeout)
            await self.wait(JS_SETTLE_MS)

        ladder = FallbackLadder(
            target=selector,
            strategies=[
                InteractionStrategy("standard_click", standard_click),
                InteractionStrategy("js_click", js_click),
            ],
            is_present=lambda: self._element_exists(selector),
        )
        return await ladder.run()

    async def type_text(
        self,
        selector: str,
        text: str,
        delay: int = 100,
    ) -> InteractionOutcome:
        """
        Replace the value of the first input matching `selector`.

        Ladder: clear + fill -> in-page value with input/change events ->
        click, Ctrl+A, Backspace and per-key typing with `delay` ms.

        Raises:
            ElementNotFoundError: Nothing matches the selector
        """
        element = self.get_element(selector).first
        timeout = self.settings.action_timeout

        async def fill() -> None:
            await element.clear(timeout=timeout)
            await element.fill(text, timeout=timeout)

        async def js_value() -> None:
            await element.evaluate(JS_SET_VALUE, text, timeout=timeout)
            await self.wait(JS_SETTLE_MS)

        async def keyboard() -> None:
            await self.click(selector)
            await self._page.keyboard.press("Control+A")
            await self._page.keyboard.press("Backspace")
            await self._page.keyboard.type(text, delay=delay)

        ladder = FallbackLadder(
            target=selector,
            strategies=[
                InteractionStrategy("fill", fill),
                InteractionStrategy("js_value", js_value),
                InteractionStrategy("keyboard", keyboard),
            ],
            is_present=lambda: self._element_exists(selector),
        )
        return await ladder.run()

    # `type` mirrors the page-object vocabulary used by the scenario
    type = type_text

    async def get_text(self, selector: str) -> str:
        """Text content of the first match ('' when the node has none)."""
        text = await self.get_element(selector).first.text_content(
            timeout=self.settings.action_timeout
        )
        return text or ""

    async def is_visible(self, selector: str, timeout: int = 5000) -> bool:
        """
        Check whether the first match becomes visible within `timeout`.

        Never raises: any engine error counts as not visible.
        """
        try:
            await self.get_element(selector).first.wait_for(state="visible", timeout=timeout)
            return True
        except Exception:
            return False

    async def wait_for_visible(self, selector: str, timeout: int = 10000) -> None:
        """Wait for the first match to become visible."""
        await self.get_element(selector).first.wait_for(state="visible", timeout=timeout)

    # =========================================================================
    # Screenshots
    # =========================================================================

    async def take_screenshot(self, name: str, full_page: bool = False) -> Path:
        """
        Save `<SCREENSHOT_DIR>/<name>.png` and attach it to Allure.

        Returns:
            Path to saved screenshot
        """
        screenshot_dir = Path(self.settings.screenshot_dir)
        screenshot_dir.mkdir(parents=True, exist_ok=True)
        filepath = screenshot_dir / f"{name}.png"

        await self._page.screenshot(path=str(filepath), full_page=full_page)

        with open(filepath, "rb") as f:
            allure.attach(
                f.read(),
                name=name,
                attachment_type=allure.attachment_type.PNG
            )

        logger.info(f"Screenshot taken: {filepath}")
        return filepath

    async def capture_failure_state(self, name: str) -> Optional[Path]:
        """
        Full-page screenshot for a failure handler.

        Never raises, so the original failure stays the reported error.
        """
        try:
            return await self.take_screenshot(name, full_page=True)
        except Exception as e:
            logger.warning(f"Failed to capture screenshot '{name}': {e}")
            return None

    # =========================================================================
    # Composed Flows
    # =========================================================================

    async def search(
        self,
        search_icon_selector: str,
        search_input_selector: str,
        search_button_selector: str,
        search_term: str,
    ) -> None:
        """
        Search with a WAIT_TIME pause between typing and submitting.
        """
        await self.click(search_icon_selector)
        await self.type_text(search_input_selector, search_term)
        await self.wait(self.settings.wait_time)
        await self.click(search_button_selector)
        await self.wait_for_load_state("domcontentloaded")
        await self.wait(SEARCH_SETTLE_MS)

    async def perform_search(
        self,
        search_icon_selector: str,
        search_input_selector: str,
        search_button_selector: str,
        search_term: str,
    ) -> None:
        """
        Search with short fixed pauses between steps.

        Args:
            search_icon_selector: Control revealing the search box
            search_input_selector: Search input field
            search_button_selector: Submit control
            search_term: Text to search for
        """
        logger.info(f"Searching for: {search_term}")
        await self.click(search_icon_selector)
        await self.wait(SEARCH_STEP_PAUSE_MS)

        await self.type_text(search_input_selector, search_term)
        await self.wait(SEARCH_STEP_PAUSE_MS)

        await self.click(search_button_selector)

        await self.wait_for_page_load()
        await self.wait(SEARCH_SETTLE_MS)

    # =========================================================================
    # Verifications
    # =========================================================================

    async def _read_text_or_none(self, selector: str) -> Optional[str]:
        if not await self._element_exists(selector):
            logger.info(f"No element found for '{selector}'")
            return None
        return await self.get_text(selector)

    async def verify_text_min_length(self, selector: str, min_length: int) -> bool:
        """
        True if the element text has at least `min_length` characters.
        """
        text = await self._read_text_or_none(selector)
        if text is None:
            return False
        logger.info(f"Text length: {len(text)} (minimum: {min_length})")
        return len(text) >= min_length

    async def verify_exact_text(self, selector: str, expected_text: str) -> bool:
        """
        True if the trimmed text of the first match equals the trimmed expectation.
        """
        actual_text = await self._read_text_or_none(selector)
        if actual_text is None:
            return False
        logger.info(f'Actual text: "{actual_text.strip()}"')
        logger.info(f'Expected text: "{expected_text.strip()}"')
        return actual_text.strip() == expected_text.strip()


__all__ = [
    "Driver",
    "DriverSetup",
    "ElementNotFoundError",
]
