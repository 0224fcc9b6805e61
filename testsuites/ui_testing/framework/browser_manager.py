"""
================================================================================
Browser Manager
================================================================================

Browser lifecycle management for UI automation.

One BrowserManager owns one Session: Playwright driver, browser, a single
context and a single page.

Features:
    - Engine selection from settings (chromium, firefox, webkit, edge)
    - Fixed window / viewport / screen size
    - Idempotent close

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from loguru import logger
from playwright.async_api import (
    async_playwright,
    Browser,
    BrowserContext,
    BrowserType,
    Page,
    Playwright,
)

from .settings import UISettings


class BrowserManager:
    """
    Manages the browser Session for a UI test run.

    Usage:
        async with BrowserManager(settings) as manager:
            await manager.page.goto("https://www.brighthorizons.com")

        # Or explicitly
        manager = BrowserManager(settings)
        page = await manager.start()
        ...
        await manager.close()
    """

    # Chromium-family launch args; Firefox and WebKit reject them
    CHROMIUM_ARGS_TEMPLATE: List[str] = [
        "--window-size={width},{height}",
        "--start-maximized",
    ]

    def __init__(self, settings: Optional[UISettings] = None):
        """
        Initialize browser manager.

        Args:
            settings: UI settings; loaded from configuration when omitted
        """
        self.settings = settings or UISettings.from_config()

        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._context: Optional[BrowserContext] = None
        self._page: Optional[Page] = None

    async def __aenter__(self) -> "BrowserManager":
        """Async context manager entry - start browser."""
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit - close browser."""
        await self.close()

    def launch_options(self) -> Dict[str, Any]:
        """Build keyword arguments for BrowserType.launch()."""
        options: Dict[str, Any] = {"headless": self.settings.headless}

        if self.settings.browser in ("chromium", "edge"):
            options["args"] = [
                arg.format(
                    width=self.settings.window_width,
                    height=self.settings.window_height,
                )
                for arg in self.CHROMIUM_ARGS_TEMPLATE
            ]
        if self.settings.browser == "edge":
            options["channel"] = "msedge"

        return options

    def context_options(self) -> Dict[str, Any]:
        """Build keyword arguments for Browser.new_context()."""
        size = {
            "width": self.settings.window_width,
            "height": self.settings.window_height,
        }
        return {"viewport": dict(size), "screen": dict(size)}

    def _launcher(self, playwright: Playwright) -> BrowserType:
        if self.settings.browser == "firefox":
            return playwright.firefox
        if self.settings.browser == "webkit":
            return playwright.webkit
        # chromium and edge (msedge channel)
        return playwright.chromium

    async def start(self) -> Page:
        """
        Start Playwright, launch the browser and open the Session page.

        Returns:
            The Session's page
        """
        if self._page is not None:
            return self._page

        self._playwright = await async_playwright().start()
        try:
            launcher = self._launcher(self._playwright)
            self._browser = await launcher.launch(**self.launch_options())
            self._context = await self._browser.new_context(**self.context_options())
            self._page = await self._context.new_page()
        except Exception:
            await self.close()
            raise

        logger.info(
            f"Browser started: {self.settings.browser} "
            f"(headless={self.settings.headless})"
        )
        return self._page

    async def close(self) -> None:
        """Close context, browser and Playwright. Safe to call repeatedly."""
        context, self._context = self._context, None
        browser, self._browser = self._browser, None
        playwright, self._playwright = self._playwright, None
        self._page = None

        if context is not None:
            try:
                await context.close()
            except Exception as e:
                logger.debug(f"Context already closed: {e}")

        try:
            if browser is not None:
                await browser.close()
        finally:
            if playwright is not None:
                await playwright.stop()
                logger.debug("Browser closed")

    @property
    def browser(self) -> Optional[Browser]:
        """Get browser instance."""
        return self._browser

    @property
    def context(self) -> Optional[BrowserContext]:
        """Get the Session's browser context."""
        return self._context

    @property
    def page(self) -> Optional[Page]:
        """Get the Session's page."""
        return self._page

    @property
    def is_open(self) -> bool:
        return self._browser is not None


__all__ = [
    "BrowserManager",
]
