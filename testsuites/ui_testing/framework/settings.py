"""
================================================================================
UI Settings
================================================================================

Typed view over the `ui.*` configuration section.

Values come from `autotest_tools.common.get_config`, which merges defaults,
config/config.yaml, `.env` and environment variables (BROWSER, BASE_URL,
WAIT_TIME, SCREENSHOT_DIR, HEADLESS, CI).

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from loguru import logger

from autotest_tools.common import get_config


DEFAULT_BASE_URL = "https://www.brighthorizons.com"

# Accepted BROWSER values and the engine each one launches
SUPPORTED_BROWSERS = {
    "chromium": "chromium",
    "chrome": "chromium",
    "firefox": "firefox",
    "webkit": "webkit",
    "safari": "webkit",
    "edge": "edge",
}


@dataclass
class UISettings:
    """
    Runtime settings for a UI session.

    Attributes:
        browser: Normalised engine name - 'chromium', 'firefox', 'webkit' or 'edge'
        base_url: Default navigation target
        wait_time: Settle delay (ms) used by search and scroll flows
        screenshot_dir: Directory receiving `<name>.png` captures
        headless: Run without a visible window
        action_timeout: Budget (ms) for first-tier click/fill attempts
        window_width / window_height: Window, viewport and screen size
        search_result_selectors: Optional override of the result probes
    """
    browser: str = "chromium"
    base_url: str = DEFAULT_BASE_URL
    wait_time: int = 5000
    screenshot_dir: Path = Path("./test-results")
    headless: bool = False
    action_timeout: int = 5000
    window_width: int = 1920
    window_height: int = 1080
    search_result_selectors: Optional[List[str]] = field(default=None)

    def __post_init__(self) -> None:
        self.browser = normalize_browser(self.browser)
        self.screenshot_dir = Path(self.screenshot_dir)

    @classmethod
    def from_config(cls) -> "UISettings":
        """Build settings from the global configuration."""
        headless = get_config("ui.headless", None)
        if headless is None:
            # Headed locally, headless on CI runners
            headless = bool(get_config("ci", False))

        return cls(
            browser=get_config("ui.browser", "chromium"),
            base_url=get_config("ui.base_url", DEFAULT_BASE_URL),
            wait_time=int(get_config("ui.wait_time", 5000)),
            screenshot_dir=Path(get_config("ui.screenshot_dir", "./test-results")),
            headless=bool(headless),
            action_timeout=int(get_config("ui.action_timeout", 5000)),
            window_width=int(get_config("ui.window.width", 1920)),
            window_height=int(get_config("ui.window.height", 1080)),
            search_result_selectors=get_config("ui.search_result_selectors", None),
        )


def normalize_browser(name: str) -> str:
    """
    Map a BROWSER value onto one of the four engine variants.

    Unknown names fall back to chromium.
    """
    key = (name or "chromium").strip().lower()
    if key not in SUPPORTED_BROWSERS:
        logger.warning(
            f"Unsupported browser '{name}', falling back to chromium. "
            f"Expected one of: {', '.join(sorted(SUPPORTED_BROWSERS))}"
        )
        return "chromium"
    return SUPPORTED_BROWSERS[key]


__all__ = [
    "UISettings",
    "SUPPORTED_BROWSERS",
    "DEFAULT_BASE_URL",
    "normalize_browser",
]
