"""
================================================================================
UI Testing Framework
================================================================================

Playwright-based UI automation framework.

Components:
    - driver: Interaction primitives over one page (fallback ladders, waits,
      screenshots, verifications) and the current-session registry
    - page_base: Base page object delegating to the Driver
    - browser_manager: Browser / context / page lifecycle
    - fallback_ladder: Ordered interaction strategies with typed outcomes
    - smart_locator: Prioritized selector probes
    - settings: Typed UI configuration

Author: Automation Team
License: MIT
================================================================================
"""

from .browser_manager import BrowserManager
from .driver import Driver, DriverSetup
from .fallback_ladder import (
    ElementNotFoundError,
    FallbackLadder,
    InteractionError,
    InteractionExhaustedError,
    InteractionOutcome,
    InteractionStrategy,
)
from .page_base import BasePage
from .settings import UISettings
from .smart_locator import SmartLocator

__all__ = [
    "BasePage",
    "BrowserManager",
    "Driver",
    "DriverSetup",
    "ElementNotFoundError",
    "FallbackLadder",
    "InteractionError",
    "InteractionExhaustedError",
    "InteractionOutcome",
    "InteractionStrategy",
    "SmartLocator",
    "UISettings",
]
