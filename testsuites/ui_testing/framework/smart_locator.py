"""
================================================================================
Smart Locator with Ordered Selector Probes
================================================================================

Element location with:
    - An ordered list of candidate selectors per element
    - First *visible* match wins
    - Health records showing which probe matched (maintenance insight)

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from loguru import logger
from playwright.async_api import Locator, Page

from .fallback_ladder import ElementNotFoundError


@dataclass
class LocatorHealth:
    """
    Tracks which probe resolved an element.

    Attributes:
        element_name: Human-readable element name
        primary_selector: The preferred (first) selector
        matched_selector: The selector that produced a visible element
        probe_index: Position of the matched selector in the probe list
    """
    element_name: str
    primary_selector: str
    matched_selector: str
    probe_index: int

    @property
    def used_fallback(self) -> bool:
        return self.probe_index > 0


class SmartLocator:
    """
    Resolve one logical element from a prioritized list of selectors.

    Each probe is evaluated in order: the selector must match at least one
    element and its first match must become visible within `timeout`. The
    first probe that satisfies both wins.

    Usage:
        >>> first_result = SmartLocator(
        ...     page,
        ...     element_name="first search result",
        ...     selectors=["//main//h3//a", "//h3//a"],
        ... )
        >>> locator = await first_result.find()      # None when nothing matches
        >>> locator = await first_result.locate()    # raises instead
    """

    def __init__(
        self,
        page: Page,
        element_name: str,
        selectors: Sequence[str],
    ):
        """
        Args:
            page: Playwright Page object
            element_name: Human-readable element name (logging / reporting)
            selectors: Probes in priority order
        """
        if not selectors:
            raise ValueError(f"No selectors defined for element: {element_name}")
        self.page = page
        self.element_name = element_name
        self.selectors: List[str] = list(selectors)
        self._health_records: List[LocatorHealth] = []

    async def find(self, timeout: int = 2000) -> Optional[Locator]:
        """
        Return the first visible match across the probes, or None.

        Args:
            timeout: Visibility budget per probe in milliseconds
        """
        for index, selector in enumerate(self.selectors):
            try:
                elements = self.page.locator(selector)
                if await elements.count() == 0:
                    continue
                candidate = elements.first
                await candidate.wait_for(state="visible", timeout=timeout)
            except Exception as e:
                logger.debug(
                    f"Probe {index + 1}/{len(self.selectors)} for "
                    f"'{self.element_name}' missed: {selector} -> {str(e)[:50]}"
                )
                continue

            health = LocatorHealth(
                element_name=self.element_name,
                primary_selector=self.selectors[0],
                matched_selector=selector,
                probe_index=index,
            )
            self._health_records.append(health)

            if health.used_fallback:
                logger.warning(
                    f"⚠️ Element '{self.element_name}' used probe "
                    f"{index + 1}: {selector}"
                )
            else:
                logger.debug(f"✅ Element '{self.element_name}' found: {selector}")
            return candidate

        return None

    async def locate(self, timeout: int = 2000) -> Locator:
        """
        Like find(), but raise when no probe matches.

        Raises:
            ElementNotFoundError: When all probes fail
        """
        locator = await self.find(timeout=timeout)
        if locator is None:
            error_msg = (
                f"❌ All locators failed for '{self.element_name}':\n" +
                "\n".join(f"  - {selector}" for selector in self.selectors)
            )
            logger.error(error_msg)
            raise ElementNotFoundError(error_msg)
        return locator

    @property
    def last_match(self) -> Optional[LocatorHealth]:
        return self._health_records[-1] if self._health_records else None

    def get_health_report(self) -> str:
        """
        Generate locator health report.

        Lists resolutions that skipped the primary selector (candidates for
        updating the probe order).
        """
        if not self._health_records:
            return f"❌ No probe has matched '{self.element_name}' yet."

        fallbacks = [h for h in self._health_records if h.used_fallback]
        if not fallbacks:
            return "✅ All elements used primary locators. No maintenance needed."

        report_lines = [
            "⚠️ Locator Health Report - Fallbacks Used:",
            "",
            "The following elements used fallback locators.",
            "Consider updating the primary selectors:",
            "",
        ]

        for health in fallbacks:
            report_lines.extend([
                f"  [{health.element_name}]",
                f"    Failed primary: {health.primary_selector}",
                f"    Used: probe {health.probe_index + 1} -> {health.matched_selector}",
                "",
            ])

        return "\n".join(report_lines)


__all__ = [
    "SmartLocator",
    "ElementNotFoundError",
    "LocatorHealth",
]
