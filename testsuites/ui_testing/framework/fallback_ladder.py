# ================================================================================
# Fallback Ladder Module
# ================================================================================
#
# Ordered interaction strategies for flaky UI elements.
#
# A ladder tries each strategy once, in order, and stops at the first one that
# succeeds. It is a bounded escalation (standard click -> JS click, fill ->
# JS value -> keyboard), not a retry loop with backoff.
#
# Key Features:
#   - Named strategies with a typed outcome (which strategy won, what failed)
#   - Presence guard: stops with ElementNotFoundError when nothing matches
#   - Loguru warnings whenever a fallback is used
#
# ================================================================================

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Awaitable, Callable, List, Optional, Sequence

from loguru import logger


Action = Callable[[], Awaitable[None]]
PresenceCheck = Callable[[], Awaitable[bool]]


class InteractionError(Exception):
    """Base class for interaction failures surfaced to tests."""
    pass


class ElementNotFoundError(InteractionError):
    """Raised when no element matches a selector at all."""
    pass


class InteractionExhaustedError(InteractionError):
    """
    Raised when the element exists but every strategy failed.

    Attributes:
        failures: "strategy: error" lines, one per failed attempt
    """

    def __init__(self, message: str, failures: Optional[List[str]] = None):
        super().__init__(message)
        self.failures = failures or []


@dataclass
class InteractionStrategy:
    """One rung of a ladder: a name for reporting plus the coroutine to run."""
    name: str
    action: Action


@dataclass
class InteractionOutcome:
    """
    Result of a successful ladder run.

    Attributes:
        target: What was interacted with (usually the selector)
        strategy: Name of the strategy that succeeded
        failures: Errors of the strategies tried before it
    """
    target: str
    strategy: str
    failures: List[str] = field(default_factory=list)

    @property
    def used_fallback(self) -> bool:
        return bool(self.failures)


class FallbackLadder:
    """
    Runs interaction strategies in order until one succeeds.

    Example:
        ladder = FallbackLadder(
            target="//button[@type='submit']",
            strategies=[
                InteractionStrategy("standard_click", lambda: locator.click(timeout=5000)),
                InteractionStrategy("js_click", js_click),
            ],
            is_present=lambda: element_exists(locator),
        )
        outcome = await ladder.run()
        outcome.strategy  # 'js_click' if the standard click was intercepted

    When a strategy fails, `is_present` is consulted before moving on; if the
    element is gone the ladder raises ElementNotFoundError instead of
    escalating. An ElementNotFoundError raised inside a strategy (e.g. a
    nested click ladder) propagates unchanged.
    """

    def __init__(
        self,
        target: str,
        strategies: Sequence[InteractionStrategy],
        is_present: Optional[PresenceCheck] = None,
    ):
        if not strategies:
            raise ValueError("FallbackLadder needs at least one strategy")
        self.target = target
        self.strategies = list(strategies)
        self.is_present = is_present

    async def run(self) -> InteractionOutcome:
        """
        Execute the ladder.

        Returns:
            InteractionOutcome naming the winning strategy

        Raises:
            ElementNotFoundError: Nothing matches the target
            InteractionExhaustedError: Element present, all strategies failed
        """
        failures: List[str] = []

        for strategy in self.strategies:
            if failures:
                logger.warning(
                    f"⚠️ '{self.target}': {failures[-1]} - trying {strategy.name}"
                )
            try:
                await strategy.action()
            except ElementNotFoundError:
                raise
            except Exception as e:
                failures.append(f"{strategy.name}: {_first_line(e)}")
                if not await self._element_present():
                    error_msg = f"❌ No element found for '{self.target}'"
                    logger.error(error_msg)
                    raise ElementNotFoundError(error_msg) from e
                continue

            if failures:
                logger.info(f"'{self.target}' handled by fallback: {strategy.name}")
            else:
                logger.debug(f"✅ '{self.target}' handled by {strategy.name}")
            return InteractionOutcome(
                target=self.target,
                strategy=strategy.name,
                failures=failures,
            )

        error_msg = (
            f"❌ All strategies failed for '{self.target}':\n" +
            "\n".join(f"  - {err}" for err in failures)
        )
        logger.error(error_msg)
        raise InteractionExhaustedError(error_msg, failures)

    async def _element_present(self) -> bool:
        if self.is_present is None:
            return True
        try:
            return await self.is_present()
        except Exception as e:
            logger.debug(f"Presence check failed for '{self.target}': {e}")
            return False


def _first_line(error: Exception) -> str:
    """Playwright errors carry a multi-line call log; keep the headline."""
    text = str(error).strip()
    return text.splitlines()[0] if text else type(error).__name__


__all__ = [
    "FallbackLadder",
    "InteractionStrategy",
    "InteractionOutcome",
    "InteractionError",
    "ElementNotFoundError",
    "InteractionExhaustedError",
]
