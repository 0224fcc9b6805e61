"""
Fakes for the Playwright page surface used by the UI framework.

The fakes model just enough behaviour for unit tests: a selector maps to a
list of FakeElement, locators resolve against that map lazily (like real
Playwright locators), and every action is recorded on the page.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from playwright.async_api import TimeoutError as PlaywrightTimeoutError


@dataclass
class FakeElement:
    text: Optional[str] = ""
    visible: bool = True
    value: str = ""
    click_error: Optional[Exception] = None
    js_click_error: Optional[Exception] = None
    fill_error: Optional[Exception] = None
    js_value_error: Optional[Exception] = None
    clicks: List[str] = field(default_factory=list)

class FakeKeyboard:
    def __init__(self):
        self.pressed: List[str] = []
        self.typed: List[tuple] = []

    async def press(self, key: str) -> None:
        self.pressed.append(key)

    async def type(self, text: str, delay: Optional[float] = None) -> None:
        self.typed.append((text, delay))

class FakeLocator:
    def __init__(self, page: "FakePage", selector: str, index: Optional[int] = None):
        self.page = page
        self.selector = selector
        self.index = index

    def _elements(self) -> List[FakeElement]:
        return self.page.dom.get(self.selector, [])

    def _element(self) -> FakeElement:
        elements = self._elements()
        if not elements:
            raise PlaywrightTimeoutError(f"Timeout waiting for locator('{self.selector}')")
        return elements[self.index or 0]

    @property
    def first(self) -> "FakeLocator":
        return FakeLocator(self.page, self.selector, index=0)

    async def count(self) -> int:
        return len(self._elements())

    async def click(self, timeout: Optional[float] = None) -> None:
        element = self._element()
        if element.click_error:
            raise element.click_error
        element.clicks.append("standard")
        self.page.actions.append(("click", self.selector))

    async def clear(self, timeout: Optional[float] = None) -> None:
        element = self._element()
        if element.fill_error:
            raise element.fill_error
        element.value = ""

    async def fill(self, value: str, timeout: Optional[float] = None) -> None:
        element = self._element()
        if element.fill_error:
            raise element.fill_error
        element.value = value
        self.page.actions.append(("fill", self.selector, value))

    async def evaluate(self, expression: str, arg: Any = None, timeout: Optional[float] = None) -> Any:
        element = self._element()
        if "dispatchEvent" in expression:
            if element.js_value_error:
                raise element.js_value_error
            element.value = arg
            self.page.actions.append(("js_value", self.selector, arg))
        elif "click()" in expression:
            if element.js_click_error:
                raise element.js_click_error
            element.clicks.append("js")
            self.page.actions.append(("js_click", self.selector))
        return None

    async def text_content(self, timeout: Optional[float] = None) -> Optional[str]:
        return self._element().text

    async def all_text_contents(self) -> List[str]:
        return [element.text or "" for element in self._elements()]

    async def wait_for(self, state: str = "visible", timeout: Optional[float] = None) -> None:
        element = self._element()
        if state == "visible" and not element.visible:
            raise PlaywrightTimeoutError(f"locator('{self.selector}') not visible")

class FakePage:
    def __init__(self, dom: Optional[Dict[str, List[FakeElement]]] = None):
        self.dom: Dict[str, List[FakeElement]] = dom or {}
        self.keyboard = FakeKeyboard()
        self.url = "about:blank"
        self.actions: List[tuple] = []
        self.waits: List[int] = []
        self.load_states: List[str] = []
        self.evaluations: List[tuple] = []
        self.evaluate_results: Dict[str, Any] = {}
        self.load_state_error: Optional[Exception] = None
        self.locator_error: Optional[Exception] = None

    def locator(self, selector: str) -> FakeLocator:
        if self.locator_error:
            raise self.locator_error
        return FakeLocator(self, selector)

    async def goto(self, url: str, **kwargs: Any) -> None:
        self.url = url
        self.actions.append(("goto", url))

    async def wait_for_timeout(self, timeout: float) -> None:
        self.waits.append(timeout)

    async def wait_for_load_state(self, state: str = "load", timeout: Optional[float] = None) -> None:
        self.load_states.append(state)
        if self.load_state_error:
            raise self.load_state_error

    async def evaluate(self, expression: str, arg: Any = None) -> Any:
        self.evaluations.append((expression, arg))
        return self.evaluate_results.get(expression)

    async def screenshot(self, path: Optional[str] = None, full_page: bool = False) -> bytes:
        data = b"\x89PNG\r\n\x1a\nfake"
        if path:
            Path(path).write_bytes(data)
        self.actions.append(("screenshot", path, full_page))
        return data

