"""
Base view abstraction for page-object game tests.

Views wrap the AltTester driver with element-level primitives (click, tap,
waits, text access) and translate the driver's not-found and timeout signals
into descriptive test failures.
"""

from __future__ import annotations

import time
from typing import Any, Callable, Optional, TypeVar

import allure
from alttester import AltDriver
from alttester.altobject import AltObject
from alttester.exceptions import NotFoundException, WaitTimeOutException

from ..driver import DriverBundle, ElementNotFoundError, ElementTimeoutError
from ..locator import Locator, LookupResult
from ..reporting import Reporter
from ..waits import PollResult, wait_until

T = TypeVar("T")

SETTLE_DELAY = 0.5


class BaseView:
    """Common functionality for game page objects."""

    settle_delay: float = SETTLE_DELAY

    def __init__(self, drivers: DriverBundle, reporter: Reporter) -> None:
        self._drivers = drivers
        self.reporter = reporter

    @property
    def drivers(self) -> DriverBundle:
        return self._drivers

    @property
    def alt(self) -> AltDriver:
        return self._drivers.alt

    @property
    def appium(self) -> Optional[Any]:
        return self._drivers.appium

    @property
    def browser(self) -> Optional[Any]:
        return self._drivers.browser

    @allure.step("Click on object")
    def click(self, locator: Locator, timeout: float = 10.0, wait_for_click: bool = True) -> None:
        element = self.wait_for(locator, timeout)
        element.click(wait=wait_for_click)
        self._settle()

    @allure.step("Tap on object")
    def tap(self, locator: Locator, count: int = 1, timeout: float = 10.0) -> None:
        element = self.wait_for(locator, timeout)
        element.tap(count=count)
        self._settle()

    @allure.step("Wait for object")
    def wait_for(self, locator: Locator, timeout: float = 20.0, interval: float = 0.5) -> AltObject:
        self.reporter.log(f"Waiting for element {locator.name} to be present.")
        try:
            return self.alt.wait_for_object(locator.strategy, locator.name, timeout=timeout, interval=interval)
        except WaitTimeOutException as exc:
            self.reporter.log(f"Element {locator.name} was not found within {timeout} seconds", with_screenshot=True)
            raise ElementTimeoutError(
                f"Element '{locator.name}' was not found within {timeout} seconds. "
                "Please check if the element exists or if the game loaded correctly."
            ) from exc

    @allure.step("Wait for object which contains")
    def wait_for_contains(self, locator: Locator, timeout: float = 20.0) -> AltObject:
        return self.alt.wait_for_object_which_contains(locator.strategy, locator.name, timeout=timeout)

    @allure.step("Wait for object not to be present")
    def wait_for_absent(self, locator: Locator, timeout: float = 20.0) -> None:
        self.alt.wait_for_object_to_not_be_present(locator.strategy, locator.name, timeout=timeout)

    @allure.step("Set text on object")
    def set_text(self, locator: Locator, text: str, timeout: float = 10.0, submit: bool = False) -> None:
        element = self.wait_for(locator, timeout)
        element.set_text(text, submit=submit)

    @allure.step("Get text from object")
    def get_text(self, locator: Locator, timeout: float = 10.0) -> str:
        element = self.wait_for(locator, timeout)
        return element.get_text()

    @allure.step("Check if object is present")
    def is_present(self, locator: Locator) -> bool:
        return self.lookup(locator).found

    @allure.step("Find element by locator")
    def find(self, locator: Locator) -> AltObject:
        try:
            return self.alt.find_object(locator.strategy, locator.name)
        except NotFoundException as exc:
            self.reporter.log(f"Element {locator.name} not found", with_screenshot=True)
            raise ElementNotFoundError(
                f"Element '{locator.name}' was not found. "
                "Please verify the element exists in the current scene."
            ) from exc

    def lookup(self, locator: Locator, timeout: Optional[float] = None, interval: float = 0.5) -> LookupResult:
        """Resolve ``locator`` without raising.

        With no ``timeout`` the lookup is immediate; otherwise the driver polls
        until the object appears or the timeout elapses.
        """
        try:
            if timeout is None:
                element = self.alt.find_object(locator.strategy, locator.name)
            else:
                element = self.alt.wait_for_object(locator.strategy, locator.name, timeout=timeout, interval=interval)
        except (NotFoundException, WaitTimeOutException):
            return LookupResult.miss(locator, timeout)
        return LookupResult.hit(locator, element, timeout)

    @allure.step("Get current scene")
    def get_current_scene(self) -> str:
        return self.alt.get_current_scene()

    @allure.step("Load scene")
    def load_scene(self, scene_name: str) -> None:
        self.alt.load_scene(scene_name)

    @allure.step("Take screenshot")
    def take_screenshot(self, path: str) -> None:
        self.alt.get_png_screenshot(path)

    @allure.step("Wait for a specified duration")
    def wait(self, seconds: float) -> None:
        time.sleep(seconds)

    def wait_until(self, predicate: Callable[[], T], timeout: float = 10.0, interval: float = 0.5) -> PollResult[T]:
        return wait_until(predicate, timeout, interval)

    def _settle(self) -> None:
        # Crude pause so the game can react to the gesture before the next command.
        if self.settle_delay > 0:
            time.sleep(self.settle_delay)
