"""Public exports for the game automation driver layer."""

from .alttester import start_alttester_driver, stop_alttester_driver, subscribe_to_game_logs
from .appium import appium_capabilities, start_appium_driver, stop_appium_driver
from .browser import chrome_options, start_browser_driver, stop_browser_driver
from .bundle import DriverBundle
from .exceptions import (
    AutomationError,
    DriverStartError,
    ElementNotFoundError,
    ElementTimeoutError,
    ViewStateError,
)

__all__ = [
    "DriverBundle",
    "start_alttester_driver",
    "stop_alttester_driver",
    "subscribe_to_game_logs",
    "appium_capabilities",
    "start_appium_driver",
    "stop_appium_driver",
    "chrome_options",
    "start_browser_driver",
    "stop_browser_driver",
    "AutomationError",
    "DriverStartError",
    "ElementNotFoundError",
    "ElementTimeoutError",
    "ViewStateError",
]
