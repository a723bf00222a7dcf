"""
Lifecycle of one game test suite run.

``GameTestSuite`` starts the driver bundle, wires the Unity log listener,
builds the views, and tears everything down again. It is framework-agnostic;
``unity_ui_testing/tests/e2e/conftest.py`` binds it to pytest fixtures.
"""

from __future__ import annotations

import logging
import traceback
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional

from .app.configuration import TestConfiguration, load_test_configuration
from .automation.context import RunContext
from .automation.driver import (
    DriverBundle,
    DriverStartError,
    start_alttester_driver,
    start_appium_driver,
    start_browser_driver,
    stop_alttester_driver,
    stop_appium_driver,
    stop_browser_driver,
    subscribe_to_game_logs,
)
from .automation.reporting import Reporter
from .automation.views import GamePlayView, MainMenuView

logger = logging.getLogger(__name__)

Starter = Callable[[TestConfiguration], Any]
Stopper = Callable[[Any], None]


class SuiteState(str, Enum):
    UNINITIALIZED = "uninitialized"
    DRIVERS_STARTED = "drivers_started"
    VIEWS_READY = "views_ready"
    RUNNING = "running"
    TORN_DOWN = "torn_down"


@dataclass
class DriverHooks:
    """Start/stop callables for each driver; swapped out in unit tests."""

    start_alt: Starter = start_alttester_driver
    start_appium: Starter = start_appium_driver
    start_browser: Starter = start_browser_driver
    stop_alt: Stopper = stop_alttester_driver
    stop_appium: Stopper = stop_appium_driver
    stop_browser: Stopper = stop_browser_driver
    subscribe_logs: Callable[[Any, Callable[[Any], None]], None] = subscribe_to_game_logs


class GameTestSuite:
    """Driver, view and log-capture lifecycle shared by every test in a suite."""

    def __init__(
        self,
        config: Optional[TestConfiguration] = None,
        context: Optional[RunContext] = None,
        hooks: Optional[DriverHooks] = None,
        name: str = "suite",
    ) -> None:
        if context is None:
            context = RunContext(config=config or load_test_configuration(), suite_name=name)
        self.context = context
        self.config = context.config
        self.hooks = hooks or DriverHooks()
        self.reporter = Reporter(context)
        self.state = SuiteState.UNINITIALIZED
        self.drivers: Optional[DriverBundle] = None
        self.appium_driver: Any = None
        self.browser_driver: Any = None
        self.setup_error: Optional[BaseException] = None
        self.main_menu: Optional[MainMenuView] = None
        self.gameplay: Optional[GamePlayView] = None

    # -- one-time -----------------------------------------------------------

    def one_time_setup(self) -> None:
        self.reporter.log("OneTimeSetUp - Initializing Test Configuration and Starting All Drivers")
        try:
            self.start_all_drivers()
            self.setup_game_log_listener()
            self.initialize_views()
        except Exception as exc:
            self.setup_error = exc
            self.reporter.log(f"Exception during OneTimeSetUp: {exc}")
            self.reporter.log("Stack Trace: " + "".join(traceback.format_tb(exc.__traceback__)))

    def one_time_teardown(self) -> None:
        self.attach_game_logs()
        self.stop_all_drivers()
        self.context.reset()
        self.state = SuiteState.TORN_DOWN
        self.reporter.log("All drivers stopped and cleanup completed.")

    # -- per-test -----------------------------------------------------------

    def setup(self, test_name: str) -> None:
        if self.setup_error is not None:
            raise self.setup_error
        self.state = SuiteState.RUNNING
        self.context.current_test = test_name
        self.reporter.log(f"Starting test: {test_name}")

    def teardown(self, test_name: str, failed: bool, status: Optional[str] = None) -> None:
        outcome = status or ("failed" if failed else "passed")
        self.reporter.log(f"Test {test_name} completed with status: {outcome}")
        if failed:
            self.reporter.log("Test failed - taking screenshot for debugging")
            self.reporter.take_screenshot(f"{test_name}_Failed")

    # -- drivers ------------------------------------------------------------

    def start_all_drivers(self) -> DriverBundle:
        self.reporter.log("Setting up test environment...")
        self.reporter.log(f"Platform: {self.config.platform.value}")
        self.reporter.log(f"Running tests with Appium: {self.config.run_with_appium}")
        self.reporter.log(f"Running tests with Selenium: {self.config.run_with_selenium}")
        logger.debug("Resolved configuration: %s", self.config.as_dict())

        # Stored on start; stop_all_drivers closes them even if AltTester never connects.
        if self.config.run_with_appium:
            self.reporter.log("Setting up Appium driver...")
            self.appium_driver = self.hooks.start_appium(self.config)
        if self.config.run_with_selenium:
            self.reporter.log("Setting up Selenium driver...")
            self.browser_driver = self.hooks.start_browser(self.config)

        self.reporter.log(f"Connecting to AltTester at {self.config.server_host}:{self.config.server_port}")
        alt = self.hooks.start_alt(self.config)
        if alt is None:
            raise DriverStartError("AltTester driver could not be started.")
        self.context.alt_driver = alt
        self.reporter.log("Successfully connected to the game.")

        self.drivers = DriverBundle(alt=alt, appium=self.appium_driver, browser=self.browser_driver)
        self.state = SuiteState.DRIVERS_STARTED
        self.reporter.log("All drivers started successfully")
        return self.drivers

    def setup_game_log_listener(self) -> None:
        if self.drivers is None:
            return
        self.reporter.log("Setting up Unity log listener")
        self.hooks.subscribe_logs(self.drivers.alt, self.context.on_game_log)

    def initialize_views(self) -> None:
        self.reporter.log("Initializing view objects...")
        self.main_menu = MainMenuView(self.drivers, self.reporter)
        self.gameplay = GamePlayView(self.drivers, self.reporter)
        self.state = SuiteState.VIEWS_READY
        self.reporter.log("All view objects initialized successfully")

    def stop_all_drivers(self) -> None:
        stops = (
            ("AltTester", self.context.alt_driver, self.hooks.stop_alt),
            ("Selenium", self.browser_driver, self.hooks.stop_browser),
            ("Appium", self.appium_driver, self.hooks.stop_appium),
        )
        if all(handle is None for _, handle, _ in stops):
            self.reporter.log("No drivers to stop")
            return
        failures = 0
        for label, handle, stop in stops:
            if handle is None:
                continue
            try:
                stop(handle)
            except Exception as exc:
                failures += 1
                self.reporter.log(f"Error stopping {label} driver: {exc}")
        self.context.alt_driver = None
        self.appium_driver = None
        self.browser_driver = None
        if not failures:
            self.reporter.log("All drivers stopped successfully")

    # -- logs ---------------------------------------------------------------

    def attach_game_logs(self) -> None:
        # Entries are removed as they are processed, attached or not.
        for file_name, path in self.context.logs.drain():
            if not self.reporter.attach_file(path, f"{self.context.suite_name}-{file_name}"):
                self.reporter.log("No Unity logs found.")
