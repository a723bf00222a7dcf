"""Execution context shared by the reporter, views and suite of one run."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from alttester import AltDriver

from ..app.configuration import TestConfiguration, load_test_configuration
from ..app.environment import Paths, build_default_paths
from .logs import GameLogRegistry


@dataclass
class RunContext:
    """Holds the active AltTester driver and the log registry for a single suite run."""

    config: TestConfiguration = field(default_factory=load_test_configuration)
    paths: Optional[Paths] = None
    alt_driver: Optional[AltDriver] = None
    current_test: Optional[str] = None
    suite_name: str = "suite"
    _logs: Optional[GameLogRegistry] = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.paths is None:
            self.paths = build_default_paths(self.config.screenshots_dir)

    @property
    def logs(self) -> GameLogRegistry:
        if self._logs is None:
            self._logs = GameLogRegistry(self.paths.screenshots_dir)
        return self._logs

    def on_game_log(self, record: Any) -> None:
        """Notification callback: append ``record`` to the current test's log file."""
        self.logs.append(self.current_test or self.suite_name, record)

    def reset(self) -> None:
        self.alt_driver = None
        self.current_test = None
        self._logs = None
