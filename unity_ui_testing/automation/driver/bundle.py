"""Capability bundle handed to every view."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from alttester import AltDriver


@dataclass(frozen=True, slots=True)
class DriverBundle:
    """The AltTester driver plus the optional Appium and Selenium sessions.

    ``alt`` is mandatory for the bundle's whole lifetime. The optional handles
    are decided once at suite start from the configuration flags.
    """

    alt: AltDriver
    appium: Optional[Any] = None
    browser: Optional[Any] = None

    def __post_init__(self) -> None:
        if self.alt is None:
            raise ValueError("DriverBundle requires an AltTester driver.")

    @property
    def has_appium(self) -> bool:
        return self.appium is not None

    @property
    def has_browser(self) -> bool:
        return self.browser is not None
