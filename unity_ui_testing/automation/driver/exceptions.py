"""Custom exception types for the automation driver layer."""

from __future__ import annotations


class AutomationError(RuntimeError):
    """Base class for automation-related failures."""


class ElementNotFoundError(AutomationError, AssertionError):
    """Raised when a game object cannot be located by its locator."""


class ElementTimeoutError(ElementNotFoundError):
    """Raised when a game object did not appear within the allotted wait interval."""


class ViewStateError(AutomationError, AssertionError):
    """Raised when a view is not in the state a workflow requires."""


class DriverStartError(AutomationError):
    """Raised when a driver could not be started for the configured platform."""
