"""Locators for game objects and the outcome of looking one up."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from alttester import By


@dataclass(frozen=True, slots=True)
class Locator:
    """A (strategy, name) pair identifying a game object."""

    strategy: By
    name: str

    @classmethod
    def by_name(cls, name: str) -> Locator:
        return cls(By.NAME, name)

    def __str__(self) -> str:
        return self.name


class LookupStatus(str, Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    TIMED_OUT = "timed_out"


@dataclass(frozen=True, slots=True)
class LookupResult:
    """Outcome of resolving a locator, letting the caller decide if absence is an error."""

    locator: Locator
    status: LookupStatus
    element: Optional[Any] = None
    timeout: Optional[float] = None

    @property
    def found(self) -> bool:
        return self.status is LookupStatus.FOUND

    @classmethod
    def hit(cls, locator: Locator, element: Any, timeout: Optional[float] = None) -> LookupResult:
        return cls(locator=locator, status=LookupStatus.FOUND, element=element, timeout=timeout)

    @classmethod
    def miss(cls, locator: Locator, timeout: Optional[float] = None) -> LookupResult:
        status = LookupStatus.NOT_FOUND if timeout is None else LookupStatus.TIMED_OUT
        return cls(locator=locator, status=status, timeout=timeout)
