"""Condition polling used in place of fixed sleeps."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass
class PollResult(Generic[T]):
    satisfied: bool
    value: Optional[T]
    attempts: int
    elapsed: float
    last_error: Optional[Exception] = None

    def __bool__(self) -> bool:
        return self.satisfied


def wait_until(
    predicate: Callable[[], T],
    timeout: float,
    interval: float = 0.2,
    *,
    clock: Callable[[], float] = time.monotonic,
    sleep: Callable[[float], None] = time.sleep,
) -> PollResult[T]:
    """
    Call ``predicate`` until it returns a truthy value or ``timeout`` elapses.

    The predicate is always evaluated at least once. Exceptions raised by it
    count as a falsy attempt and the latest one is kept on the result.
    """
    start = clock()
    attempts = 0
    last_error: Optional[Exception] = None
    while True:
        attempts += 1
        try:
            value = predicate()
        except Exception as exc:
            last_error = exc
        else:
            if value:
                return PollResult(True, value, attempts, clock() - start, last_error)
        remaining = timeout - (clock() - start)
        if remaining <= 0:
            return PollResult(False, None, attempts, clock() - start, last_error)
        sleep(min(interval, remaining))
