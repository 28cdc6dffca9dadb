"""
Datetime utilities.

Provides timezone-aware datetime functions and the engine clock.
"""

import time
from datetime import UTC, datetime
from typing import Protocol


def utc_now() -> datetime:
    """
    Get current UTC datetime with timezone info.

    Returns:
        Current datetime in UTC with timezone awareness
    """
    return datetime.now(UTC)


def from_timestamp(seconds: int | None) -> datetime | None:
    """
    Convert unix seconds to an aware UTC datetime.

    Args:
        seconds: Unix timestamp or None

    Returns:
        Datetime in UTC, or None when no timestamp is given
    """
    if seconds is None:
        return None
    return datetime.fromtimestamp(seconds, UTC)


class Clock(Protocol):
    """Source of the current time in whole unix seconds."""

    def now(self) -> int:
        ...


class SystemClock:
    """Wall-clock time."""

    def now(self) -> int:
        return int(time.time())


class ManualClock:
    """
    Clock that only moves when told to.

    Used by tests and simulations to step through cooldown windows.
    Time never goes backwards.
    """

    def __init__(self, start: int = 1_700_000_000) -> None:
        if start < 0:
            raise ValueError(f"Clock start must be non-negative, got {start}")
        self._now = start

    def now(self) -> int:
        return self._now

    def advance(self, seconds: int) -> int:
        """
        Move the clock forward.

        Args:
            seconds: Non-negative number of seconds

        Returns:
            New current time
        """
        if seconds < 0:
            raise ValueError(f"Clock cannot move backwards: {seconds}")
        self._now += seconds
        return self._now
