"""Host clock abstraction.

DateValue.now() asks a Clock for the current time instead of reading the
system clock directly, so tests and embedding hosts can supply their own.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol

__all__ = ["Clock", "FixedClock", "SystemClock"]


class Clock(Protocol):
    """Source of the current time as epoch seconds."""

    def now_epoch(self) -> int:
        """Return the current time as signed seconds since 1970-01-01T00:00:00Z."""


@dataclass(frozen=True, slots=True)
class SystemClock:
    """Clock reading the system wall clock in UTC."""

    def now_epoch(self) -> int:
        """Return the current UTC time, truncated to whole seconds."""
        return int(datetime.now(UTC).timestamp())


@dataclass(frozen=True, slots=True)
class FixedClock:
    """Clock that always reports the same instant.

    Example:
        >>> FixedClock(1583418600).now_epoch()
        1583418600
    """

    epoch_seconds: int

    def now_epoch(self) -> int:
        """Return the fixed instant."""
        return self.epoch_seconds
