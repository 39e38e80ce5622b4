"""Time source for session issuance and expiry checks."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Protocol

SESSION_DURATION = timedelta(hours=2)


class Clock(Protocol):
    """Interface for anything that can tell the current time."""

    def now(self) -> datetime:
        """Current wall-clock time, timezone-aware UTC."""
        ...

    def expiry_from(self, now: datetime) -> datetime:
        """Absolute expiry for a session issued at `now`."""
        ...


class SystemClock:
    """Clock backed by the system wall clock."""

    def now(self) -> datetime:
        return datetime.now(UTC)

    def expiry_from(self, now: datetime) -> datetime:
        return now + SESSION_DURATION
