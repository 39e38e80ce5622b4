"""Unit tests for the system clock."""

from datetime import UTC, datetime, timedelta

import pytest

from kellum_library.auth import SESSION_DURATION, SystemClock


@pytest.mark.unit
class TestSystemClock:
    """Tests for SystemClock."""

    def test_session_duration_is_two_hours(self) -> None:
        """Sessions last exactly two hours."""
        assert timedelta(hours=2) == SESSION_DURATION

    def test_now_is_aware_utc(self) -> None:
        """now() returns a timezone-aware UTC instant."""
        now = SystemClock().now()

        assert now.tzinfo is not None
        assert now.utcoffset() == timedelta(0)

    def test_now_tracks_wall_clock(self) -> None:
        """now() is close to the wall clock."""
        before = datetime.now(UTC)
        now = SystemClock().now()
        after = datetime.now(UTC)

        assert before <= now <= after

    def test_expiry_from(self) -> None:
        """Expiry is now plus the session duration."""
        now = datetime(2025, 12, 31, 23, 0, tzinfo=UTC)

        assert SystemClock().expiry_from(now) == datetime(2026, 1, 1, 1, 0, tzinfo=UTC)
