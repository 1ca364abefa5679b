"""Fake Time implementation for testing."""

from datetime import UTC, datetime

from close_dup.core.time.abc import Time


class FakeTime(Time):
    """Clock frozen at a fixed instant.

    This class has NO public setup methods. All state is provided via constructor.
    """

    def __init__(self, current: datetime | None = None) -> None:
        """Create FakeTime.

        Args:
            current: Instant to report (default: 2024-01-15 10:30:00 UTC)
        """
        self._current = current or datetime(2024, 1, 15, 10, 30, 0, tzinfo=UTC)

    def now(self) -> datetime:
        return self._current
