"""Time sources for the tracker."""

from datetime import date, datetime, timedelta


class SystemClock:
    """Reads the local wall clock."""

    def now(self) -> datetime:
        return datetime.now()

    def today(self) -> date:
        return self.now().date()


class FixedClock(SystemClock):
    """A clock that only moves when told to. Used by tests and replays."""

    def __init__(self, now: datetime):
        self._now = now

    def now(self) -> datetime:
        return self._now

    def set(self, now: datetime) -> None:
        self._now = now

    def advance(self, **delta) -> datetime:
        """Move the clock forward by a timedelta given as keyword arguments."""
        self._now = self._now + timedelta(**delta)
        return self._now
