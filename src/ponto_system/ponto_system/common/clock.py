from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Protocol

from .datetime_utils import now_local


class Clock(Protocol):
    """Source of "now" for services.

    Services receive a clock through their constructor instead of calling
    ``datetime.now()`` so they can be tested with fixed timestamps.
    """

    def now(self) -> datetime:
        raise NotImplementedError

    def today(self) -> date:
        raise NotImplementedError


class SystemClock:
    def now(self) -> datetime:
        return now_local()

    def today(self) -> date:
        return self.now().date()


@dataclass
class FixedClock:
    """Clock frozen at a given instant (tests, replays)."""

    current: datetime

    def now(self) -> datetime:
        return self.current

    def today(self) -> date:
        return self.current.date()
