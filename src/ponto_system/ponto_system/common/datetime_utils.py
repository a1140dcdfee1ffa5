from __future__ import annotations

from datetime import date, datetime, time

from ..core.constants import REFERENCE_DATE_ISO, TIME_FORMAT

_REFERENCE_DATE = date.fromisoformat(REFERENCE_DATE_ISO)


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def format_hhmm(value: datetime | time) -> str:
    return value.strftime(TIME_FORMAT)


def minutes_between(start_hhmm: str, end_hhmm: str) -> int:
    """Minutes from start to end, both given as HH:MM times of day.

    Both times are anchored to the same reference date, so the result is
    negative when ``end`` is earlier in the day than ``start``.
    """
    start = datetime.combine(_REFERENCE_DATE, datetime.strptime(start_hhmm, TIME_FORMAT).time())
    end = datetime.combine(_REFERENCE_DATE, datetime.strptime(end_hhmm, TIME_FORMAT).time())
    return int((end - start).total_seconds() // 60)


def format_minutes_to_hours(minutes: int) -> str:
    """Format minutes as HH:MM, with a leading '-' for negative values."""
    sign = "-" if minutes < 0 else ""
    total = abs(int(minutes))
    return f"{sign}{total // 60:02d}:{total % 60:02d}"


def format_worked_time(minutes: int) -> str:
    """Long form shown next to today's punches, e.g. '8h 05min'."""
    total = int(minutes)
    return f"{total // 60}h {total % 60:02d}min"
