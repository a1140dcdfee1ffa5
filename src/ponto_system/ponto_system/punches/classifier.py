"""Punch classifier.

Turns the punches of one calendar day into a :class:`DayRecord`: each punch
goes into its slot of the breakdown and the worked minutes are summed from
the complete intervals (entry -> lunch out, lunch in -> exit, or entry -> exit
for a continuous shift).
"""

from __future__ import annotations

import logging
from collections import defaultdict
from datetime import date
from typing import Iterable, Optional, Sequence

from ..common.datetime_utils import format_hhmm, minutes_between
from ..core.enums import DayStatus, PunchKind, PUNCH_SEQUENCE
from .model import DayBreakdown, DayRecord, PunchEvent

logger = logging.getLogger(__name__)


def _interval(start: Optional[str], end: Optional[str]) -> tuple[int, bool]:
    """Return (minutes, clamped) for a pair of HH:MM times."""
    if start is None or end is None:
        return 0, False
    minutes = minutes_between(start, end)
    if minutes < 0:
        logger.warning("Out-of-order punches %s -> %s, counting 0 minutes", start, end)
        return 0, True
    return minutes, False


def classify_day(events: Iterable[PunchEvent]) -> DayRecord:
    ordered = tuple(sorted(events, key=lambda e: e.timestamp))

    # Later punches of the same kind overwrite earlier ones.
    slots: dict[PunchKind, str] = {}
    for event in ordered:
        slots[event.kind] = format_hhmm(event.timestamp)

    breakdown = DayBreakdown(
        entry=slots.get(PunchKind.ENTRY),
        lunch_out=slots.get(PunchKind.LUNCH_OUT),
        lunch_in=slots.get(PunchKind.LUNCH_IN),
        exit=slots.get(PunchKind.EXIT),
    )

    if breakdown.lunch_out is None and breakdown.lunch_in is None:
        worked, anomaly = _interval(breakdown.entry, breakdown.exit)
    else:
        morning, morning_clamped = _interval(breakdown.entry, breakdown.lunch_out)
        afternoon, afternoon_clamped = _interval(breakdown.lunch_in, breakdown.exit)
        worked = morning + afternoon
        anomaly = morning_clamped or afternoon_clamped

    if not ordered:
        status = DayStatus.MISSING
    elif all(k in slots for k in PUNCH_SEQUENCE):
        status = DayStatus.COMPLETE
    else:
        status = DayStatus.INCOMPLETE

    return DayRecord(
        events=ordered,
        breakdown=breakdown,
        worked_minutes=worked,
        status=status,
        anomaly=anomaly,
    )


def next_expected_kind(events: Sequence[PunchEvent]) -> Optional[PunchKind]:
    """First kind missing from entry -> lunch_out -> lunch_in -> exit, or None when the day is done."""
    present = {e.kind for e in events}
    for kind in PUNCH_SEQUENCE:
        if kind not in present:
            return kind
    return None


def group_by_date(events: Iterable[PunchEvent]) -> dict[date, list[PunchEvent]]:
    grouped: dict[date, list[PunchEvent]] = defaultdict(list)
    for event in events:
        grouped[event.record_date].append(event)
    return dict(grouped)
