"""Hours policy engine and bank-of-hours aggregation.

Both are pure: they take explicit inputs, return fresh value objects and never
touch the clock or the database.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..core.constants import OVERTIME_TOLERANCE_MINUTES, STANDARD_JOURNEY_MINUTES
from ..employees.model import ContractProfile
from ..punches.model import DayRecord
from .factory import HoursPolicyFactory
from .model import BankOfHours, HoursResult
from .policies.base import JourneyRules

logger = logging.getLogger(__name__)


class HoursEngine:
    def __init__(
        self,
        *,
        standard_minutes: int = STANDARD_JOURNEY_MINUTES,
        tolerance_minutes: int = OVERTIME_TOLERANCE_MINUTES,
        policy_factory: HoursPolicyFactory | None = None,
    ):
        self._rules = JourneyRules(
            standard_minutes=int(standard_minutes),
            tolerance_minutes=int(tolerance_minutes),
        )
        self._factory = policy_factory or HoursPolicyFactory()

    @property
    def rules(self) -> JourneyRules:
        return self._rules

    def evaluate(
        self,
        worked_minutes: int,
        is_complete: bool,
        profile: Optional[ContractProfile],
    ) -> HoursResult:
        # Resolve the policy first so a missing profile fails even on incomplete days.
        policy = self._factory.for_profile(profile)

        if not is_complete:
            return HoursResult()

        worked = int(worked_minutes)
        if worked < 0:
            logger.warning("Negative worked minutes (%s) clamped to 0", worked)
            worked = 0

        c = policy.classify(worked_minutes=worked, rules=self._rules)
        return HoursResult(
            worked_minutes=worked,
            extra_minutes=c.extra_minutes,
            negative_minutes=c.negative_minutes,
            is_complete=True,
        )

    def evaluate_day(self, day: DayRecord, profile: Optional[ContractProfile]) -> HoursResult:
        return self.evaluate(day.worked_minutes, day.is_complete, profile)


def aggregate(results: Iterable[HoursResult]) -> BankOfHours:
    """Sum extra and negative minutes; one result per day is the caller's job."""
    total_extra = 0
    total_negative = 0
    for r in results:
        total_extra += r.extra_minutes
        total_negative += r.negative_minutes
    return BankOfHours(total_extra_minutes=total_extra, total_negative_minutes=total_negative)


_default_engine = HoursEngine()


def evaluate(worked_minutes: int, is_complete: bool, profile: Optional[ContractProfile]) -> HoursResult:
    """Evaluate with the standard 8h journey and 11 minute tolerance."""
    return _default_engine.evaluate(worked_minutes, is_complete, profile)
