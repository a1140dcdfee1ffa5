from __future__ import annotations

from .base import Classification, HoursPolicy, JourneyRules


class HourlyPolicy(HoursPolicy):
    """CLT paid by the hour: any minute past the journey is extra, never negative."""

    def classify(self, *, worked_minutes: int, rules: JourneyRules) -> Classification:
        return Classification(extra_minutes=max(worked_minutes - rules.standard_minutes, 0))
