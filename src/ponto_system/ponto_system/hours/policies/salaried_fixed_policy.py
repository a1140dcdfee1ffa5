from __future__ import annotations

from .base import Classification, HoursPolicy, JourneyRules


class SalariedFixedPolicy(HoursPolicy):
    """CLT with fixed pay.

    Overtime only once the difference passes the tolerance, and then the whole
    difference counts. Shortfalls become negative minutes.
    """

    def classify(self, *, worked_minutes: int, rules: JourneyRules) -> Classification:
        difference = worked_minutes - rules.standard_minutes
        if difference > rules.tolerance_minutes:
            return Classification(extra_minutes=difference)
        if difference < 0:
            return Classification(negative_minutes=-difference)
        return Classification()
