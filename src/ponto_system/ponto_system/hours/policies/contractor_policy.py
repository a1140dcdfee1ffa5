from __future__ import annotations

from .base import Classification, HoursPolicy, JourneyRules


class ContractorPolicy(HoursPolicy):
    """PJ: presence only."""

    def classify(self, *, worked_minutes: int, rules: JourneyRules) -> Classification:
        return Classification()
