from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from ...core.constants import OVERTIME_TOLERANCE_MINUTES, STANDARD_JOURNEY_MINUTES


@dataclass(frozen=True)
class JourneyRules:
    standard_minutes: int = STANDARD_JOURNEY_MINUTES
    tolerance_minutes: int = OVERTIME_TOLERANCE_MINUTES


@dataclass(frozen=True)
class Classification:
    extra_minutes: int = 0
    negative_minutes: int = 0


class HoursPolicy(ABC):
    """Strategy Pattern: how a contract turns worked minutes into extra/deficit."""

    @abstractmethod
    def classify(self, *, worked_minutes: int, rules: JourneyRules) -> Classification:
        raise NotImplementedError
