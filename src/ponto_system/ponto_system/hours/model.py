from __future__ import annotations

from dataclasses import dataclass

from ..common.datetime_utils import format_minutes_to_hours


@dataclass(frozen=True)
class HoursResult:
    """Resultado da avaliação de um dia frente ao contrato do colaborador."""

    worked_minutes: int = 0
    extra_minutes: int = 0
    negative_minutes: int = 0
    is_complete: bool = False

    @property
    def worked_hours(self) -> str:
        return format_minutes_to_hours(self.worked_minutes)

    @property
    def extra_hours(self) -> str:
        return format_minutes_to_hours(self.extra_minutes)

    @property
    def negative_hours(self) -> str:
        return format_minutes_to_hours(self.negative_minutes)


@dataclass(frozen=True)
class BankOfHours:
    """Banco de horas de um período."""

    total_extra_minutes: int = 0
    total_negative_minutes: int = 0

    @property
    def balance_minutes(self) -> int:
        return self.total_extra_minutes - self.total_negative_minutes

    @property
    def balance_hours(self) -> str:
        return format_minutes_to_hours(self.balance_minutes)
