from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

from ..core.enums import DayStatus, PunchKind, PUNCH_SEQUENCE


@dataclass(frozen=True)
class PunchEvent:
    """Entidade de domínio: uma batida de ponto."""

    timestamp: datetime
    kind: PunchKind
    punch_id: Optional[int] = None
    employee_id: Optional[int] = None
    note: Optional[str] = None

    @property
    def record_date(self) -> date:
        return self.timestamp.date()


@dataclass(frozen=True)
class DayBreakdown:
    """Horário (HH:MM) de cada batida do dia, ausente quando não houve batida."""

    entry: Optional[str] = None
    lunch_out: Optional[str] = None
    lunch_in: Optional[str] = None
    exit: Optional[str] = None

    def get(self, kind: PunchKind) -> Optional[str]:
        return getattr(self, kind.value)

    def as_dict(self) -> dict[str, str]:
        return {k.value: self.get(k) for k in PUNCH_SEQUENCE if self.get(k) is not None}


@dataclass(frozen=True)
class DayRecord:
    """Read-model de um dia de ponto, já classificado."""

    events: tuple[PunchEvent, ...] = ()
    breakdown: DayBreakdown = field(default_factory=DayBreakdown)
    worked_minutes: int = 0
    status: DayStatus = DayStatus.MISSING
    anomaly: bool = False

    @property
    def is_complete(self) -> bool:
        return self.breakdown.entry is not None and self.breakdown.exit is not None

    @property
    def has_all_punches(self) -> bool:
        return all(self.breakdown.get(k) is not None for k in PUNCH_SEQUENCE)
