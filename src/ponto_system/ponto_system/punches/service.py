from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.clock import Clock, SystemClock
from ..common.datetime_utils import format_worked_time
from ..core.enums import PunchKind
from ..core.exceptions import ValidationError
from ..employees.repository import EmployeeRepository
from .classifier import classify_day, next_expected_kind
from .model import DayRecord, PunchEvent
from .repository import PunchRepository

logger = logging.getLogger(__name__)

PUNCH_LABELS = {
    PunchKind.ENTRY: "Entrada",
    PunchKind.LUNCH_OUT: "Saída Almoço",
    PunchKind.LUNCH_IN: "Retorno Almoço",
    PunchKind.EXIT: "Saída",
}


@dataclass(frozen=True)
class TodaySummary:
    work_date: date
    day: DayRecord
    next_kind: Optional[PunchKind]
    worked_time: str

    def to_dict(self) -> dict:
        return {
            "date": self.work_date.isoformat(),
            "breakdown": self.day.breakdown.as_dict(),
            "worked_minutes": self.day.worked_minutes,
            "worked_time": self.worked_time,
            "status": self.day.status.value,
            "anomaly": self.day.anomaly,
            "next_kind": self.next_kind.value if self.next_kind else None,
        }


class PunchService:
    def __init__(
        self,
        punches: PunchRepository,
        employees: EmployeeRepository,
        *,
        clock: Clock | None = None,
    ):
        self._punches = punches
        self._employees = employees
        self._clock = clock or SystemClock()

    def _require_employee(self, employee_id: int):
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise ValidationError("Colaborador não encontrado")
        if not employee.is_active:
            raise ValidationError("Colaborador inativo")
        return employee

    def register_punch(
        self,
        employee_id: int,
        *,
        kind: PunchKind | None = None,
        note: str | None = None,
    ) -> PunchEvent:
        """Record a punch for today, picking the next expected kind when none is given."""
        self._require_employee(employee_id)

        now = self._clock.now()
        today_events = list(self._punches.list_for_employee_on(employee_id, now.date()))

        expected = next_expected_kind(today_events)
        if expected is None:
            raise ValidationError("Todas as batidas de hoje já foram registradas")

        kind = kind or expected
        if any(e.kind == kind for e in today_events):
            raise ValidationError(f"{PUNCH_LABELS[kind]} já registrada hoje")

        note = note.strip() if note else None
        punch_id = self._punches.create(employee_id=employee_id, kind=kind, record_time=now, note=note)
        logger.info("Punch %s registered for employee %s at %s", kind.value, employee_id, now.isoformat())

        return PunchEvent(timestamp=now, kind=kind, punch_id=punch_id, employee_id=employee_id, note=note)

    def today_summary(self, employee_id: int) -> TodaySummary:
        self._require_employee(employee_id)

        today = self._clock.today()
        events = self._punches.list_for_employee_on(employee_id, today)
        day = classify_day(events)
        return TodaySummary(
            work_date=today,
            day=day,
            next_kind=next_expected_kind(events),
            worked_time=format_worked_time(day.worked_minutes),
        )
