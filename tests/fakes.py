from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

from src.ponto_system.ponto_system.core.enums import ContractType, PaymentType, PunchKind
from src.ponto_system.ponto_system.employees.model import ContractProfile, Employee
from src.ponto_system.ponto_system.punches.model import PunchEvent

CLT_FIXED = ContractProfile(ContractType.SALARIED, PaymentType.FIXED)
CLT_HOURLY = ContractProfile(ContractType.SALARIED, PaymentType.HOURLY)
PJ = ContractProfile(ContractType.CONTRACTOR, PaymentType.FIXED)


def punch(day: date, hhmm: str, kind: PunchKind) -> PunchEvent:
    hour, minute = (int(p) for p in hhmm.split(":"))
    return PunchEvent(timestamp=datetime(day.year, day.month, day.day, hour, minute), kind=kind)


def full_day(day: date, entry: str, lunch_out: str, lunch_in: str, exit_: str) -> list[PunchEvent]:
    return [
        punch(day, entry, PunchKind.ENTRY),
        punch(day, lunch_out, PunchKind.LUNCH_OUT),
        punch(day, lunch_in, PunchKind.LUNCH_IN),
        punch(day, exit_, PunchKind.EXIT),
    ]


@dataclass
class InMemoryEmployees:
    employees: dict[int, Employee]

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        return self.employees.get(employee_id)


@dataclass
class InMemoryPunches:
    events: list[PunchEvent] = field(default_factory=list)
    _next_id: int = 1

    def list_for_employee_on(self, employee_id: int, record_date: date):
        return [e for e in self._sorted() if e.employee_id == employee_id and e.record_date == record_date]

    def list_for_employee_between(self, employee_id: int, *, start_date: date, end_date: date):
        return [
            e for e in self._sorted()
            if e.employee_id == employee_id and start_date <= e.record_date <= end_date
        ]

    def create(self, *, employee_id: int, kind: PunchKind, record_time: datetime, note=None) -> int:
        pid = self._next_id
        self._next_id += 1
        self.events.append(
            PunchEvent(timestamp=record_time, kind=kind, punch_id=pid, employee_id=employee_id, note=note)
        )
        return pid

    def add(self, employee_id: int, events: list[PunchEvent]) -> None:
        for e in events:
            self.create(employee_id=employee_id, kind=e.kind, record_time=e.timestamp)

    def _sorted(self):
        return sorted(self.events, key=lambda e: e.timestamp)


def employee(employee_id: int = 1, contract: Optional[ContractProfile] = CLT_FIXED, **kwargs) -> Employee:
    return Employee(employee_id=employee_id, full_name=kwargs.pop("full_name", "Maria Silva"), contract=contract, **kwargs)
