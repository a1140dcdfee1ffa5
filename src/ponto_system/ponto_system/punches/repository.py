from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import PunchKind
from .model import PunchEvent


class PunchRepository(Protocol):
    def list_for_employee_on(self, employee_id: int, record_date: date) -> Sequence[PunchEvent]:
        raise NotImplementedError

    def list_for_employee_between(
        self,
        employee_id: int,
        *,
        start_date: date,
        end_date: date,
    ) -> Sequence[PunchEvent]:
        """Punches with start_date <= record_date <= end_date, oldest first."""

        raise NotImplementedError

    def create(
        self,
        *,
        employee_id: int,
        kind: PunchKind,
        record_time: datetime,
        note: Optional[str] = None,
    ) -> int:
        raise NotImplementedError
