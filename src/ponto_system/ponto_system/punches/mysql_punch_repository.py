from __future__ import annotations

from datetime import date, datetime
from typing import Any, Dict, Optional, Sequence

import mysql.connector

from ..core.enums import PunchKind
from ..core.exceptions import ValidationError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import PunchEvent
from .repository import PunchRepository


def _to_event(r: Dict[str, Any]) -> PunchEvent:
    return PunchEvent(
        punch_id=int(r["record_id"]),
        employee_id=int(r["employee_id"]),
        kind=PunchKind(r["type"]),
        timestamp=r["record_time"],
        note=r.get("notes"),
    )


class MySQLPunchRepository(PunchRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_employee_on(self, employee_id: int, record_date: date) -> Sequence[PunchEvent]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT record_id, employee_id, type, record_date, record_time, notes
                FROM time_records
                WHERE employee_id=%s AND record_date=%s
                ORDER BY record_time ASC
                """,
                (employee_id, record_date),
            )
            return [_to_event(r) for r in fetchall(cur)]

    def list_for_employee_between(
        self,
        employee_id: int,
        *,
        start_date: date,
        end_date: date,
    ) -> Sequence[PunchEvent]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT record_id, employee_id, type, record_date, record_time, notes
                FROM time_records
                WHERE employee_id=%s AND record_date BETWEEN %s AND %s
                ORDER BY record_date ASC, record_time ASC
                """,
                (employee_id, start_date, end_date),
            )
            return [_to_event(r) for r in fetchall(cur)]

    def create(
        self,
        *,
        employee_id: int,
        kind: PunchKind,
        record_time: datetime,
        note: Optional[str] = None,
    ) -> int:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO time_records(employee_id, type, record_date, record_time, notes)
                    VALUES(%s,%s,%s,%s,%s)
                    """,
                    (employee_id, kind.value, record_time.date(), record_time, note),
                )
                return int(cur.lastrowid)
        except mysql.connector.IntegrityError as e:
            # uq_time_records_employee_day_type: one punch per kind per day
            raise ValidationError(f"Batida {kind.value} já registrada em {record_time.date().isoformat()}") from e
