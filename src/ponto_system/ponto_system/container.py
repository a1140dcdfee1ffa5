from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .common.clock import Clock, SystemClock
from .core.constants import OVERTIME_TOLERANCE_MINUTES, STANDARD_JOURNEY_MINUTES
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .hours.engine import HoursEngine
from .punches.mysql_punch_repository import MySQLPunchRepository
from .punches.repository import PunchRepository
from .punches.service import PunchService
from .reports.service import MonthlyReportService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    punches_repo: PunchRepository
    employees_repo: EmployeeRepository

    clock: Clock
    hours_engine: HoursEngine
    punch_service: PunchService
    monthly_report_service: MonthlyReportService


def build_services(
    *,
    punches_repo: PunchRepository,
    employees_repo: EmployeeRepository,
    conn: Optional[DatabaseConnection] = None,
    clock: Optional[Clock] = None,
    standard_minutes: int = STANDARD_JOURNEY_MINUTES,
    tolerance_minutes: int = OVERTIME_TOLERANCE_MINUTES,
) -> Container:
    clock = clock or SystemClock()
    hours_engine = HoursEngine(standard_minutes=standard_minutes, tolerance_minutes=tolerance_minutes)

    punch_service = PunchService(punches_repo, employees_repo, clock=clock)
    monthly_report_service = MonthlyReportService(
        punches_repo,
        employees_repo,
        engine=hours_engine,
        clock=clock,
    )

    return Container(
        conn=conn,
        punches_repo=punches_repo,
        employees_repo=employees_repo,
        clock=clock,
        hours_engine=hours_engine,
        punch_service=punch_service,
        monthly_report_service=monthly_report_service,
    )


def build_container(
    *,
    db_config: Mapping[str, Any],
    standard_minutes: int = STANDARD_JOURNEY_MINUTES,
    tolerance_minutes: int = OVERTIME_TOLERANCE_MINUTES,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))

    return build_services(
        punches_repo=MySQLPunchRepository(conn),
        employees_repo=MySQLEmployeeRepository(conn),
        conn=conn,
        standard_minutes=standard_minutes,
        tolerance_minutes=tolerance_minutes,
    )
