from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional

from ..common.clock import Clock, SystemClock
from ..common.datetime_utils import format_minutes_to_hours
from ..core.enums import DayStatus
from ..core.exceptions import MissingContractProfileError, ValidationError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..hours.engine import HoursEngine, aggregate
from ..hours.model import BankOfHours, HoursResult
from ..punches.classifier import classify_day, group_by_date
from ..punches.model import DayRecord
from ..punches.repository import PunchRepository

REPORT_CSV_FIELDS = [
    "work_date",
    "status",
    "entry",
    "lunch_out",
    "lunch_in",
    "exit",
    "worked_hours",
    "extra_hours",
    "negative_hours",
    "anomaly",
]


@dataclass(frozen=True)
class ReportDay:
    work_date: date
    record: DayRecord
    hours: HoursResult

    @property
    def status(self) -> DayStatus:
        return self.record.status


@dataclass(frozen=True)
class MonthlyReport:
    employee: Employee
    year: int
    month: int
    days: list[ReportDay]
    total_worked_minutes: int
    expected_minutes: int
    work_days: int
    days_worked: int
    days_with_issues: int
    bank: BankOfHours

    @property
    def presence_balance_minutes(self) -> int:
        return self.total_worked_minutes - self.expected_minutes

    def day_rows(self) -> list[dict]:
        """Per-day rows for JSON; punches that did not happen are None."""
        rows = []
        for d in self.days:
            b = d.record.breakdown
            rows.append(
                {
                    "work_date": d.work_date.strftime("%Y-%m-%d"),
                    "status": d.status.value,
                    "entry": b.entry,
                    "lunch_out": b.lunch_out,
                    "lunch_in": b.lunch_in,
                    "exit": b.exit,
                    "worked_hours": format_minutes_to_hours(d.record.worked_minutes),
                    "extra_hours": d.hours.extra_hours,
                    "negative_hours": d.hours.negative_hours,
                    "anomaly": d.record.anomaly,
                }
            )
        return rows

    def report_rows(self) -> list[dict]:
        """CSV flavour of :meth:`day_rows`."""
        rows = []
        for row in self.day_rows():
            for key in ("entry", "lunch_out", "lunch_in", "exit"):
                row[key] = row[key] or "-"
            row["anomaly"] = "yes" if row["anomaly"] else ""
            rows.append(row)
        return rows

    def summary(self) -> dict:
        return {
            "employee_id": self.employee.employee_id,
            "full_name": self.employee.full_name,
            "department_name": self.employee.department_name,
            "year": self.year,
            "month": self.month,
            "total_worked_minutes": self.total_worked_minutes,
            "total_hours": format_minutes_to_hours(self.total_worked_minutes),
            "expected_minutes": self.expected_minutes,
            "expected_hours": format_minutes_to_hours(self.expected_minutes),
            "presence_balance_minutes": self.presence_balance_minutes,
            "presence_balance_hours": format_minutes_to_hours(self.presence_balance_minutes),
            "work_days": self.work_days,
            "days_worked": self.days_worked,
            "days_with_issues": self.days_with_issues,
            "bank": {
                "total_extra_minutes": self.bank.total_extra_minutes,
                "total_negative_minutes": self.bank.total_negative_minutes,
                "balance_minutes": self.bank.balance_minutes,
                "balance_hours": self.bank.balance_hours,
            },
        }


def month_bounds(year: int, month: int) -> tuple[date, date]:
    if not 1 <= int(year) <= 9999:
        raise ValidationError("Ano inválido")
    if not 1 <= int(month) <= 12:
        raise ValidationError("Mês inválido")
    last_day = calendar.monthrange(int(year), int(month))[1]
    return date(int(year), int(month), 1), date(int(year), int(month), last_day)


class MonthlyReportService:
    """Month view of one employee: per-day status, worked hours and bank of hours.

    The calendar rules (weekends, days after today) live here; the hours
    engine only ever sees days that were actually worked.
    """

    def __init__(
        self,
        punches: PunchRepository,
        employees: EmployeeRepository,
        *,
        engine: Optional[HoursEngine] = None,
        clock: Optional[Clock] = None,
    ):
        self._punches = punches
        self._employees = employees
        self._engine = engine or HoursEngine()
        self._clock = clock or SystemClock()

    def build_monthly_report(self, employee_id: int, *, year: int, month: int) -> MonthlyReport:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise ValidationError("Colaborador não encontrado")
        if employee.contract is None:
            raise MissingContractProfileError(
                f"Employee {employee_id} has no contract profile"
            )

        start, end = month_bounds(year, month)
        today = self._clock.today()
        by_date = group_by_date(
            self._punches.list_for_employee_between(employee_id, start_date=start, end_date=end)
        )

        days: list[ReportDay] = []
        total_minutes = 0
        work_days = 0
        days_worked = 0
        days_with_issues = 0

        current = start
        while current <= end:
            events = by_date.get(current, [])

            if current.weekday() >= 5:
                days.append(self._empty_day(current, DayStatus.WEEKEND))
            elif current > today:
                days.append(self._empty_day(current, DayStatus.FUTURE))
            else:
                work_days += 1
                record = classify_day(events)
                if record.status == DayStatus.MISSING:
                    days_with_issues += 1
                    days.append(ReportDay(work_date=current, record=record, hours=HoursResult()))
                else:
                    days_worked += 1
                    total_minutes += record.worked_minutes
                    if record.status == DayStatus.INCOMPLETE:
                        days_with_issues += 1
                    hours = self._engine.evaluate_day(record, employee.contract)
                    days.append(ReportDay(work_date=current, record=record, hours=hours))

            current += timedelta(days=1)

        return MonthlyReport(
            employee=employee,
            year=int(year),
            month=int(month),
            days=days,
            total_worked_minutes=total_minutes,
            expected_minutes=work_days * self._engine.rules.standard_minutes,
            work_days=work_days,
            days_worked=days_worked,
            days_with_issues=days_with_issues,
            bank=aggregate(d.hours for d in days),
        )

    @staticmethod
    def _empty_day(work_date: date, status: DayStatus) -> ReportDay:
        return ReportDay(work_date=work_date, record=DayRecord(status=status), hours=HoursResult())
