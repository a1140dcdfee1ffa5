from datetime import date, datetime

import pytest

from src.ponto_system.ponto_system.common.clock import FixedClock
from src.ponto_system.ponto_system.core.enums import DayStatus, PunchKind
from src.ponto_system.ponto_system.core.exceptions import MissingContractProfileError, ValidationError
from src.ponto_system.ponto_system.hours.engine import HoursEngine
from src.ponto_system.ponto_system.reports.service import MonthlyReportService, month_bounds
from tests.fakes import CLT_HOURLY, PJ, InMemoryEmployees, InMemoryPunches, employee, full_day, punch

# Tuesday 2026-03-03; March 2026 starts on a Sunday.
TODAY = datetime(2026, 3, 3, 18, 0)


def build(contract=None, punches=None, *, engine=None):
    emp = employee(1) if contract is None else employee(1, contract=contract)
    svc = MonthlyReportService(
        punches or InMemoryPunches(),
        InMemoryEmployees({1: emp}),
        engine=engine,
        clock=FixedClock(TODAY),
    )
    return svc.build_monthly_report(1, year=2026, month=3)


def test_calendar_statuses():
    repo = InMemoryPunches()
    repo.add(1, full_day(date(2026, 3, 2), "08:00", "12:00", "13:00", "17:00"))

    report = build(punches=repo)
    by_date = {d.work_date: d.status for d in report.days}

    assert len(report.days) == 31
    assert by_date[date(2026, 3, 1)] == DayStatus.WEEKEND
    assert by_date[date(2026, 3, 2)] == DayStatus.COMPLETE
    assert by_date[date(2026, 3, 3)] == DayStatus.MISSING
    assert by_date[date(2026, 3, 4)] == DayStatus.FUTURE
    assert by_date[date(2026, 3, 7)] == DayStatus.WEEKEND


def test_totals_and_bank_for_fixed_salary():
    repo = InMemoryPunches()
    repo.add(1, full_day(date(2026, 3, 2), "08:00", "12:00", "13:00", "18:00"))
    repo.add(1, full_day(date(2026, 3, 3), "08:00", "12:00", "13:00", "16:30"))

    report = build(punches=repo)

    assert report.work_days == 2
    assert report.days_worked == 2
    assert report.days_with_issues == 0
    assert report.total_worked_minutes == 540 + 450
    assert report.expected_minutes == 960
    assert report.presence_balance_minutes == 30
    assert report.bank.total_extra_minutes == 60
    assert report.bank.total_negative_minutes == 30
    assert report.bank.balance_minutes == 30


def test_incomplete_day_counts_as_issue_without_bank_effect():
    repo = InMemoryPunches()
    repo.add(1, [punch(date(2026, 3, 2), "08:00", PunchKind.ENTRY), punch(date(2026, 3, 2), "12:00", PunchKind.LUNCH_OUT)])

    report = build(punches=repo)
    monday = report.days[1]

    assert monday.status == DayStatus.INCOMPLETE
    assert monday.record.worked_minutes == 240
    assert monday.hours.extra_minutes == 0 and monday.hours.negative_minutes == 0
    # Monday incomplete + Tuesday missing
    assert report.days_with_issues == 2
    assert report.bank.balance_minutes == 0


def test_weekend_punches_are_not_evaluated():
    repo = InMemoryPunches()
    repo.add(1, full_day(date(2026, 3, 1), "08:00", "12:00", "13:00", "20:00"))

    report = build(punches=repo)

    assert report.days[0].status == DayStatus.WEEKEND
    assert report.bank.total_extra_minutes == 0


def test_contract_rules_flow_into_bank():
    repo = InMemoryPunches()
    repo.add(1, full_day(date(2026, 3, 2), "08:00", "12:00", "13:00", "16:00"))

    assert build(CLT_HOURLY, repo).bank.balance_minutes == 0
    assert build(PJ, repo).bank.balance_minutes == 0


def test_engine_rules_drive_expected_minutes():
    report = build(engine=HoursEngine(standard_minutes=360))

    assert report.expected_minutes == 2 * 360


def test_report_rows_and_summary():
    repo = InMemoryPunches()
    repo.add(1, full_day(date(2026, 3, 2), "08:00", "12:00", "13:00", "17:15"))

    report = build(punches=repo)
    row = report.report_rows()[1]

    assert row == {
        "work_date": "2026-03-02",
        "status": "complete",
        "entry": "08:00",
        "lunch_out": "12:00",
        "lunch_in": "13:00",
        "exit": "17:15",
        "worked_hours": "08:15",
        "extra_hours": "00:15",
        "negative_hours": "00:00",
        "anomaly": "",
    }
    summary = report.summary()
    assert summary["work_days"] == 2
    assert summary["presence_balance_hours"] == "-07:45"
    assert summary["bank"]["balance_hours"] == "00:15"


def test_unknown_employee():
    svc = MonthlyReportService(InMemoryPunches(), InMemoryEmployees({}), clock=FixedClock(TODAY))

    with pytest.raises(ValidationError):
        svc.build_monthly_report(7, year=2026, month=3)


def test_employee_without_contract_fails_loudly():
    svc = MonthlyReportService(
        InMemoryPunches(),
        InMemoryEmployees({1: employee(1, contract=None)}),
        clock=FixedClock(TODAY),
    )

    with pytest.raises(MissingContractProfileError):
        svc.build_monthly_report(1, year=2026, month=3)


def test_month_bounds():
    assert month_bounds(2024, 2) == (date(2024, 2, 1), date(2024, 2, 29))
    with pytest.raises(ValidationError):
        month_bounds(2024, 13)
    with pytest.raises(ValidationError):
        month_bounds(0, 1)
    with pytest.raises(ValidationError):
        month_bounds(10000, 1)


def test_summary_carries_department():
    svc = MonthlyReportService(
        InMemoryPunches(),
        InMemoryEmployees({1: employee(1, department_name="RH")}),
        clock=FixedClock(TODAY),
    )

    summary = svc.build_monthly_report(1, year=2026, month=3).summary()

    assert summary["department_name"] == "RH"


def test_day_rows_leave_missing_punches_empty():
    repo = InMemoryPunches()
    repo.add(1, [punch(date(2026, 3, 2), "08:00", PunchKind.ENTRY), punch(date(2026, 3, 2), "17:00", PunchKind.EXIT)])

    report = build(punches=repo)
    json_row = report.day_rows()[1]
    csv_row = report.report_rows()[1]

    assert json_row["lunch_out"] is None and json_row["lunch_in"] is None
    assert json_row["anomaly"] is False
    assert csv_row["lunch_out"] == "-" and csv_row["lunch_in"] == "-"
    assert csv_row["anomaly"] == ""
