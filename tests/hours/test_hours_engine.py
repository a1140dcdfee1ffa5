from datetime import date

import pytest

from src.ponto_system.ponto_system.core.enums import ContractType, PaymentType, PunchKind
from src.ponto_system.ponto_system.core.exceptions import MissingContractProfileError
from src.ponto_system.ponto_system.employees.model import ContractProfile
from src.ponto_system.ponto_system.hours.engine import HoursEngine, evaluate
from src.ponto_system.ponto_system.hours.model import HoursResult
from src.ponto_system.ponto_system.punches.classifier import classify_day
from tests.fakes import CLT_FIXED, CLT_HOURLY, PJ, full_day, punch


@pytest.mark.parametrize(
    "worked, extra, negative",
    [
        (480, 0, 0),
        (491, 0, 0),
        (492, 12, 0),
        (450, 0, 30),
        (0, 0, 480),
    ],
)
def test_salaried_fixed_tolerance_gate_and_deficit(worked, extra, negative):
    result = evaluate(worked, True, CLT_FIXED)

    assert result.worked_minutes == worked
    assert result.extra_minutes == extra
    assert result.negative_minutes == negative
    assert result.is_complete


def test_hourly_gets_every_extra_minute():
    result = evaluate(485, True, CLT_HOURLY)

    assert result.extra_minutes == 5
    assert result.negative_minutes == 0


def test_hourly_never_negative():
    result = evaluate(400, True, CLT_HOURLY)

    assert result.extra_minutes == 0
    assert result.negative_minutes == 0


@pytest.mark.parametrize("worked", [0, 300, 480, 600])
def test_contractor_always_zero(worked):
    result = evaluate(worked, True, PJ)

    assert result.extra_minutes == 0
    assert result.negative_minutes == 0
    assert result.worked_minutes == worked


def test_contractor_ignores_payment_type():
    profile = ContractProfile(ContractType.CONTRACTOR, PaymentType.HOURLY)

    assert evaluate(700, True, profile).extra_minutes == 0


@pytest.mark.parametrize("profile", [CLT_FIXED, CLT_HOURLY, PJ])
def test_incomplete_day_yields_zero(profile):
    assert evaluate(300, False, profile) == HoursResult()


def test_missing_profile_is_rejected():
    with pytest.raises(MissingContractProfileError):
        evaluate(480, True, None)


def test_missing_profile_rejected_even_for_incomplete_day():
    with pytest.raises(MissingContractProfileError):
        evaluate(0, False, None)


def test_negative_worked_minutes_clamped(caplog):
    result = evaluate(-30, True, CLT_FIXED)

    assert result.worked_minutes == 0
    assert result.negative_minutes == 480
    assert "clamped" in caplog.text


def test_custom_journey_rules():
    engine = HoursEngine(standard_minutes=360, tolerance_minutes=5)

    assert engine.evaluate(366, True, CLT_FIXED).extra_minutes == 6
    assert engine.evaluate(365, True, CLT_FIXED).extra_minutes == 0
    assert engine.evaluate(300, True, CLT_FIXED).negative_minutes == 60


def test_evaluate_day_uses_completeness_from_entry_and_exit():
    day = date(2026, 3, 2)
    engine = HoursEngine()

    only_lunch = classify_day([punch(day, "12:00", PunchKind.LUNCH_OUT), punch(day, "13:00", PunchKind.LUNCH_IN)])
    assert engine.evaluate_day(only_lunch, CLT_FIXED) == HoursResult()

    long_day = classify_day(full_day(day, "08:00", "12:00", "13:00", "18:00"))
    result = engine.evaluate_day(long_day, CLT_FIXED)
    assert result.extra_minutes == 60
    assert result.extra_hours == "01:00"
