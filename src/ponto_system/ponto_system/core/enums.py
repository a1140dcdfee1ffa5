from __future__ import annotations

from enum import Enum


class PunchKind(str, Enum):
    """Tipo de batida de ponto, na ordem em que acontecem no dia."""

    ENTRY = "entry"
    LUNCH_OUT = "lunch_out"
    LUNCH_IN = "lunch_in"
    EXIT = "exit"


PUNCH_SEQUENCE: tuple[PunchKind, ...] = (
    PunchKind.ENTRY,
    PunchKind.LUNCH_OUT,
    PunchKind.LUNCH_IN,
    PunchKind.EXIT,
)


class ContractType(str, Enum):
    """Regime de contratação (CLT ou PJ)."""

    SALARIED = "clt"
    CONTRACTOR = "pj"


class PaymentType(str, Enum):
    """Forma de pagamento, relevante apenas para CLT."""

    HOURLY = "hourly"
    FIXED = "fixed"


class DayStatus(str, Enum):
    """Situação de um dia no relatório mensal."""

    COMPLETE = "complete"
    INCOMPLETE = "incomplete"
    MISSING = "missing"
    WEEKEND = "weekend"
    FUTURE = "future"
