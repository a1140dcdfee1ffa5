from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import ContractType, PaymentType
from ..core.exceptions import MissingContractProfileError, ValidationError
from ..employees.model import ContractProfile
from .policies.base import HoursPolicy
from .policies.contractor_policy import ContractorPolicy
from .policies.hourly_policy import HourlyPolicy
from .policies.salaried_fixed_policy import SalariedFixedPolicy


@dataclass
class HoursPolicyFactory:
    """Factory Pattern: choose the hours policy for a contract profile."""

    def for_profile(self, profile: Optional[ContractProfile]) -> HoursPolicy:
        if profile is None:
            raise MissingContractProfileError("Contract profile is required to evaluate hours")

        if profile.contract_type == ContractType.CONTRACTOR:
            return ContractorPolicy()

        if profile.contract_type == ContractType.SALARIED:
            if profile.payment_type == PaymentType.HOURLY:
                return HourlyPolicy()
            if profile.payment_type == PaymentType.FIXED:
                return SalariedFixedPolicy()

        raise ValidationError(
            f"Unsupported contract profile: {profile.contract_type!r}/{profile.payment_type!r}"
        )
