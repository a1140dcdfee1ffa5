from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import ContractType, PaymentType


@dataclass(frozen=True)
class ContractProfile:
    """Classificação de como as horas do colaborador são avaliadas.

    Para PJ o tipo de pagamento é ignorado.
    """

    contract_type: ContractType
    payment_type: PaymentType = PaymentType.FIXED


@dataclass(frozen=True)
class Employee:
    """Entidade de domínio: colaborador.

    Nota: apenas os campos que o cálculo de horas e os relatórios usam.
    """

    employee_id: int
    full_name: str
    contract: Optional[ContractProfile]
    department_name: Optional[str] = None
    is_active: bool = True
