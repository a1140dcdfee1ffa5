from __future__ import annotations

from typing import Optional

from ..core.enums import ContractType, PaymentType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import ContractProfile, Employee
from .repository import EmployeeRepository


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT e.employee_id, e.first_name, e.last_name, e.contract_type, e.payment_type,
                       e.is_active, d.name AS department_name
                FROM employees e
                LEFT JOIN departments d ON d.department_id = e.department_id
                WHERE e.employee_id=%s
                """,
                (employee_id,),
            )
            r = fetchone(cur)
            if not r:
                return None

            contract = None
            if r.get("contract_type"):
                contract = ContractProfile(
                    contract_type=ContractType(r["contract_type"]),
                    payment_type=PaymentType(r.get("payment_type") or PaymentType.FIXED.value),
                )

            full_name = " ".join(p for p in (r.get("first_name"), r.get("last_name")) if p)
            return Employee(
                employee_id=int(r["employee_id"]),
                full_name=full_name,
                contract=contract,
                department_name=r.get("department_name"),
                is_active=bool(r.get("is_active", 1)),
            )
