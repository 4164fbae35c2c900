from __future__ import annotations

from typing import Any, Dict, Optional, Sequence, Tuple

from ..database.connection import DatabaseConnection
from ..database.mysql_base import build_set_clause, db_cursor, fetchall, fetchone
from .model import EMPLOYEE_FIELDS, Employee
from .repository import EmployeeRepository

_SELECT = "SELECT id, name, email, phone, address, department, outlet FROM employees"


def _to_employee(r: Dict[str, Any]) -> Employee:
    return Employee(
        id=r["id"],
        name=r["name"],
        email=r.get("email"),
        phone=r.get("phone"),
        address=r.get("address"),
        department=r.get("department"),
        outlet=r.get("outlet"),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT)
            return [_to_employee(r) for r in fetchall(cur)]

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} WHERE id=%s", (employee_id,))
            r = fetchone(cur)
            return _to_employee(r) if r else None

    def create(self, employee: Employee) -> Employee:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO employees(id, name, email, phone, address, department, outlet)
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    employee.id,
                    employee.name,
                    employee.email,
                    employee.phone,
                    employee.address,
                    employee.department,
                    employee.outlet,
                ),
            )
            cur.execute(f"{_SELECT} WHERE id=%s", (employee.id,))
            return _to_employee(fetchone(cur))

    def update_fields(self, employee_id: str, changes: Sequence[Tuple[str, Any]]) -> Optional[Employee]:
        set_clause, params = build_set_clause(changes, allowed=EMPLOYEE_FIELDS)
        with db_cursor(self._conn_factory) as (_, cur):
            # rowcount is 0 for an unchanged row too, so existence is read back.
            cur.execute(f"UPDATE employees SET {set_clause} WHERE id=%s", (*params, employee_id))
            cur.execute(f"{_SELECT} WHERE id=%s", (employee_id,))
            r = fetchone(cur)
            return _to_employee(r) if r else None

    def delete_by_id(self, employee_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM employees WHERE id=%s", (employee_id,))
            return cur.rowcount > 0
