from __future__ import annotations

from typing import Any, Dict, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Department
from .repository import DepartmentRepository


def _to_department(r: Dict[str, Any]) -> Department:
    return Department(
        id=r["id"],
        name=r["name"],
        description=r.get("description"),
        outlet=r.get("outlet"),
    )


class MySQLDepartmentRepository(DepartmentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Department]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, name, description, outlet FROM departments")
            return [_to_department(r) for r in fetchall(cur)]

    def create(self, department: Department) -> Department:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO departments(id, name, description, outlet) VALUES(%s,%s,%s,%s)",
                (department.id, department.name, department.description, department.outlet),
            )
            cur.execute("SELECT id, name, description, outlet FROM departments WHERE id=%s", (department.id,))
            return _to_department(fetchone(cur))

    def delete_by_id(self, department_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM departments WHERE id=%s", (department_id,))
            return cur.rowcount > 0
