from __future__ import annotations

from attendx.departments.model import Department
from attendx.departments.mysql_department_repository import MySQLDepartmentRepository
from tests.fakes import ScriptedConnectionFactory


def test_create_inserts_then_reads_back():
    row = {"id": "dept-1", "name": "Sales", "description": "", "outlet": "HQ"}
    factory = ScriptedConnectionFactory([1, [row]])

    created = MySQLDepartmentRepository(factory).create(Department(id="dept-1", name="Sales", outlet="HQ"))

    assert created == Department(id="dept-1", name="Sales", description="", outlet="HQ")
    assert factory.executed[0] == (
        "INSERT INTO departments(id, name, description, outlet) VALUES(%s,%s,%s,%s)",
        ("dept-1", "Sales", "", "HQ"),
    )


def test_delete_by_id_reports_rowcount():
    factory = ScriptedConnectionFactory([0])

    assert MySQLDepartmentRepository(factory).delete_by_id("dept-1") is False
