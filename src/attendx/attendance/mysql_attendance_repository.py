from __future__ import annotations

from typing import Any, Dict, Optional, Sequence, Tuple

from ..core.exceptions import StoreError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AttendanceRecord
from .repository import AttendanceRepository

_SELECT = "SELECT id, employee_id, `date`, status, outlet FROM attendance"


def _to_record(r: Dict[str, Any]) -> AttendanceRecord:
    return AttendanceRecord(
        id=r["id"],
        employee_id=r["employee_id"],
        date=r["date"],
        status=r["status"],
        outlet=r.get("outlet"),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT)
            return [_to_record(r) for r in fetchall(cur)]

    def upsert_status(
        self,
        *,
        record_id: str,
        employee_id: str,
        work_date: str,
        status: str,
        outlet: Optional[str],
    ) -> Tuple[AttendanceRecord, bool]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} WHERE employee_id=%s AND `date`=%s", (employee_id, work_date))
            existed = fetchone(cur) is not None

            # The unique key on (employee_id, date) turns a concurrent insert
            # into a status update instead of a second row.
            cur.execute(
                """
                INSERT INTO attendance(id, employee_id, `date`, status, outlet)
                VALUES(%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE status=VALUES(status)
                """,
                (record_id, employee_id, work_date, status, outlet),
            )

            cur.execute(f"{_SELECT} WHERE employee_id=%s AND `date`=%s", (employee_id, work_date))
            row = fetchone(cur)
            if row is None:
                # The id clashed with another (employee, date) pair and that row was updated instead.
                raise StoreError(f"Attendance id {record_id!r} already belongs to another record")
            return _to_record(row), not existed

    def delete_by_key(self, *, employee_id: str, work_date: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance WHERE employee_id=%s AND `date`=%s", (employee_id, work_date))
            return cur.rowcount > 0

    def delete_for_employee(self, employee_id: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance WHERE employee_id=%s", (employee_id,))
            return int(cur.rowcount)
