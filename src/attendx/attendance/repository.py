from __future__ import annotations

from typing import Optional, Protocol, Sequence, Tuple

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def list_all(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def upsert_status(
        self,
        *,
        record_id: str,
        employee_id: str,
        work_date: str,
        status: str,
        outlet: Optional[str],
    ) -> Tuple[AttendanceRecord, bool]:
        """Insert the row or update its status; the flag is True when inserted.

        An existing row keeps its id and outlet.
        """

        raise NotImplementedError

    def delete_by_key(self, *, employee_id: str, work_date: str) -> bool:
        raise NotImplementedError

    def delete_for_employee(self, employee_id: str) -> int:
        raise NotImplementedError
