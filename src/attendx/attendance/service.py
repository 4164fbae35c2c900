from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Sequence, Tuple

from ..common.validators import require_present
from ..core.exceptions import NotFoundError, StoreUnavailable
from ..employees.repository import EmployeeRepository
from .model import AttendanceRecord, attendance_id
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Use cases: record, list and delete daily attendance."""

    def __init__(self, attendance: Optional[AttendanceRepository], employees: Optional[EmployeeRepository]):
        self._attendance = attendance
        self._employees = employees

    def _repos(self) -> Tuple[AttendanceRepository, EmployeeRepository]:
        if self._attendance is None or self._employees is None:
            raise StoreUnavailable()
        return self._attendance, self._employees

    def list_attendance(self) -> Sequence[AttendanceRecord]:
        attendance, _ = self._repos()
        return attendance.list_all()

    def resolve_outlet(self, employee_id: str) -> Optional[str]:
        """Current outlet of the employee, or None when the id is unknown."""

        _, employees = self._repos()
        employee = employees.get_by_id(employee_id)
        return employee.outlet if employee else None

    def record(self, employee_id: str, work_date: str, status: str) -> Tuple[AttendanceRecord, bool]:
        """Set the status for (employee, date); returns ``(record, created)``.

        Repeating the call for the same pair updates the status in place. An
        unknown employee id is not rejected here; the outlet is then None.
        """

        attendance, _ = self._repos()
        outlet = self.resolve_outlet(employee_id)
        if outlet is None:
            logger.warning("No outlet resolved for employee %s", employee_id)

        return attendance.upsert_status(
            record_id=attendance_id(employee_id, work_date),
            employee_id=employee_id,
            work_date=work_date,
            status=status,
            outlet=outlet,
        )

    def record_from_payload(self, data: Mapping[str, Any]) -> Tuple[AttendanceRecord, bool]:
        # A missing store is reported before missing fields.
        self._repos()
        return self.record(
            str(require_present(data, "employeeId")),
            str(require_present(data, "date")),
            str(require_present(data, "status")),
        )

    def delete_record(self, employee_id: str, work_date: str) -> None:
        attendance, _ = self._repos()
        if not attendance.delete_by_key(employee_id=employee_id, work_date=work_date):
            raise NotFoundError("Attendance record not found")
