from __future__ import annotations

import logging
from typing import Any, Callable, List, Mapping, Optional, Sequence, Tuple

from ..attendance.repository import AttendanceRepository
from ..common.ids import timestamp_id
from ..common.validators import optional_text, require_present
from ..core.constants import EMPLOYEE_ID_PREFIX
from ..core.exceptions import NoFieldsProvided, NotFoundError, StoreUnavailable
from .model import EMPLOYEE_FIELDS, Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


def collect_changes(data: Mapping[str, Any]) -> List[Tuple[str, Any]]:
    """Pick the updatable fields present in ``data``, in column order.

    A key sent with ``null`` counts as present and clears the column.
    """

    return [(field, data[field]) for field in EMPLOYEE_FIELDS if field in data]


class EmployeeService:
    """Use cases: manage employees."""

    def __init__(
        self,
        employees: Optional[EmployeeRepository],
        attendance: Optional[AttendanceRepository],
        *,
        clock: Optional[Callable[[], int]] = None,
    ):
        self._employees = employees
        self._attendance = attendance
        self._clock = clock

    def _repo(self) -> EmployeeRepository:
        if self._employees is None:
            raise StoreUnavailable()
        return self._employees

    def list_employees(self) -> Sequence[Employee]:
        return self._repo().list_all()

    def create_employee(self, data: Mapping[str, Any]) -> Employee:
        repo = self._repo()
        employee = Employee(
            id=timestamp_id(EMPLOYEE_ID_PREFIX, clock=self._clock),
            name=require_present(data, "name"),
            email=optional_text(data, "email"),
            phone=optional_text(data, "phone"),
            address=optional_text(data, "address"),
            department=optional_text(data, "department"),
            outlet=optional_text(data, "outlet"),
        )
        created = repo.create(employee)
        logger.info("Created employee %s", created.id)
        return created

    def update_employee(self, employee_id: str, data: Mapping[str, Any]) -> Employee:
        repo = self._repo()
        changes = collect_changes(data)
        if not changes:
            raise NoFieldsProvided()

        updated = repo.update_fields(employee_id, changes)
        if updated is None:
            raise NotFoundError("Employee not found")
        return updated

    def delete_employee(self, employee_id: str) -> None:
        """Delete the employee and every attendance row that references it."""

        repo = self._repo()
        if self._attendance is None:
            raise StoreUnavailable()

        removed = self._attendance.delete_for_employee(employee_id)
        if not repo.delete_by_id(employee_id):
            raise NotFoundError("Employee not found")
        logger.info("Deleted employee %s (%d attendance rows)", employee_id, removed)
