from __future__ import annotations

from typing import Any, Callable, Mapping, Optional, Sequence

from ..common.ids import timestamp_id
from ..common.validators import optional_text, require_present
from ..core.constants import DEPARTMENT_ID_PREFIX
from ..core.exceptions import NotFoundError, StoreUnavailable
from .model import Department
from .repository import DepartmentRepository


class DepartmentService:
    """Use cases: list, create and delete departments (no update)."""

    def __init__(self, departments: Optional[DepartmentRepository], *, clock: Optional[Callable[[], int]] = None):
        self._departments = departments
        self._clock = clock

    def _repo(self) -> DepartmentRepository:
        if self._departments is None:
            raise StoreUnavailable()
        return self._departments

    def list_departments(self) -> Sequence[Department]:
        return self._repo().list_all()

    def create_department(self, data: Mapping[str, Any]) -> Department:
        repo = self._repo()
        department = Department(
            id=timestamp_id(DEPARTMENT_ID_PREFIX, clock=self._clock),
            name=require_present(data, "name"),
            description=optional_text(data, "description"),
            outlet=optional_text(data, "outlet"),
        )
        return repo.create(department)

    def delete_department(self, department_id: str) -> None:
        if not self._repo().delete_by_id(department_id):
            raise NotFoundError("Department not found")
