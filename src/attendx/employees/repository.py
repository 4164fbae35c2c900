from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence, Tuple

from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for Employee.

    Services depend on this protocol, never on a concrete database.
    """

    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def create(self, employee: Employee) -> Employee:
        raise NotImplementedError

    def update_fields(self, employee_id: str, changes: Sequence[Tuple[str, Any]]) -> Optional[Employee]:
        """Apply ``(column, value)`` changes; None when no row has this id."""

        raise NotImplementedError

    def delete_by_id(self, employee_id: str) -> bool:
        raise NotImplementedError
