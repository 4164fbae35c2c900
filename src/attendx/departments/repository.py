from __future__ import annotations

from typing import Protocol, Sequence

from .model import Department


class DepartmentRepository(Protocol):
    def list_all(self) -> Sequence[Department]:
        raise NotImplementedError

    def create(self, department: Department) -> Department:
        raise NotImplementedError

    def delete_by_id(self, department_id: str) -> bool:
        raise NotImplementedError
