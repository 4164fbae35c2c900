from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


def attendance_id(employee_id: str, work_date: str) -> str:
    return f"{employee_id}-{work_date}"


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one employee's status for one day.

    ``outlet`` is copied from the employee when the row is first written and
    is not refreshed when the employee later moves.
    """

    id: str
    employee_id: str
    date: str
    status: str
    outlet: Optional[str] = None
