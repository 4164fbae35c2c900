from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

# Columns a partial update may touch, in statement order.
EMPLOYEE_FIELDS = ("name", "email", "phone", "address", "department", "outlet")


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee.

    ``department`` and ``outlet`` are free-text labels, not references.
    """

    id: str
    name: str
    email: Optional[str] = ""
    phone: Optional[str] = ""
    address: Optional[str] = ""
    department: Optional[str] = ""
    outlet: Optional[str] = ""
