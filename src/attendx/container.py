from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .database.connection import DatabaseConnection, parse_database_url
from .departments.mysql_department_repository import MySQLDepartmentRepository
from .departments.repository import DepartmentRepository
from .departments.service import DepartmentService
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Container:
    # None when no DATABASE_URL is configured; services then raise StoreUnavailable.
    conn: Optional[DatabaseConnection]

    employees_repo: Optional[EmployeeRepository]
    departments_repo: Optional[DepartmentRepository]
    attendance_repo: Optional[AttendanceRepository]

    employee_service: EmployeeService
    department_service: DepartmentService
    attendance_service: AttendanceService

    @property
    def store_configured(self) -> bool:
        return self.employees_repo is not None


def build_services(
    *,
    conn: Optional[DatabaseConnection],
    employees_repo: Optional[EmployeeRepository],
    departments_repo: Optional[DepartmentRepository],
    attendance_repo: Optional[AttendanceRepository],
) -> Container:
    return Container(
        conn=conn,
        employees_repo=employees_repo,
        departments_repo=departments_repo,
        attendance_repo=attendance_repo,
        employee_service=EmployeeService(employees_repo, attendance_repo),
        department_service=DepartmentService(departments_repo),
        attendance_service=AttendanceService(attendance_repo, employees_repo),
    )


def build_container(settings: Any) -> Container:
    database_url = str(getattr(settings, "DATABASE_URL", "") or "").strip()
    if not database_url:
        logger.warning("DATABASE_URL is not set; data endpoints will answer 503")
        return build_services(conn=None, employees_repo=None, departments_repo=None, attendance_repo=None)

    config = parse_database_url(
        database_url,
        pool_size=int(getattr(settings, "DB_POOL_SIZE")),
        connect_timeout=int(getattr(settings, "DB_CONNECT_TIMEOUT")),
    )
    conn = DatabaseConnection(config)
    logger.info("Connecting to MySQL database at %s", config.describe())

    return build_services(
        conn=conn,
        employees_repo=MySQLEmployeeRepository(conn),
        departments_repo=MySQLDepartmentRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
    )
