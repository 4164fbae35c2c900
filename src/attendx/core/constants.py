"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_PORT = 8080
DEFAULT_MYSQL_PORT = 3306
DEFAULT_POOL_SIZE = 5
DEFAULT_CONNECT_TIMEOUT = 10
DEFAULT_STATIC_DIR = "dist"

EMPLOYEE_ID_PREFIX = "emp"
DEPARTMENT_ID_PREFIX = "dept"
