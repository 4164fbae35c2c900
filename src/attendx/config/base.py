import os

from ..core.constants import DEFAULT_CONNECT_TIMEOUT, DEFAULT_PORT, DEFAULT_POOL_SIZE, DEFAULT_STATIC_DIR


class Config:
    # Empty DATABASE_URL keeps the API up but every data endpoint answers 503.
    DATABASE_URL = os.environ.get("DATABASE_URL", "").strip()

    PORT = int(os.environ.get("PORT", str(DEFAULT_PORT)))

    DB_POOL_SIZE = int(os.environ.get("DB_POOL_SIZE", str(DEFAULT_POOL_SIZE)))
    DB_CONNECT_TIMEOUT = int(os.environ.get("DB_CONNECT_TIMEOUT", str(DEFAULT_CONNECT_TIMEOUT)))

    STATIC_DIR = os.environ.get("STATIC_DIR", os.path.join(os.getcwd(), DEFAULT_STATIC_DIR))

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
