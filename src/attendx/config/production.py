import os

from .base import Config

DATABASE_URL = Config.DATABASE_URL
PORT = Config.PORT
DB_POOL_SIZE = Config.DB_POOL_SIZE
DB_CONNECT_TIMEOUT = Config.DB_CONNECT_TIMEOUT
STATIC_DIR = Config.STATIC_DIR

DEBUG = False
LOG_LEVEL = Config.LOG_LEVEL

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
