import os

DATABASE_URL = os.getenv("TEST_DATABASE_URL", "")
PORT = 8080
DB_POOL_SIZE = 2
DB_CONNECT_TIMEOUT = 5
STATIC_DIR = os.getenv("STATIC_DIR", "")

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
