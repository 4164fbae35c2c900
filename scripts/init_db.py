from __future__ import annotations

import importlib
import sys

from dotenv import load_dotenv

from attendx.config import get_settings_module
from attendx.database.bootstrap import apply_schema, list_tables
from attendx.database.connection import DatabaseConnection, parse_database_url


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    if not settings.DATABASE_URL:
        sys.exit("DATABASE_URL is not set")

    config = parse_database_url(settings.DATABASE_URL)
    conn = DatabaseConnection(config)
    apply_schema(conn)
    tables = list_tables(conn)
    print(f"OK: Applied schema.sql -> {config.user}@{config.describe()} (tables={len(tables)})")


if __name__ == "__main__":
    main()
