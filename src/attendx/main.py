from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from .config import get_settings_module
from .container import Container, build_container
from .core.exceptions import StoreError
from .database.bootstrap import apply_schema, list_tables, ping

from .attendance.controller import register as register_attendance
from .departments.controller import register as register_departments
from .employees.controller import register as register_employees
from .system.controller import inspect_static_dir, register as register_system

logger = logging.getLogger(__name__)


def _init_database(container: Container) -> None:
    # Startup must survive an unreachable database; requests then answer 500.
    try:
        logger.info("Database connected successfully: %s", ping(container.conn))
        apply_schema(container.conn)
        logger.debug("Schema ready (tables=%d)", len(list_tables(container.conn)))
    except StoreError as e:
        logger.error("Error initializing database tables: %s", e)


def create_app(container: Optional[Container] = None, *, static_dir: Optional[str] = None) -> Flask:
    load_dotenv(override=False)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Starting server (settings=%s)", settings_module)

    app = Flask(__name__, static_folder=None)
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["PORT"] = int(getattr(settings, "PORT"))
    # Keep the field order of the records instead of sorting keys.
    app.json.sort_keys = False

    if container is None:
        container = build_container(settings)
        if container.conn is not None and bool(getattr(settings, "AUTO_INIT_DB", False)):
            _init_database(container)

    if static_dir is None:
        static_dir = str(getattr(settings, "STATIC_DIR", "") or "")
    inspect_static_dir(static_dir)

    register_employees(app, container)
    register_departments(app, container)
    register_attendance(app, container)
    register_system(app, container, static_dir=static_dir)

    app.extensions["attendx.container"] = container
    return app


def run() -> None:
    app = create_app()
    port = app.config["PORT"]
    logger.info("Server is running on port %s", port)
    logger.info("Check /health or /api/test endpoints to verify server is working")
    app.run(host="0.0.0.0", port=port)
