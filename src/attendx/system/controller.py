from __future__ import annotations

import logging
import os
from datetime import datetime, timezone

from flask import Flask, abort, jsonify, render_template, send_from_directory
from werkzeug.exceptions import HTTPException
from werkzeug.security import safe_join

from ..container import Container

logger = logging.getLogger(__name__)


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def inspect_static_dir(static_dir: str) -> bool:
    """Log what the frontend build directory holds; True when index.html exists."""

    if not static_dir or not os.path.isdir(static_dir):
        logger.warning("Frontend directory not found at: %s", static_dir)
        return False

    logger.info("Frontend directory found at: %s (%s)", static_dir, ", ".join(sorted(os.listdir(static_dir))))
    index_exists = os.path.isfile(os.path.join(static_dir, "index.html"))
    if not index_exists:
        logger.error("index.html not found in the frontend directory; the build may have failed")
    return index_exists


def register(app: Flask, container: Container, *, static_dir: str) -> None:
    def database_state() -> str:
        return "connected" if container.store_configured else "not connected"

    @app.route("/api/test", methods=["GET"], endpoint="api_test")
    def api_test():
        return jsonify({"message": "API is working", "timestamp": _timestamp(), "database": database_state()})

    @app.route("/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok", "timestamp": _timestamp(), "database": database_state()}), 200

    @app.route("/", defaults={"path": ""}, methods=["GET"], endpoint="frontend")
    @app.route("/<path:path>", methods=["GET"], endpoint="frontend")
    def frontend(path: str):
        # Real files (bundles, images) first, then the SPA entry document.
        try:
            if path and static_dir:
                candidate = safe_join(static_dir, path)
                if candidate is None:
                    # Path escapes the frontend directory.
                    abort(404)
                if os.path.isfile(candidate):
                    return send_from_directory(static_dir, path)

            index_path = os.path.join(static_dir, "index.html") if static_dir else ""
            if index_path and os.path.isfile(index_path):
                return send_from_directory(static_dir, "index.html")

            logger.error("index.html not found; cannot serve %s", path or "/")
            return render_template("frontend_missing.html"), 404
        except HTTPException:
            raise
        except Exception as e:
            logger.exception("Error serving frontend: %s", e)
            return render_template("server_error.html", error=str(e)), 500
