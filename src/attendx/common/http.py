from __future__ import annotations

import logging
from functools import wraps
from typing import Any, Dict

from flask import jsonify, request

from ..core.exceptions import DomainError

logger = logging.getLogger(__name__)


def error_response(message: str, status_code: int):
    return jsonify({"error": message}), status_code


def json_body() -> Dict[str, Any]:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def api_errors(action: str):
    """Turn domain errors raised by a view into ``{"error": ...}`` responses.

    ``action`` names the operation in the log line, e.g. "creating employee".
    """

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except DomainError as e:
                if e.status_code >= 500:
                    logger.error("Error %s: %s", action, e)
                else:
                    logger.info("Rejected %s: %s", action, e)
                return error_response(str(e), e.status_code)
            except Exception as e:
                logger.exception("Error %s: %s", action, e)
                return error_response(str(e), 500)

        return wrapper

    return decorator
