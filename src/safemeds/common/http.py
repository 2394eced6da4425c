from __future__ import annotations

import logging
from datetime import date, datetime
from functools import wraps
from typing import Any, Optional

from flask import Flask, jsonify, request, session
from werkzeug.exceptions import HTTPException

from ..core.exceptions import AuthenticationError, NotFoundError, ValidationError
from .datetime_utils import parse_iso_date, parse_iso_datetime

logger = logging.getLogger(__name__)


def error_response(message: str, status: int):
    return jsonify({"error": message}), status


def login_required(view):
    """JSON variant of the session guard: 401 instead of a redirect."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return error_response("Unauthorized", 401)
        return view(*args, **kwargs)

    return wrapper


def current_user_id() -> Optional[int]:
    user_id = session.get("user_id")
    return int(user_id) if user_id is not None else None


def json_body() -> dict:
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object")
    return body


def optional_json_body() -> dict:
    body = request.get_json(silent=True)
    return body if isinstance(body, dict) else {}


def date_arg(value: Optional[str], field_name: str) -> date:
    try:
        return parse_iso_date(value or "")
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid {field_name}. Use YYYY-MM-DD format")


def iso(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return str(value)


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ValidationError)
    def _validation(e: ValidationError):
        return error_response(str(e), 400)

    @app.errorhandler(NotFoundError)
    def _not_found(e: NotFoundError):
        return error_response(str(e), 404)

    @app.errorhandler(AuthenticationError)
    def _unauthenticated(e: AuthenticationError):
        return error_response(str(e), 401)

    @app.errorhandler(Exception)
    def _unexpected(e: Exception):
        if isinstance(e, HTTPException):
            return error_response(e.description or e.name, e.code or 500)
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        return error_response("Internal server error", 500)


def int_field(payload: dict, name: str) -> int:
    try:
        return int(payload[name])
    except (KeyError, TypeError, ValueError):
        raise ValidationError(f"Invalid {name}")


def datetime_arg(value: Optional[str], field_name: str) -> datetime:
    try:
        return parse_iso_datetime(value or "")
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid {field_name}. Use ISO 8601 format")
