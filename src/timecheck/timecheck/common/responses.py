from __future__ import annotations

import logging

from flask import jsonify, request

from ..core.exceptions import (
    CooldownActive,
    CycleComplete,
    DomainError,
    DuplicateEmployee,
    EmployeeNotFound,
    InvalidInput,
    ScheduleNotFound,
    StorageUnavailable,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Checked in order: subclasses before their bases.
_STATUS_BY_ERROR = (
    (DuplicateEmployee, 409),
    (ValidationError, 400),
    (EmployeeNotFound, 404),
    (ScheduleNotFound, 404),
    (CooldownActive, 409),
    (CycleComplete, 409),
)


def status_for(exc: Exception) -> int:
    for error_type, status in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status
    if isinstance(exc, StorageUnavailable):
        return 503
    if isinstance(exc, DomainError):
        return 400
    return 500


def error_response(exc: Exception):
    """JSON error body ``{success: false, message}`` with the mapped HTTP status."""
    status = status_for(exc)
    body = {"success": False, "message": str(exc)}

    if isinstance(exc, CooldownActive) and exc.remaining_seconds is not None:
        body["remainingSeconds"] = exc.remaining_seconds
    if isinstance(exc, StorageUnavailable):
        logger.exception("Attendance storage unavailable")
        body["message"] = "Attendance storage is temporarily unavailable"

    return jsonify(body), status


def parse_bool(value, default: bool = False) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in {"1", "true", "yes", "on"}


def json_object_body() -> dict:
    """Request JSON as a dict; a missing or unparsable body counts as empty."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise InvalidInput("Request body must be a JSON object")
    return data
