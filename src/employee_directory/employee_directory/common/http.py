from __future__ import annotations

from functools import wraps
from typing import Any, Optional

from flask import current_app, jsonify, session

from ..core.enums import Role
from ..store import ALREADY_EXISTS, FORBIDDEN, INVALID_CREDENTIALS, NOT_FOUND, UNEXPECTED, VALIDATION

STATUS_BY_ERROR = {
    NOT_FOUND: 404,
    ALREADY_EXISTS: 409,
    INVALID_CREDENTIALS: 401,
    FORBIDDEN: 403,
    VALIDATION: 400,
    UNEXPECTED: 500,
}


def ok(status: int = 200, **payload: Any):
    return jsonify({"success": True, **payload}), status


def fail(message: str, status: int = 400, **payload: Any):
    return jsonify({"success": False, "message": message, **payload}), status


def status_for(error_code: Optional[str]) -> int:
    return STATUS_BY_ERROR.get(error_code or VALIDATION, 400)


def _store():
    return current_app.extensions["employee_directory"].store


async def _signed_in_employee():
    """Re-read the signed-in person's record; the cookie may predate a delete or role change.

    Returns ``(employee, None)`` or ``(None, response)``.
    """
    if "user_id" not in session:
        return None, fail("Please sign in to continue", 401)

    result = await _store().get_for_user(session["user_id"])
    if result.error:
        if result.error.code != NOT_FOUND:
            return None, fail(result.error.message, status_for(result.error.code))
        session.clear()
        return None, fail("Please sign in to continue", 401)

    employee = result.data
    session["name"] = employee.name
    session["role"] = employee.role.value
    return employee, None


def login_required(view):
    @wraps(view)
    async def wrapper(*args, **kwargs):
        _employee, denied = await _signed_in_employee()
        if denied:
            return denied
        return await view(*args, **kwargs)

    return wrapper


def admin_required(view):
    @wraps(view)
    async def wrapper(*args, **kwargs):
        employee, denied = await _signed_in_employee()
        if denied:
            return denied
        if employee.role != Role.ADMIN:
            return fail("You do not have permission to do this", 403)
        return await view(*args, **kwargs)

    return wrapper


def request_data(request) -> dict:
    """JSON body or form fields, whichever the client sent."""
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form.to_dict()
