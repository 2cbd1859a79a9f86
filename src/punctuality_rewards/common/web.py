from __future__ import annotations

from dataclasses import dataclass
from functools import wraps

from flask import jsonify, session

from ..core.enums import Role
from ..core.exceptions import DomainError
from ..core.results import Failure


@dataclass(frozen=True)
class Identity:
    """Caller identity put into the Flask session by the external auth layer."""

    user_id: int
    role: Role


def current_identity() -> Identity:
    return Identity(user_id=int(session["user_id"]), role=Role.parse(session.get("role")))


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return jsonify({"success": False, "error": "Unauthorized", "message": "Please sign in"}), 401
        return view(*args, **kwargs)

    return wrapper


def failure_response(failure: Failure):
    return jsonify(failure.to_dict()), failure.status_code


def error_response(error: DomainError):
    return failure_response(Failure.from_error(error))


def result_response(result, *, status_code: int = 200):
    if not result.ok:
        return failure_response(result)
    return jsonify(result.value.to_dict()), status_code
