from __future__ import annotations

from functools import wraps

from flask import jsonify, request, session

from ..core.exceptions import ValidationError

AUTH_FLAG = "authenticated"


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if not session.get(AUTH_FLAG):
            return jsonify({"success": False, "message": "Please log in to continue."}), 401
        return view(*args, **kwargs)

    return wrapper


def ok(status: int = 200, **data):
    return jsonify({"success": True, **data}), status


def request_data() -> dict:
    """JSON object body, falling back to form fields."""
    data = request.get_json(silent=True)
    if data is None:
        return request.form.to_dict()
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data
