from datetime import date
from typing import Any, Dict, Optional
from flask import request, jsonify

from nutriapp.gateway.envelope import ApiResponse


def ok(payload: Any, status: int = 200):
    return jsonify(payload), status


def error(code: str, message: str, status: int = 400, **extra):
    body: Dict[str, Any] = {"error": {"code": code, "message": message}}
    if extra:
        body["error"].update({k: v for k, v in extra.items() if v is not None})
    return jsonify(body), status


def respond(result: ApiResponse):
    """Render a gateway envelope as a Flask response."""
    if result.error is not None:
        return error(result.error.code, result.error.message, result.status, details=result.error.details)
    if result.status == 204:
        return "", 204
    return ok(result.data, result.status)


def json_body() -> Dict[str, Any]:
    # force=True allows a missing Content-Type header
    data = request.get_json(force=True, silent=True)
    if data is not None:
        return data
    return request.form.to_dict() if request.form else {}


def arg_str(name: str, default: Optional[str] = None) -> Optional[str]:
    val = request.args.get(name)
    if val is None:
        return default
    return val


def arg_int(name: str, default: int, min_value: Optional[int] = None, max_value: Optional[int] = None) -> int:
    try:
        v = int(request.args.get(name, default))
    except (TypeError, ValueError):
        v = default
    if min_value is not None:
        v = max(min_value, v)
    if max_value is not None:
        v = min(max_value, v)
    return v


def parse_iso_date(value: Any) -> Optional[date]:
    if not isinstance(value, str):
        return None
    try:
        return date.fromisoformat(value.strip())
    except ValueError:
        return None
