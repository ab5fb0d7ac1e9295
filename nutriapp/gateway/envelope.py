"""
Response Envelope Module

Every gateway operation returns an ``ApiResponse``. It is the only channel
through which failures cross the gateway boundary:

- ``data``: payload or None
- ``error``: ``ApiError(code, message, details)`` or None
- ``status`` / ``status_text``: HTTP-style classification
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from nutriapp.gateway.result import Err

# Row not found when exactly one row was expected
ROW_NOT_FOUND = "PGRST116"

STATUS_TEXTS: Dict[int, str] = {
    200: "OK",
    201: "Created",
    204: "No Content",
    400: "Bad Request",
    401: "Unauthorized",
    403: "Forbidden",
    404: "Not Found",
    409: "Conflict",
    422: "Unprocessable Entity",
    500: "Internal Server Error",
}

ERROR_STATUS_MAP: Dict[str, int] = {
    ROW_NOT_FOUND: 404,
    "22P02": 400,  # invalid input syntax
    "23502": 400,  # not null violation
    "23503": 400,  # foreign key violation
    "23505": 409,  # unique violation
    "23514": 422,  # check violation
    "42501": 403,  # insufficient privilege
    "PGRST301": 403,  # row-level security violation
    "invalid_grant": 401,
    "invalid_credentials": 401,
}


def status_text(status: int) -> str:
    return STATUS_TEXTS.get(status, "Unknown")


def status_for_code(code: Optional[str]) -> int:
    if not code:
        return 500
    return ERROR_STATUS_MAP.get(code, 500)


@dataclass(frozen=True)
class ApiError:
    code: str
    message: str
    details: Optional[Any] = None

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"code": self.code, "message": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


@dataclass(frozen=True)
class ApiResponse:
    data: Any = None
    error: Optional[ApiError] = None
    status: int = 200
    status_text: str = field(default="")

    def __post_init__(self):
        if not self.status_text:
            object.__setattr__(self, "status_text", status_text(self.status))

    @property
    def is_success(self) -> bool:
        return self.error is None and 200 <= self.status < 300

    def to_dict(self) -> Dict[str, Any]:
        return {
            "data": self.data,
            "error": self.error.to_dict() if self.error else None,
            "status": self.status,
            "statusText": self.status_text,
        }


def success(data: Any) -> ApiResponse:
    return ApiResponse(data=data, status=200)


def created(data: Any) -> ApiResponse:
    return ApiResponse(data=data, status=201)


def no_content() -> ApiResponse:
    return ApiResponse(status=204)


def error(code: str, message: str, status: int = 500, details: Any = None) -> ApiResponse:
    return ApiResponse(error=ApiError(code, message, details), status=status)


def bad_request(message: str, details: Any = None) -> ApiResponse:
    return error("BAD_REQUEST", message, 400, details)


def unauthorized() -> ApiResponse:
    return error("UNAUTHORIZED", "User not authenticated", 401)


def not_found(resource: str) -> ApiResponse:
    return error("NOT_FOUND", f"{resource} not found", 404)


def unknown_error(message: str = "An unexpected error occurred") -> ApiResponse:
    return error("UNKNOWN_ERROR", message, 500)


def from_backend_error(err: Err, resource: Optional[str] = None) -> ApiResponse:
    """Map a backend ``Err`` onto the envelope's status taxonomy."""
    if err.code == ROW_NOT_FOUND and resource:
        return not_found(resource)
    if not err.code:
        return unknown_error(err.message or "An unexpected error occurred")
    return error(err.code, err.message, status_for_code(err.code), err.details)
