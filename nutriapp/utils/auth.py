import datetime as dt
from functools import wraps
from typing import Optional

import jwt
from flask import current_app, request
from werkzeug.security import check_password_hash, generate_password_hash

from nutriapp.gateway.session import AuthSession
from nutriapp.utils.http import error


def hash_password(plain: str) -> str:
    return generate_password_hash(plain)


def create_token(user_id: str, email: str) -> str:
    now = dt.datetime.now(dt.timezone.utc)
    hours = current_app.config.get("JWT_EXPIRES_HOURS", 12)
    payload = {
        "sub": str(user_id),
        "email": email,
        "iat": int(now.timestamp()),
        "exp": int((now + dt.timedelta(hours=hours)).timestamp()),
    }
    return jwt.encode(payload, current_app.config["SECRET_KEY"], algorithm="HS256")


def decode_token(token: str):
    return jwt.decode(token, current_app.config["SECRET_KEY"], algorithms=["HS256"])


def current_session() -> Optional[AuthSession]:
    """Session resolved by ``with_session``/``require_auth`` for this request."""
    return getattr(request, "auth_session", None)


def _resolve_session():
    """Return ``(session, error_response)`` from the Authorization header."""
    auth_header = request.headers.get("Authorization", "")
    if not auth_header:
        return None, None
    if not auth_header.startswith("Bearer "):
        return None, error("UNAUTHORIZED", "Missing Bearer token", 401)
    token = auth_header.split(" ", 1)[1]
    try:
        payload = decode_token(token)
        return AuthSession(user_id=payload["sub"], email=payload.get("email")), None
    except (jwt.InvalidTokenError, KeyError):
        return None, error("UNAUTHORIZED", "Invalid token", 401)


def with_session(f):
    """Attach the caller's session if a token is sent; anonymous otherwise.

    Whether anonymous access is allowed is decided by the gateway (owner
    scoping), not here. A malformed or expired token is always rejected.
    """
    @wraps(f)
    def wrapper(*args, **kwargs):
        session, failure = _resolve_session()
        if failure:
            return failure
        request.auth_session = session  # type: ignore
        return f(*args, **kwargs)
    return wrapper


def require_auth(f):
    @wraps(f)
    def wrapper(*args, **kwargs):
        session, failure = _resolve_session()
        if failure:
            return failure
        if session is None:
            return error("UNAUTHORIZED", "Missing Bearer token", 401)
        request.auth_session = session  # type: ignore
        return f(*args, **kwargs)
    return wrapper

__all__ = ["hash_password", "create_token", "require_auth", "with_session", "current_session", "check_password_hash"]
