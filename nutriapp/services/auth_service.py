"""
Auth Service

Nutritionist registration, login and profile. Passwords are hashed with
Werkzeug; identities travel as HS256 JWTs whose subject is the
nutritionist id (the owner id stamped on every scoped record).
"""

from typing import Any, Dict, Optional

from nutriapp.gateway import envelope
from nutriapp.gateway.backends.base import eq
from nutriapp.gateway.envelope import ApiResponse
from nutriapp.gateway.registry import get_gateway
from nutriapp.gateway.session import AuthSession
from nutriapp.schemas.auth_schema import LoginSchema, RegisterSchema
from nutriapp.schemas.base import load_payload
from nutriapp.utils.auth import check_password_hash, create_token, hash_password


def _auth_payload(user: Dict[str, Any]) -> Dict[str, Any]:
    return {"token": create_token(user["id"], user["email"]), "user": user}


def register(payload: Dict[str, Any]) -> ApiResponse:
    data, errors = load_payload(RegisterSchema(), payload if isinstance(payload, dict) else {})
    if errors:
        return envelope.bad_request("Invalid registration data", details=errors)

    nutritionists = get_gateway("nutritionists")
    email = data["email"].strip().lower()
    existing = nutritionists.find(None, [eq("email", email)], limit=1)
    if not existing.is_success:
        return existing
    if existing.data:
        return envelope.error("EMAIL_IN_USE", "email already registered", 409)

    password = data.pop("password")
    created = nutritionists.create(None, {**data, "email": email, "password_hash": hash_password(password)})
    if not created.is_success:
        return created
    return envelope.created(_auth_payload(created.data))


def login(payload: Dict[str, Any]) -> ApiResponse:
    data, errors = load_payload(LoginSchema(), payload if isinstance(payload, dict) else {})
    if errors:
        return envelope.bad_request("email and password required", details=errors)

    nutritionists = get_gateway("nutritionists")
    found = nutritionists.find(None, [eq("email", data["email"].strip().lower())], limit=1, include_hidden=True)
    if not found.is_success:
        return found

    user = found.data[0] if found.data else None
    if not user or not user.get("password_hash") or not check_password_hash(user["password_hash"], data["password"]):
        return envelope.error("INVALID_CREDENTIALS", "Email or password incorrect", 401)

    user = {k: v for k, v in user.items() if k not in nutritionists.entity.hidden_fields}
    return envelope.success(_auth_payload(user))


def get_profile(session: Optional[AuthSession]) -> ApiResponse:
    if session is None:
        return envelope.unauthorized()
    return get_gateway("nutritionists").get_by_id(session, session.user_id)


def update_profile(session: Optional[AuthSession], payload: Dict[str, Any]) -> ApiResponse:
    if session is None:
        return envelope.unauthorized()
    return get_gateway("nutritionists").update(session, session.user_id, payload)
