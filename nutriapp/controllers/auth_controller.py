from nutriapp.services import auth_service
from nutriapp.utils.auth import current_session
from nutriapp.utils.http import json_body, ok, respond


def register_handler():
    return respond(auth_service.register(json_body()))


def login_handler():
    return respond(auth_service.login(json_body()))


def logout_handler():
    """
    Tokens are stateless; the client drops its copy. This endpoint only
    confirms the logout action.
    """
    return ok({"message": "Logged out successfully"})


def me_handler():
    return respond(auth_service.get_profile(current_session()))


def update_me_handler():
    return respond(auth_service.update_profile(current_session(), json_body()))
