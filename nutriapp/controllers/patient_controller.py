from nutriapp.gateway import get_gateway
from nutriapp.utils.auth import current_session
from nutriapp.utils.http import arg_str, respond


def search_patients_handler():
    term = arg_str("term") or arg_str("q")
    return respond(get_gateway("patients").search(current_session(), term))
