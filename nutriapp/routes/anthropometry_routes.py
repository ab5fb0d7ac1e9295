from flask import Blueprint
from nutriapp.controllers import crud_controller as crud
from nutriapp.utils.auth import with_session

anthropometry_bp = Blueprint("anthropometry", __name__, url_prefix="/api/anthropometry")


@anthropometry_bp.get("/<record_id>")
@with_session
def get_measurement(record_id):
    return crud.get_handler("anthropometry", record_id)


@anthropometry_bp.put("/<record_id>")
@with_session
def update_measurement(record_id):
    return crud.update_handler("anthropometry", record_id)
