from flask import Blueprint
from nutriapp.controllers import crud_controller as crud
from nutriapp.controllers.tracking_controller import upcoming_consultations_handler
from nutriapp.utils.auth import with_session

consultation_bp = Blueprint("consultations", __name__, url_prefix="/api/consultations")


@consultation_bp.get("")
@with_session
def list_consultations():
    return crud.list_handler("consultations")


@consultation_bp.post("")
@with_session
def create_consultation():
    return crud.create_handler("consultations")


@consultation_bp.get("/upcoming")
@with_session
def upcoming_consultations():
    return upcoming_consultations_handler()


@consultation_bp.get("/<record_id>")
@with_session
def get_consultation(record_id):
    return crud.get_handler("consultations", record_id)


@consultation_bp.put("/<record_id>")
@with_session
def update_consultation(record_id):
    return crud.update_handler("consultations", record_id)


@consultation_bp.delete("/<record_id>")
@with_session
def delete_consultation(record_id):
    return crud.delete_handler("consultations", record_id)
