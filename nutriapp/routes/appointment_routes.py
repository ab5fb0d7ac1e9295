from flask import Blueprint
from nutriapp.controllers import crud_controller as crud
from nutriapp.controllers.tracking_controller import upcoming_appointments_handler
from nutriapp.utils.auth import with_session

appointment_bp = Blueprint("appointments", __name__, url_prefix="/api/appointments")


@appointment_bp.get("")
@with_session
def list_appointments():
    return crud.list_handler("appointments")


@appointment_bp.post("")
@with_session
def create_appointment():
    return crud.create_handler("appointments")


@appointment_bp.get("/upcoming")
@with_session
def upcoming_appointments():
    return upcoming_appointments_handler()


@appointment_bp.get("/<record_id>")
@with_session
def get_appointment(record_id):
    return crud.get_handler("appointments", record_id)


@appointment_bp.put("/<record_id>")
@with_session
def update_appointment(record_id):
    return crud.update_handler("appointments", record_id)


@appointment_bp.delete("/<record_id>")
@with_session
def delete_appointment(record_id):
    return crud.delete_handler("appointments", record_id)
