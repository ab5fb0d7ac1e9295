from flask import Blueprint
from nutriapp.controllers import crud_controller as crud
from nutriapp.utils.auth import with_session

progress_bp = Blueprint("progress", __name__, url_prefix="/api/progress")


@progress_bp.get("")
@with_session
def list_progress():
    return crud.list_handler("progress")


@progress_bp.post("")
@with_session
def create_progress_entry():
    return crud.create_handler("progress")


@progress_bp.get("/<record_id>")
@with_session
def get_progress_entry(record_id):
    return crud.get_handler("progress", record_id)


@progress_bp.put("/<record_id>")
@with_session
def update_progress_entry(record_id):
    return crud.update_handler("progress", record_id)


@progress_bp.delete("/<record_id>")
@with_session
def delete_progress_entry(record_id):
    return crud.delete_handler("progress", record_id)
