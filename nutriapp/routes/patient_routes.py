from flask import Blueprint
from nutriapp.controllers import crud_controller as crud
from nutriapp.controllers.meal_plan_controller import active_meal_plan_handler
from nutriapp.controllers.patient_controller import search_patients_handler
from nutriapp.controllers.tracking_controller import latest_progress_handler, progress_range_handler
from nutriapp.utils.auth import with_session

patient_bp = Blueprint("patients", __name__, url_prefix="/api/patients")


@patient_bp.get("")
@with_session
def list_patients():
    return crud.list_handler("patients")


@patient_bp.post("")
@with_session
def create_patient():
    return crud.create_handler("patients")


@patient_bp.get("/search")
@with_session
def search_patients():
    return search_patients_handler()


@patient_bp.get("/<patient_id>")
@with_session
def get_patient(patient_id):
    return crud.get_handler("patients", patient_id)


@patient_bp.put("/<patient_id>")
@with_session
def update_patient(patient_id):
    return crud.update_handler("patients", patient_id)


@patient_bp.delete("/<patient_id>")
@with_session
def delete_patient(patient_id):
    return crud.delete_handler("patients", patient_id)


# Clinical history (one current record per patient)

@patient_bp.get("/<patient_id>/diagnosis")
@with_session
def get_diagnosis(patient_id):
    return crud.latest_by_patient_handler("diagnoses", patient_id)


@patient_bp.put("/<patient_id>/diagnosis")
@with_session
def upsert_diagnosis(patient_id):
    return crud.upsert_by_patient_handler("diagnoses", patient_id)


@patient_bp.get("/<patient_id>/medical-records")
@with_session
def get_medical_records(patient_id):
    return crud.latest_by_patient_handler("medical_records", patient_id)


@patient_bp.put("/<patient_id>/medical-records")
@with_session
def upsert_medical_records(patient_id):
    return crud.upsert_by_patient_handler("medical_records", patient_id)


@patient_bp.get("/<patient_id>/anthropometry")
@with_session
def get_anthropometry(patient_id):
    return crud.latest_by_patient_handler("anthropometry", patient_id)


@patient_bp.post("/<patient_id>/anthropometry")
@with_session
def create_anthropometry(patient_id):
    return crud.create_for_patient_handler("anthropometry", patient_id)


@patient_bp.put("/<patient_id>/anthropometry")
@with_session
def upsert_anthropometry(patient_id):
    return crud.upsert_by_patient_handler("anthropometry", patient_id)


@patient_bp.get("/<patient_id>/anthropometry/history")
@with_session
def anthropometry_history(patient_id):
    return crud.by_patient_handler("anthropometry", patient_id)


# Per-patient listings

@patient_bp.get("/<patient_id>/appointments")
@with_session
def patient_appointments(patient_id):
    return crud.by_patient_handler("appointments", patient_id)


@patient_bp.get("/<patient_id>/consultations")
@with_session
def patient_consultations(patient_id):
    return crud.by_patient_handler("consultations", patient_id)


@patient_bp.get("/<patient_id>/meal-plans")
@with_session
def patient_meal_plans(patient_id):
    return crud.by_patient_handler("meal_plans", patient_id)


@patient_bp.get("/<patient_id>/meal-plans/active")
@with_session
def patient_active_meal_plan(patient_id):
    return active_meal_plan_handler(patient_id)


@patient_bp.get("/<patient_id>/progress")
@with_session
def patient_progress(patient_id):
    return crud.by_patient_handler("progress", patient_id)


@patient_bp.get("/<patient_id>/progress/latest")
@with_session
def patient_latest_progress(patient_id):
    return latest_progress_handler(patient_id)


@patient_bp.get("/<patient_id>/progress/range")
@with_session
def patient_progress_range(patient_id):
    return progress_range_handler(patient_id)
