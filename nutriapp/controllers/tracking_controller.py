from nutriapp.services import appointment_service, consultation_service, progress_service
from nutriapp.services.consultation_service import DEFAULT_UPCOMING_DAYS
from nutriapp.utils.auth import current_session
from nutriapp.utils.http import arg_int, arg_str, respond


def upcoming_appointments_handler():
    return respond(appointment_service.get_upcoming_appointments(current_session()))


def upcoming_consultations_handler():
    days = arg_int("days", DEFAULT_UPCOMING_DAYS, min_value=0, max_value=365)
    return respond(consultation_service.get_upcoming_consultations(current_session(), days))


def latest_progress_handler(patient_id: str):
    return respond(progress_service.get_latest_progress(current_session(), patient_id))


def progress_range_handler(patient_id: str):
    return respond(progress_service.get_progress_by_date_range(
        current_session(),
        patient_id,
        arg_str("start") or arg_str("start_date"),
        arg_str("end") or arg_str("end_date"),
    ))
