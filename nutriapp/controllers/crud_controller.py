"""Generic handlers shared by every resource blueprint."""

from nutriapp.gateway import get_gateway
from nutriapp.utils.auth import current_session
from nutriapp.utils.http import json_body, respond


def list_handler(name: str):
    return respond(get_gateway(name).get_all(current_session()))


def get_handler(name: str, record_id: str):
    return respond(get_gateway(name).get_by_id(current_session(), record_id))


def create_handler(name: str):
    return respond(get_gateway(name).create(current_session(), json_body()))


def update_handler(name: str, record_id: str):
    return respond(get_gateway(name).update(current_session(), record_id, json_body()))


def delete_handler(name: str, record_id: str):
    return respond(get_gateway(name).delete(current_session(), record_id))


def by_patient_handler(name: str, patient_id: str):
    return respond(get_gateway(name).get_by_parent(current_session(), patient_id))


def latest_by_patient_handler(name: str, patient_id: str):
    return respond(get_gateway(name).get_latest_by_parent(current_session(), patient_id))


def upsert_by_patient_handler(name: str, patient_id: str):
    return respond(get_gateway(name).upsert_by_parent(current_session(), patient_id, json_body()))


def create_for_patient_handler(name: str, patient_id: str):
    payload = json_body()
    if isinstance(payload, dict):
        payload = {**payload, "patient_id": patient_id}
    return respond(get_gateway(name).create(current_session(), payload))
