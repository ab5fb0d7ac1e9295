from nutriapp.services import meal_plan_service
from nutriapp.utils.auth import current_session
from nutriapp.utils.http import json_body, respond


def create_meal_plan_handler():
    return respond(meal_plan_service.create_meal_plan(current_session(), json_body()))


def update_meal_plan_handler(plan_id: str):
    return respond(meal_plan_service.update_meal_plan(current_session(), plan_id, json_body()))


def activate_meal_plan_handler(plan_id: str):
    return respond(meal_plan_service.activate_meal_plan(current_session(), plan_id))


def active_meal_plan_handler(patient_id: str):
    return respond(meal_plan_service.get_active_meal_plan(current_session(), patient_id))
