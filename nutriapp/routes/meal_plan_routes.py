from flask import Blueprint
from nutriapp.controllers import crud_controller as crud
from nutriapp.controllers.meal_plan_controller import (
    activate_meal_plan_handler,
    create_meal_plan_handler,
    update_meal_plan_handler,
)
from nutriapp.utils.auth import with_session

meal_plan_bp = Blueprint("meal_plans", __name__, url_prefix="/api/meal-plans")


@meal_plan_bp.get("")
@with_session
def list_meal_plans():
    return crud.list_handler("meal_plans")


@meal_plan_bp.post("")
@with_session
def create_meal_plan():
    return create_meal_plan_handler()


@meal_plan_bp.get("/<plan_id>")
@with_session
def get_meal_plan(plan_id):
    return crud.get_handler("meal_plans", plan_id)


@meal_plan_bp.put("/<plan_id>")
@with_session
def update_meal_plan(plan_id):
    return update_meal_plan_handler(plan_id)


@meal_plan_bp.patch("/<plan_id>/activate")
@with_session
def activate_meal_plan(plan_id):
    return activate_meal_plan_handler(plan_id)


@meal_plan_bp.delete("/<plan_id>")
@with_session
def delete_meal_plan(plan_id):
    return crud.delete_handler("meal_plans", plan_id)
