"""
Meal Plan Service

Keeps at most one active meal plan per patient. Activation is two steps
(deactivate the patient's other plans, then write this one) with no
transaction around them: a failure in between leaves the patient with no
active plan, and concurrent activations may both succeed.
"""

import logging
from typing import Any, Dict, Optional

from nutriapp.gateway import envelope
from nutriapp.gateway.backends.base import eq, neq
from nutriapp.gateway.envelope import ApiResponse
from nutriapp.gateway.registry import get_gateway
from nutriapp.gateway.session import AuthSession
from nutriapp.schemas.base import load_payload
from nutriapp.utils.http import parse_iso_date

logger = logging.getLogger(__name__)


def _validated(schema, payload, partial=False):
    if not isinstance(payload, dict):
        return None, envelope.bad_request("Invalid meal plan data")
    data, errors = load_payload(schema, payload, partial=partial)
    if errors:
        return None, envelope.bad_request("Invalid meal plan data", details=errors)
    return data, None


def _check_date_range(data: Dict[str, Any], current: Dict[str, Any]) -> Optional[ApiResponse]:
    """Reject an update whose merged end_date falls before the merged start_date."""
    start = data["start_date"] if "start_date" in data else parse_iso_date(current.get("start_date"))
    end = data["end_date"] if "end_date" in data else parse_iso_date(current.get("end_date"))
    if start and end and end < start:
        return envelope.bad_request(
            "Invalid meal plan data",
            details={"end_date": ["end_date cannot be before start_date"]},
        )
    return None


def create_meal_plan(session: Optional[AuthSession], payload: Dict[str, Any]) -> ApiResponse:
    plans = get_gateway("meal_plans")
    data, invalid = _validated(plans.entity.create_schema, payload)
    if invalid:
        return invalid

    if data.get("is_active"):
        patient_id = data["patient_id"]
        writable = plans.check_parent_writable(session, patient_id)
        if not writable.is_success:
            return writable
        reset = plans.deactivate(session, [eq("patient_id", patient_id)], "is_active")
        if not reset.is_success:
            return reset
        logger.info("Deactivated %d meal plan(s) for patient %s", len(reset.data), patient_id)

    return plans.create(session, payload)


def update_meal_plan(session: Optional[AuthSession], plan_id: str, payload: Dict[str, Any]) -> ApiResponse:
    plans = get_gateway("meal_plans")
    data, invalid = _validated(plans.entity.update_schema, payload, partial=True)
    if invalid:
        return invalid

    current = plans.get_by_id(session, plan_id)
    if not current.is_success:
        return current
    invalid = _check_date_range(data, current.data)
    if invalid:
        return invalid

    if data.get("is_active"):
        reset = plans.deactivate(
            session,
            [eq("patient_id", current.data["patient_id"]), neq("id", plan_id)],
            "is_active",
        )
        if not reset.is_success:
            return reset

    return plans.update(session, plan_id, payload)


def activate_meal_plan(session: Optional[AuthSession], plan_id: str) -> ApiResponse:
    return update_meal_plan(session, plan_id, {"is_active": True})


def get_active_meal_plan(session: Optional[AuthSession], patient_id: str) -> ApiResponse:
    plans = get_gateway("meal_plans")
    found = plans.get_by_parent(session, patient_id)
    if not found.is_success:
        return found
    active = [plan for plan in found.data if plan.get("is_active")]
    if not active:
        return envelope.not_found("Active meal plan")
    return envelope.success(active[0])
