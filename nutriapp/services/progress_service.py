"""
Progress Tracking Service

Latest entry and date-range history for a patient's progress records.
"""

from typing import Optional

from nutriapp.gateway import envelope
from nutriapp.gateway.backends.base import eq, gte, lte
from nutriapp.gateway.envelope import ApiResponse
from nutriapp.gateway.registry import get_gateway
from nutriapp.gateway.session import AuthSession
from nutriapp.utils.http import parse_iso_date


def get_latest_progress(session: Optional[AuthSession], patient_id: str) -> ApiResponse:
    found = get_gateway("progress").get_latest_by_parent(session, patient_id)
    if found.is_success and found.data is None:
        return envelope.not_found("Progress tracking")
    return found


def get_progress_by_date_range(
    session: Optional[AuthSession],
    patient_id: str,
    start: Optional[str],
    end: Optional[str],
) -> ApiResponse:
    """
    Progress entries with ``start <= tracking_date <= end``, oldest first.

    Args:
        patient_id: Patient the entries belong to
        start: ISO date (inclusive)
        end: ISO date (inclusive)
    """
    if not patient_id:
        return envelope.bad_request("Patient ID is required")
    if not start or not end:
        return envelope.bad_request("Start date and end date are required")

    start_date, end_date = parse_iso_date(start), parse_iso_date(end)
    if start_date is None or end_date is None:
        return envelope.bad_request("Invalid date format")
    if start_date > end_date:
        return envelope.bad_request("Start date must not be after end date")

    progress = get_gateway("progress")
    visible = progress.get_by_parent(session, patient_id)
    if not visible.is_success:
        return visible
    return progress.find(
        session,
        [eq("patient_id", patient_id), gte("tracking_date", start_date), lte("tracking_date", end_date)],
        order=(("tracking_date", True),),
    )
