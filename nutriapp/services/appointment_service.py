from datetime import date
from typing import Optional

from nutriapp.gateway.backends.base import gte
from nutriapp.gateway.envelope import ApiResponse
from nutriapp.gateway.registry import get_gateway
from nutriapp.gateway.session import AuthSession


def get_upcoming_appointments(session: Optional[AuthSession], today: Optional[date] = None) -> ApiResponse:
    """Appointments from today on, soonest first."""
    today = today or date.today()
    return get_gateway("appointments").find(
        session,
        [gte("date", today)],
        order=(("date", True), ("time", True)),
    )
