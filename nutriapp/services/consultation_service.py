from datetime import date, timedelta
from typing import Optional

from nutriapp.gateway.backends.base import gte, lte
from nutriapp.gateway.envelope import ApiResponse
from nutriapp.gateway.registry import get_gateway
from nutriapp.gateway.session import AuthSession

DEFAULT_UPCOMING_DAYS = 7


def get_upcoming_consultations(
    session: Optional[AuthSession],
    days: int = DEFAULT_UPCOMING_DAYS,
    today: Optional[date] = None,
) -> ApiResponse:
    """Consultations dated from today through ``today + days``, soonest first."""
    today = today or date.today()
    return get_gateway("consultations").find(
        session,
        [gte("consultation_date", today), lte("consultation_date", today + timedelta(days=days))],
        order=(("consultation_date", True),),
    )
