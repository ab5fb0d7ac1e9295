from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class AuthSession:
    """Identity of the nutritionist a gateway call acts for.

    Passed explicitly into every gateway operation; ``None`` means the
    caller is anonymous.
    """
    user_id: str
    email: Optional[str] = None
