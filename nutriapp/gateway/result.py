"""
Tagged results returned by storage backends.

Backends never raise for storage failures; they return ``Ok`` with the
payload or ``Err`` with the backend's error code so the gateway can map it
onto the response envelope.
"""

from dataclasses import dataclass
from typing import Any, Optional, Union


@dataclass(frozen=True)
class Ok:
    value: Any = None

    @property
    def is_ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    code: Optional[str]
    message: str
    details: Optional[str] = None

    @property
    def is_ok(self) -> bool:
        return False


Result = Union[Ok, Err]
