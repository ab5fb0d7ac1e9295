"""
Storage capability interface.

A backend knows how to run four table operations. It is handed plain
table/column names and filter descriptions, and answers with ``Ok``/``Err``
results whose payloads are plain dicts.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

from nutriapp.gateway.envelope import ROW_NOT_FOUND
from nutriapp.gateway.result import Err, Ok, Result

FILTER_OPS = ("eq", "neq", "gte", "lte")


@dataclass(frozen=True)
class Filter:
    column: str
    op: str
    value: Any

    def __post_init__(self):
        if self.op not in FILTER_OPS:
            raise ValueError(f"Unsupported filter operator: {self.op}")


def eq(column: str, value: Any) -> Filter:
    return Filter(column, "eq", value)


def neq(column: str, value: Any) -> Filter:
    return Filter(column, "neq", value)


def gte(column: str, value: Any) -> Filter:
    return Filter(column, "gte", value)


def lte(column: str, value: Any) -> Filter:
    return Filter(column, "lte", value)


@dataclass(frozen=True)
class TextSearch:
    """Case-insensitive substring match of ``term`` on any of ``columns``."""
    columns: Tuple[str, ...]
    term: str

    @property
    def pattern(self) -> str:
        return f"%{escape_like(self.term)}%"


# (column, ascending)
Order = Tuple[str, bool]


def escape_like(term: str) -> str:
    """Escape LIKE metacharacters so the term only matches literally."""
    return (
        term.replace("\\", "\\\\")
        .replace("%", "\\%")
        .replace("_", "\\_")
    )


class TableBackend(ABC):
    name = "abstract"

    @abstractmethod
    def select(
        self,
        table: str,
        filters: Sequence[Filter] = (),
        order: Sequence[Order] = (),
        limit: Optional[int] = None,
        search: Optional[TextSearch] = None,
        single: bool = False,
    ) -> Result:
        """Return ``Ok(list_of_rows)``, or ``Ok(row)`` when ``single``."""

    @abstractmethod
    def insert(self, table: str, values: Dict[str, Any]) -> Result:
        """Insert one row and return ``Ok(persisted_row)``."""

    @abstractmethod
    def update(
        self,
        table: str,
        filters: Sequence[Filter],
        values: Dict[str, Any],
        single: bool = False,
    ) -> Result:
        """Update matching rows and return ``Ok(rows)``, or ``Ok(row)`` when ``single``."""

    @abstractmethod
    def delete(self, table: str, filters: Sequence[Filter]) -> Result:
        """Delete matching rows and return ``Ok(count)``."""


def first_or_missing(rows: List[Dict[str, Any]], table: str) -> Result:
    if not rows:
        return Err(ROW_NOT_FOUND, f"No rows found in {table}", "The result contains 0 rows")
    return Ok(rows[0])
