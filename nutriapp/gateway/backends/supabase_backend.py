"""
Supabase Backend Module

Runs table operations through the Supabase client's PostgREST table API.
``APIError`` codes (PGRST*, SQLSTATE) are passed through unchanged; the
gateway maps them onto the envelope.
"""

import logging
from datetime import date, datetime, time
from decimal import Decimal
from typing import Any, Dict, Optional, Sequence

from postgrest.exceptions import APIError
from supabase import Client, create_client

from nutriapp.gateway.backends.base import Filter, Order, TableBackend, TextSearch, first_or_missing
from nutriapp.gateway.result import Err, Ok, Result

logger = logging.getLogger(__name__)


def to_json(value: Any) -> Any:
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, Decimal):
        return float(value)
    if isinstance(value, dict):
        return {k: to_json(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_json(v) for v in value]
    return value


def quote_filter_value(value: str) -> str:
    """Double-quote a value for a PostgREST logic filter (commas, parens, dots)."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def postgrest_pattern(search: TextSearch) -> str:
    """
    PostgREST rewrites every ``*`` in a like operand to ``%`` and offers no
    escape for it. A literal ``*`` becomes ``_`` instead, which matches
    exactly one character (the ``*`` itself among others) rather than any run.
    """
    return search.pattern.replace("*", "_")


def build_or_filter(search: TextSearch) -> str:
    pattern = quote_filter_value(postgrest_pattern(search))
    return ",".join(f"{column}.ilike.{pattern}" for column in search.columns)


class SupabaseBackend(TableBackend):
    name = "supabase"

    def __init__(self, client: Client):
        self.client = client

    @classmethod
    def from_credentials(cls, url: str, key: str) -> "SupabaseBackend":
        if not url or not key:
            raise ValueError("SUPABASE_URL and SUPABASE_KEY are required for the supabase backend")
        return cls(create_client(url, key))

    def _apply_filters(self, query, filters: Sequence[Filter]):
        for f in filters:
            value = to_json(f.value)
            if f.op == "eq":
                query = query.is_(f.column, "null") if value is None else query.eq(f.column, value)
            elif f.op == "neq":
                query = query.not_.is_(f.column, "null") if value is None else query.neq(f.column, value)
            elif f.op == "gte":
                query = query.gte(f.column, value)
            elif f.op == "lte":
                query = query.lte(f.column, value)
        return query

    def _execute(self, query, table: str) -> Result:
        try:
            response = query.execute()
        except APIError as exc:
            logger.warning("Supabase error on %s [%s]: %s", table, exc.code, exc.message)
            return Err(exc.code, exc.message or "Supabase request failed", exc.details)
        return Ok(response.data or [])

    def select(
        self,
        table: str,
        filters: Sequence[Filter] = (),
        order: Sequence[Order] = (),
        limit: Optional[int] = None,
        search: Optional[TextSearch] = None,
        single: bool = False,
    ) -> Result:
        query = self._apply_filters(self.client.table(table).select("*"), filters)
        if search:
            query = query.or_(build_or_filter(search))
        for column, ascending in order:
            query = query.order(column, desc=not ascending)
        if limit:
            query = query.limit(limit)
        result = self._execute(query, table)
        if single and result.is_ok:
            return first_or_missing(result.value, table)
        return result

    def insert(self, table: str, values: Dict[str, Any]) -> Result:
        result = self._execute(self.client.table(table).insert(to_json(values)), table)
        if not result.is_ok:
            return result
        return first_or_missing(result.value, table)

    def update(
        self,
        table: str,
        filters: Sequence[Filter],
        values: Dict[str, Any],
        single: bool = False,
    ) -> Result:
        query = self._apply_filters(self.client.table(table).update(to_json(values)), filters)
        result = self._execute(query, table)
        if single and result.is_ok:
            return first_or_missing(result.value, table)
        return result

    def delete(self, table: str, filters: Sequence[Filter]) -> Result:
        query = self._apply_filters(self.client.table(table).delete(), filters)
        result = self._execute(query, table)
        if not result.is_ok:
            return result
        return Ok(len(result.value))
