"""
Entity Gateway Module

One generic gateway, parameterized by an ``Entity`` and a ``TableBackend``,
provides the operation set every table needs:

- get_all / get_by_id / get_by_parent / get_latest_by_parent / find
- search (escaped, case-insensitive, OR across columns)
- create / update (field-level merge) / delete (soft or hard)
- upsert_by_parent (read latest, then update or create; not atomic)

Every operation returns an ``ApiResponse``; nothing raises past the gateway.
"""

import logging
import uuid
from datetime import datetime
from functools import wraps
from typing import Any, Dict, List, Optional, Sequence

from nutriapp.gateway import envelope
from nutriapp.gateway.backends.base import Filter, Order, TableBackend, TextSearch, eq
from nutriapp.gateway.entities import Entity
from nutriapp.gateway.envelope import ApiResponse
from nutriapp.gateway.session import AuthSession
from nutriapp.schemas.base import load_payload

logger = logging.getLogger(__name__)


def guarded(method):
    """Turn any unexpected exception into an UNKNOWN_ERROR envelope."""
    @wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except Exception:
            logger.exception("%s.%s failed", self.entity.name, method.__name__)
            return envelope.unknown_error()
    return wrapper


class EntityGateway:
    def __init__(
        self,
        entity: Entity,
        backend: TableBackend,
        multi_tenant: bool = True,
        parent: Optional["EntityGateway"] = None,
    ):
        self.entity = entity
        self.backend = backend
        self.multi_tenant = multi_tenant
        self.parent = parent

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @property
    def scoped(self) -> bool:
        return self.multi_tenant and self.entity.owner_column is not None

    def _owner_filters(self, session: Optional[AuthSession]) -> List[Filter]:
        if not self.scoped:
            return []
        return [eq(self.entity.owner_column, session.user_id)]

    def _active_filters(self) -> List[Filter]:
        if not self.entity.soft_delete_column:
            return []
        return [eq(self.entity.soft_delete_column, True)]

    def _public(self, row: Dict[str, Any]) -> Dict[str, Any]:
        if not self.entity.hidden_fields:
            return row
        return {k: v for k, v in row.items() if k not in self.entity.hidden_fields}

    def _denied(self, session: Optional[AuthSession]) -> Optional[ApiResponse]:
        if self.scoped and session is None:
            return envelope.unauthorized()
        return None

    def _check_parent(self, session: Optional[AuthSession], parent_id, writing: bool = False) -> Optional[ApiResponse]:
        """
        Reads only need the parent check when tenants share the database (FKs
        cover the rest). Writes always need it: a soft-deleted parent accepts no
        new children.
        """
        if self.parent is None or not (self.multi_tenant or writing):
            return None
        found = self.parent.get_by_id(session, parent_id)
        if not found.is_success:
            return found
        flag = self.parent.entity.soft_delete_column
        if writing and flag and found.data.get(flag) is False:
            return envelope.not_found(self.parent.entity.label)
        return None

    def _fail(self, err) -> ApiResponse:
        return envelope.from_backend_error(err, self.entity.label)

    def _validate(self, schema, payload, partial=False):
        if not isinstance(payload, dict):
            return None, envelope.bad_request(f"Invalid {self.entity.label.lower()} data")
        data, errors = load_payload(schema, payload, partial=partial)
        if errors:
            return None, envelope.bad_request(f"Invalid {self.entity.label.lower()} data", details=errors)
        return data, None

    def _require_id(self, value, what: str = None) -> Optional[ApiResponse]:
        if value is None or (isinstance(value, str) and not value.strip()):
            return envelope.bad_request(f"{what or self.entity.label} ID is required")
        return None

    def _fetch(self, session, record_id) -> Any:
        return self.backend.select(
            self.entity.table,
            filters=[eq("id", record_id)] + self._owner_filters(session),
            single=True,
        )

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    @guarded
    def get_all(self, session: Optional[AuthSession]) -> ApiResponse:
        denied = self._denied(session)
        if denied:
            return denied
        result = self.backend.select(
            self.entity.table,
            filters=self._owner_filters(session) + self._active_filters(),
            order=self.entity.order,
        )
        if not result.is_ok:
            return self._fail(result)
        return envelope.success([self._public(row) for row in result.value])

    @guarded
    def get_by_id(self, session: Optional[AuthSession], record_id) -> ApiResponse:
        missing = self._require_id(record_id)
        if missing:
            return missing
        denied = self._denied(session)
        if denied:
            return denied
        result = self._fetch(session, record_id)
        if not result.is_ok:
            return self._fail(result)
        return envelope.success(self._public(result.value))

    @guarded
    def find(
        self,
        session: Optional[AuthSession],
        filters: Sequence[Filter] = (),
        order: Optional[Sequence[Order]] = None,
        limit: Optional[int] = None,
        include_hidden: bool = False,
    ) -> ApiResponse:
        """Owner-scoped select with extra filters, for service-level queries."""
        denied = self._denied(session)
        if denied:
            return denied
        result = self.backend.select(
            self.entity.table,
            filters=self._owner_filters(session) + self._active_filters() + list(filters),
            order=self.entity.order if order is None else order,
            limit=limit,
        )
        if not result.is_ok:
            return self._fail(result)
        if include_hidden:
            return envelope.success(result.value)
        return envelope.success([self._public(row) for row in result.value])

    @guarded
    def get_by_parent(self, session: Optional[AuthSession], parent_id) -> ApiResponse:
        missing = self._require_id(parent_id, "Patient")
        if missing:
            return missing
        denied = self._denied(session) or self._check_parent(session, parent_id)
        if denied:
            return denied
        return self.find(
            session,
            [eq(self.entity.parent_column, parent_id)],
            order=self.entity.parent_order or self.entity.order,
        )

    @guarded
    def get_latest_by_parent(self, session: Optional[AuthSession], parent_id) -> ApiResponse:
        """Most recent record for the parent; 200 with ``None`` when there is none."""
        missing = self._require_id(parent_id, "Patient")
        if missing:
            return missing
        denied = self._denied(session) or self._check_parent(session, parent_id)
        if denied:
            return denied
        found = self.find(
            session,
            [eq(self.entity.parent_column, parent_id)],
            order=self.entity.latest_order or self.entity.order,
            limit=1,
        )
        if not found.is_success:
            return found
        return envelope.success(found.data[0] if found.data else None)

    @guarded
    def search(self, session: Optional[AuthSession], term: Optional[str]) -> ApiResponse:
        if not term or not term.strip():
            return envelope.bad_request("Search term is required")
        denied = self._denied(session)
        if denied:
            return denied
        result = self.backend.select(
            self.entity.table,
            filters=self._owner_filters(session) + self._active_filters(),
            order=self.entity.order,
            search=TextSearch(self.entity.search_columns, term.strip()),
        )
        if not result.is_ok:
            return self._fail(result)
        return envelope.success([self._public(row) for row in result.value])

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    @guarded
    def create(self, session: Optional[AuthSession], payload: Dict[str, Any]) -> ApiResponse:
        denied = self._denied(session)
        if denied:
            return denied
        data, invalid = self._validate(self.entity.create_schema, payload)
        if invalid:
            return invalid
        if self.entity.parent_column:
            denied = self._check_parent(session, data[self.entity.parent_column], writing=True)
            if denied:
                return denied
        if self.entity.prepare:
            data = self.entity.prepare(data, None)
        if self.scoped:
            data[self.entity.owner_column] = session.user_id
        data["id"] = str(uuid.uuid4())

        result = self.backend.insert(self.entity.table, data)
        if not result.is_ok:
            return self._fail(result)
        return envelope.created(self._public(result.value))

    @guarded
    def update(self, session: Optional[AuthSession], record_id, payload: Dict[str, Any]) -> ApiResponse:
        missing = self._require_id(record_id)
        if missing:
            return missing
        denied = self._denied(session)
        if denied:
            return denied
        current = self._fetch(session, record_id)
        if not current.is_ok:
            return self._fail(current)
        # Partial load: absent fields keep their stored value, explicit nulls clear it
        data, invalid = self._validate(self.entity.update_schema, payload, partial=True)
        if invalid:
            return invalid
        if self.entity.prepare:
            data = self.entity.prepare(data, current.value)
        data[self.entity.timestamp_column] = datetime.utcnow()

        result = self.backend.update(
            self.entity.table,
            filters=[eq("id", record_id)] + self._owner_filters(session),
            values=data,
            single=True,
        )
        if not result.is_ok:
            return self._fail(result)
        return envelope.success(self._public(result.value))

    @guarded
    def delete(self, session: Optional[AuthSession], record_id) -> ApiResponse:
        missing = self._require_id(record_id)
        if missing:
            return missing
        denied = self._denied(session)
        if denied:
            return denied
        current = self._fetch(session, record_id)
        if not current.is_ok:
            return self._fail(current)

        filters = [eq("id", record_id)] + self._owner_filters(session)
        if self.entity.soft_delete_column:
            result = self.backend.update(
                self.entity.table,
                filters=filters,
                values={self.entity.soft_delete_column: False, self.entity.timestamp_column: datetime.utcnow()},
            )
        else:
            result = self.backend.delete(self.entity.table, filters=filters)
        if not result.is_ok:
            return self._fail(result)
        return envelope.no_content()

    @guarded
    def check_parent_writable(self, session: Optional[AuthSession], parent_id) -> ApiResponse:
        """200 when a new child may be attached to ``parent_id``."""
        missing = self._require_id(parent_id, "Patient")
        if missing:
            return missing
        denied = self._denied(session) or self._check_parent(session, parent_id, writing=True)
        if denied:
            return denied
        return envelope.success(None)

    @guarded
    def deactivate(self, session: Optional[AuthSession], filters: Sequence[Filter], column: str) -> ApiResponse:
        """Set ``column`` to False on every owned row matching ``filters``."""
        denied = self._denied(session)
        if denied:
            return denied
        result = self.backend.update(
            self.entity.table,
            filters=self._owner_filters(session) + list(filters),
            values={column: False, self.entity.timestamp_column: datetime.utcnow()},
        )
        if not result.is_ok:
            return self._fail(result)
        return envelope.success([self._public(row) for row in result.value])

    @guarded
    def upsert_by_parent(self, session: Optional[AuthSession], parent_id, payload: Dict[str, Any]) -> ApiResponse:
        """
        Update the parent's latest record, or create one if it has none.

        Two separate backend calls: concurrent upserts for the same parent can
        both miss the existing row (duplicate) or both update (last write wins).
        """
        existing = self.get_latest_by_parent(session, parent_id)
        if not existing.is_success:
            return existing
        if not isinstance(payload, dict):
            return envelope.bad_request(f"Invalid {self.entity.label.lower()} data")
        if existing.data:
            return self.update(session, existing.data["id"], payload)
        return self.create(session, {**payload, self.entity.parent_column: parent_id})
