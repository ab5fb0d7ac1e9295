"""
SQLAlchemy Backend Module

Runs table operations through the Flask-SQLAlchemy session against the
local relational database. Database exceptions are translated into
PostgreSQL SQLSTATE codes so both backends share one error taxonomy.
"""

import logging
from datetime import date, datetime
from typing import Any, Dict, Iterable, Optional, Sequence

from sqlalchemy import Date, DateTime, or_
from sqlalchemy.exc import DBAPIError, IntegrityError, SQLAlchemyError, StatementError

from nutriapp.extensions import db
from nutriapp.gateway.backends.base import Filter, Order, TableBackend, TextSearch, first_or_missing
from nutriapp.gateway.result import Err, Ok, Result

logger = logging.getLogger(__name__)

# SQLite reports constraint failures only as messages
_SQLITE_INTEGRITY_CODES = (
    ("UNIQUE constraint failed", "23505"),
    ("NOT NULL constraint failed", "23502"),
    ("FOREIGN KEY constraint failed", "23503"),
    ("CHECK constraint failed", "23514"),
)


def sqlstate_for(exc: SQLAlchemyError) -> Optional[str]:
    """Best-effort SQLSTATE for a SQLAlchemy exception."""
    orig = getattr(exc, "orig", None)
    pgcode = getattr(orig, "pgcode", None)
    if pgcode:
        return pgcode
    if isinstance(exc, IntegrityError):
        message = str(orig or exc)
        for needle, code in _SQLITE_INTEGRITY_CODES:
            if needle in message:
                return code
        return "23000"
    if isinstance(exc, DBAPIError):
        return None
    if isinstance(exc, StatementError):
        # Bind-parameter conversion failed before reaching the database
        return "22P02"
    return None


def _coerce(column, value):
    if not isinstance(value, str):
        return value
    try:
        if isinstance(column.type, DateTime):
            return datetime.fromisoformat(value)
        if isinstance(column.type, Date):
            return date.fromisoformat(value[:10])
    except ValueError:
        return value
    return value


class SQLAlchemyBackend(TableBackend):
    name = "sqlalchemy"

    def __init__(self, models: Iterable):
        self.models = {model.__tablename__: model for model in models}

    def _model(self, table: str):
        try:
            return self.models[table]
        except KeyError:
            raise ValueError(f"Unknown table: {table}")

    def _query(self, model, filters: Sequence[Filter]):
        columns = model.__table__.c
        query = model.query
        for f in filters:
            column = columns[f.column]
            value = _coerce(column, f.value)
            if f.op == "eq":
                query = query.filter(column.is_(None) if value is None else column == value)
            elif f.op == "neq":
                query = query.filter(column.isnot(None) if value is None else column != value)
            elif f.op == "gte":
                query = query.filter(column >= value)
            elif f.op == "lte":
                query = query.filter(column <= value)
        return query

    def _assign(self, model, obj, values: Dict[str, Any]):
        columns = model.__table__.c
        for key, value in values.items():
            setattr(obj, key, _coerce(columns[key], value))

    def _fail(self, exc: SQLAlchemyError, table: str) -> Err:
        db.session.rollback()
        code = sqlstate_for(exc)
        orig = getattr(exc, "orig", None)
        message = str(orig) if orig is not None else str(exc)
        logger.warning("Database error on %s [%s]: %s", table, code, message)
        return Err(code, message)

    def select(
        self,
        table: str,
        filters: Sequence[Filter] = (),
        order: Sequence[Order] = (),
        limit: Optional[int] = None,
        search: Optional[TextSearch] = None,
        single: bool = False,
    ) -> Result:
        model = self._model(table)
        try:
            query = self._query(model, filters)
            if search:
                columns = model.__table__.c
                query = query.filter(or_(*[
                    columns[name].ilike(search.pattern, escape="\\") for name in search.columns
                ]))
            for column, ascending in order:
                col = model.__table__.c[column]
                query = query.order_by(col.asc() if ascending else col.desc())
            if limit:
                query = query.limit(limit)
            rows = [obj.to_dict(include_hidden=True) for obj in query.all()]
        except SQLAlchemyError as exc:
            return self._fail(exc, table)
        if single:
            return first_or_missing(rows, table)
        return Ok(rows)

    def insert(self, table: str, values: Dict[str, Any]) -> Result:
        model = self._model(table)
        try:
            obj = model()
            self._assign(model, obj, values)
            db.session.add(obj)
            db.session.commit()
            # Re-read so server-side values (defaults, trigger-computed bmi) are returned
            db.session.refresh(obj)
            return Ok(obj.to_dict(include_hidden=True))
        except SQLAlchemyError as exc:
            return self._fail(exc, table)

    def update(
        self,
        table: str,
        filters: Sequence[Filter],
        values: Dict[str, Any],
        single: bool = False,
    ) -> Result:
        model = self._model(table)
        try:
            objs = self._query(model, filters).all()
            for obj in objs:
                self._assign(model, obj, values)
            db.session.commit()
            for obj in objs:
                db.session.refresh(obj)
            rows = [obj.to_dict(include_hidden=True) for obj in objs]
        except SQLAlchemyError as exc:
            return self._fail(exc, table)
        if single:
            return first_or_missing(rows, table)
        return Ok(rows)

    def delete(self, table: str, filters: Sequence[Filter]) -> Result:
        model = self._model(table)
        try:
            count = self._query(model, filters).delete(synchronize_session=False)
            db.session.commit()
            return Ok(count)
        except SQLAlchemyError as exc:
            return self._fail(exc, table)
