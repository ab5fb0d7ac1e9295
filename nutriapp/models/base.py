import uuid
from datetime import date, datetime, time
from decimal import Decimal


def new_id() -> str:
    return str(uuid.uuid4())


def to_json_value(value):
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, Decimal):
        return float(value)
    return value


class SerializerMixin:
    """Column-driven ``to_dict`` shared by every table model."""

    __hidden__ = ()

    def to_dict(self, include_hidden=False):
        return {
            col.name: to_json_value(getattr(self, col.name))
            for col in self.__table__.columns
            if include_hidden or col.name not in self.__hidden__
        }

    def __repr__(self):
        return f"<{type(self).__name__} {getattr(self, 'id', None)}>"
