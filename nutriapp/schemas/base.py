from marshmallow import EXCLUDE, Schema, ValidationError, fields, validate


class BaseSchema(Schema):
    class Meta:
        # Clients echo back server-owned fields (id, created_at, ...); drop them
        unknown = EXCLUDE


class TrimmedString(fields.String):
    """String field that strips surrounding whitespace.

    With ``blank_as_none`` an all-whitespace value loads as ``None`` instead
    of an empty string.
    """

    def __init__(self, *args, blank_as_none=False, **kwargs):
        super().__init__(*args, **kwargs)
        self.blank_as_none = blank_as_none

    def _deserialize(self, value, attr, data, **kwargs):
        result = super()._deserialize(value, attr, data, **kwargs).strip()
        if not result and self.blank_as_none:
            return None
        return result

    def _validate(self, value):
        if value is None:
            return
        super()._validate(value)


def RequiredText(label: str, max_length: int = None):
    return TrimmedString(
        required=True,
        validate=validate.Length(min=1, max=max_length, error=f"{label} is required and cannot be empty"),
    )


def OptionalText(max_length: int = None, validators=()):
    validators = list(validators)
    if max_length:
        validators.append(validate.Length(max=max_length))
    return TrimmedString(allow_none=True, blank_as_none=True, validate=validators)


def Positive(label: str, **kwargs):
    return fields.Float(
        validate=validate.Range(min=0, min_inclusive=False, error=f"{label} must be greater than 0"),
        **kwargs,
    )


def NonNegative(field_cls=fields.Float, max_value=None):
    return field_cls(allow_none=True, validate=validate.Range(min=0, max=max_value))


def OneOf(enum_cls, **kwargs):
    return fields.Str(validate=validate.OneOf([e.value for e in enum_cls]), **kwargs)


def load_payload(schema: Schema, payload, partial: bool = False):
    """Load ``payload``; return ``(data, None)`` or ``(None, messages)``."""
    try:
        return schema.load(payload, partial=partial), None
    except ValidationError as err:
        return None, err.messages
