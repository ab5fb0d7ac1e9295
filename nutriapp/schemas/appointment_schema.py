from marshmallow import fields, validate
from nutriapp.schemas.base import BaseSchema, OneOf, OptionalText, RequiredText
from nutriapp.utils.enums import AppointmentStatus

TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d(:[0-5]\d)?$"


class AppointmentSchema(BaseSchema):
    patient_id = RequiredText("patient_id")
    date = fields.Date(required=True)
    time = fields.Str(required=True, validate=validate.Regexp(TIME_PATTERN, error="time must be HH:MM"))
    doctor_area = OptionalText(150)
    reason = OptionalText()
    status = OneOf(AppointmentStatus, load_default=AppointmentStatus.PENDING.value)
