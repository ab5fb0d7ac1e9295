from marshmallow import fields
from nutriapp.schemas.base import BaseSchema, NonNegative, OneOf, OptionalText, Positive, RequiredText
from nutriapp.utils.enums import ConsultationType


class ConsultationSchema(BaseSchema):
    patient_id = RequiredText("patient_id")
    consultation_date = fields.Date(required=True)
    consultation_type = OneOf(ConsultationType, required=True)
    weight_kg = Positive("weight_kg", allow_none=True)
    height_cm = Positive("height_cm", allow_none=True)
    body_fat_percentage = NonNegative(max_value=100)
    muscle_mass_kg = NonNegative()
    blood_pressure = OptionalText(20)
    notes = OptionalText()
    recommendations = OptionalText()
    next_appointment = fields.Date(allow_none=True)
