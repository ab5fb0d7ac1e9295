from marshmallow import fields, validate
from nutriapp.schemas.base import BaseSchema, NonNegative, OneOf, OptionalText, Positive, RequiredText
from nutriapp.utils.enums import Mood


class ProgressTrackingSchema(BaseSchema):
    patient_id = RequiredText("patient_id")
    tracking_date = fields.Date(required=True)
    weight_kg = Positive("weight_kg", allow_none=True)
    body_fat_percentage = NonNegative(max_value=100)
    muscle_mass_kg = NonNegative()
    waist_cm = NonNegative()
    hip_cm = NonNegative()
    chest_cm = NonNegative()
    arm_cm = NonNegative()
    thigh_cm = NonNegative()
    water_intake_ml = NonNegative(fields.Int)
    sleep_hours = fields.Float(allow_none=True, validate=validate.Range(min=0, max=24))
    exercise_minutes = NonNegative(fields.Int)
    mood = OneOf(Mood, allow_none=True)
    energy_level = fields.Int(allow_none=True, validate=validate.Range(min=1, max=10))
    notes = OptionalText()
