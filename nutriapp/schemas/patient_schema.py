from marshmallow import fields, validate
from nutriapp.schemas.base import BaseSchema, NonNegative, OneOf, OptionalText, Positive, RequiredText
from nutriapp.utils.enums import Gender


class PatientSchema(BaseSchema):
    full_name = RequiredText("full_name", max_length=150)
    control_number = OptionalText(50)
    email = OptionalText(120, validators=[validate.Email()])
    phone = OptionalText(30)
    date_of_birth = fields.Date(allow_none=True)
    age = fields.Int(allow_none=True, validate=validate.Range(min=0, max=150))
    gender = OneOf(Gender, allow_none=True)
    career = OptionalText(120)

    # Anthropometry snapshot, bmi is derived
    height_cm = Positive("height_cm", allow_none=True)
    weight_kg = Positive("weight_kg", allow_none=True)
    body_fat_percentage = NonNegative(max_value=100)
    muscle_mass_kg = NonNegative()
    waist_cm = NonNegative()
    hip_cm = NonNegative()

    medical_conditions = OptionalText()
    allergies = OptionalText()
    dietary_restrictions = OptionalText()
    goals = OptionalText()
    notes = OptionalText()
    photo_path = OptionalText(500)
