from marshmallow import fields, validate, validates_schema, ValidationError
from nutriapp.schemas.base import BaseSchema, NonNegative, OneOf, OptionalText, RequiredText
from nutriapp.schemas.appointment_schema import TIME_PATTERN
from nutriapp.utils.enums import MealType


class FoodItemSchema(BaseSchema):
    name = RequiredText("name")
    quantity = fields.Float(required=True, validate=validate.Range(min=0))
    unit = RequiredText("unit")
    calories = NonNegative()
    protein_g = NonNegative()
    carbs_g = NonNegative()
    fat_g = NonNegative()


class MealItemSchema(BaseSchema):
    meal_type = OneOf(MealType, required=True)
    time = fields.Str(allow_none=True, validate=validate.Regexp(TIME_PATTERN, error="time must be HH:MM"))
    foods = fields.List(fields.Nested(FoodItemSchema), load_default=list)
    notes = OptionalText()


class MealPlanSchema(BaseSchema):
    patient_id = RequiredText("patient_id")
    name = RequiredText("name", max_length=150)
    description = OptionalText()
    start_date = fields.Date(required=True)
    end_date = fields.Date(allow_none=True)
    daily_calories = NonNegative(fields.Int)
    daily_protein_g = NonNegative()
    daily_carbs_g = NonNegative()
    daily_fat_g = NonNegative()
    meals = fields.List(fields.Nested(MealItemSchema))
    notes = OptionalText()
    is_active = fields.Bool()

    @validates_schema
    def validate_date_range(self, data, **kwargs):
        start, end = data.get("start_date"), data.get("end_date")
        if start and end and end < start:
            raise ValidationError("end_date cannot be before start_date", field_name="end_date")
