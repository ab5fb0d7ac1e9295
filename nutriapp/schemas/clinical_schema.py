from marshmallow import fields
from nutriapp.schemas.base import BaseSchema, OptionalText, Positive, RequiredText


class DiagnosisSchema(BaseSchema):
    patient_id = RequiredText("patient_id")
    malnutrition = fields.Bool()
    underweight = fields.Bool()
    healthy_weight = fields.Bool()
    overweight = fields.Bool()
    obesity_1 = fields.Bool()
    obesity_2 = fields.Bool()
    obesity_3 = fields.Bool()
    diabetes = fields.Bool()
    hypertension = fields.Bool()
    dyslipidemia = fields.Bool()
    nephropathy = fields.Bool()
    other = OptionalText()


class MedicalRecordControlSchema(BaseSchema):
    patient_id = RequiredText("patient_id")
    orientations = OptionalText()
    hcn = OptionalText()
    meal_plan_type = OptionalText()
    first_visit = fields.Bool()
    follow_up = fields.Bool()


class AnthropometrySchema(BaseSchema):
    patient_id = RequiredText("patient_id")
    weight = Positive("weight", required=True)  # kg
    height = Positive("height", required=True)  # meters
