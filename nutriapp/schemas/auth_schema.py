from marshmallow import fields, validate
from nutriapp.schemas.base import BaseSchema, OptionalText, RequiredText


class RegisterSchema(BaseSchema):
    email = fields.Email(required=True)
    password = fields.Str(required=True, load_only=True, validate=validate.Length(min=6))
    full_name = RequiredText("full_name", max_length=150)
    license_number = OptionalText(50)
    specialization = OptionalText(120)
    phone = OptionalText(30)


class LoginSchema(BaseSchema):
    email = fields.Email(required=True)
    password = fields.Str(required=True, load_only=True, validate=validate.Length(min=1))


class NutritionistSchema(BaseSchema):
    email = fields.Email(required=True)
    full_name = RequiredText("full_name", max_length=150)
    password_hash = fields.Str(load_only=True)
    license_number = OptionalText(50)
    specialization = OptionalText(120)
    phone = OptionalText(30)
