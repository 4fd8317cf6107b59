from marshmallow import fields, validate

from .input_schema import InputSchema


class RegisterSchema(InputSchema):
    name = fields.String(required=True, validate=validate.Length(min=1, max=120))
    email = fields.Email(required=True, validate=validate.Length(max=255))
    password = fields.String(required=True, load_only=True, validate=validate.Length(min=1))
    role = fields.String(required=True, validate=validate.OneOf(['student', 'organization'], error="Invalid role"))
    college_name = fields.String(data_key='collegeName', load_default=None, allow_none=True)
    skills = fields.String(load_default=None, allow_none=True)


class LoginSchema(InputSchema):
    email = fields.String(required=True, validate=validate.Length(min=1))
    password = fields.String(required=True, load_only=True, validate=validate.Length(min=1))


register_schema = RegisterSchema()
login_schema = LoginSchema()
