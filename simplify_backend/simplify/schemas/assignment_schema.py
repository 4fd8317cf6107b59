from marshmallow import fields

from .. import ma
from .input_schema import InputSchema


class ApplicantSchema(ma.Schema):
    student_id = fields.Integer()
    name = fields.Function(lambda application: application.student.name)
    email = fields.Function(lambda application: application.student.email)
    message = fields.String(allow_none=True)
    status = fields.String()
    applied_at = fields.DateTime()


class AssignmentSchema(ma.Schema):
    assignment_id = fields.Integer(attribute='id')
    project_id = fields.Integer()
    student_id = fields.Integer()
    role = fields.String(allow_none=True)
    status = fields.String()
    assigned_at = fields.DateTime()


class ApplyInputSchema(InputSchema):
    project_id = fields.Integer(required=True, strict=True)
    message = fields.String(load_default=None, allow_none=True)


class AssignInputSchema(InputSchema):
    student_id = fields.Integer(required=True, strict=True)
    role = fields.String(load_default=None, allow_none=True)


applicants_schema = ApplicantSchema(many=True)
assignment_schema = AssignmentSchema()
apply_input_schema = ApplyInputSchema()
assign_input_schema = AssignInputSchema()
