from marshmallow import fields, validate

from .. import ma
from .input_schema import InputSchema


class CourseSchema(ma.Schema):
    id = fields.Integer()
    code = fields.String()
    title = fields.String()
    short_description = fields.String()
    category = fields.String()
    organization = fields.String(allow_none=True)
    level = fields.String(allow_none=True)
    duration = fields.String(allow_none=True)
    external_url = fields.String(allow_none=True)


class GigBookSchema(ma.Schema):
    id = fields.Integer()
    title = fields.String()
    topic = fields.String(allow_none=True)
    provider = fields.String(allow_none=True)
    link = fields.String()


class TrialProjectSchema(ma.Schema):
    id = fields.Integer()
    title = fields.String()
    short_description = fields.String()
    domain = fields.String(allow_none=True)
    skills_required = fields.String(allow_none=True)
    difficulty = fields.String(allow_none=True)
    estimated_hours = fields.Integer(allow_none=True)
    budget_range = fields.String(allow_none=True)


_required = dict(required=True, validate=validate.Length(min=1))


class CourseInputSchema(InputSchema):
    title = fields.String(**_required)
    description = fields.String(**_required)
    organization = fields.String(**_required)
    duration = fields.String(**_required)
    level = fields.String(**_required)
    category = fields.String(**_required)
    external_url = fields.String(load_default=None, allow_none=True)


class GigBookInputSchema(InputSchema):
    title = fields.String(**_required)
    link = fields.String(**_required)
    topic = fields.String(load_default=None, allow_none=True)
    provider = fields.String(load_default=None, allow_none=True)


class TrialProjectInputSchema(InputSchema):
    title = fields.String(**_required)
    description = fields.String(**_required)
    domain = fields.String(**_required)
    skills = fields.String(**_required)
    difficulty = fields.String(**_required)
    estimated_hours = fields.Integer(required=True, strict=True, validate=validate.Range(min=0))
    budget_range = fields.String(load_default="Unpaid trial")


class ReportInputSchema(InputSchema):
    name = fields.String(**_required)
    email = fields.Email(required=True)
    category = fields.String(**_required)
    description = fields.String(**_required)


courses_schema = CourseSchema(many=True)
gig_books_schema = GigBookSchema(many=True)
trial_projects_schema = TrialProjectSchema(many=True)
course_input_schema = CourseInputSchema()
gig_book_input_schema = GigBookInputSchema()
trial_project_input_schema = TrialProjectInputSchema()
report_input_schema = ReportInputSchema()
