from marshmallow import fields, validate

from .. import ma
from .input_schema import InputSchema


class SubmissionSchema(ma.Schema):
    submission_id = fields.Integer(attribute='id')
    milestone_id = fields.Integer()
    assignment_id = fields.Integer()
    submission_url = fields.String()
    status = fields.String()
    submitted_at = fields.DateTime()
    reviewed_at = fields.DateTime(allow_none=True)


class SubmitInputSchema(InputSchema):
    assignment_id = fields.Integer(required=True, strict=True)
    submission_url = fields.String(required=True, validate=validate.Length(min=1, max=2048))


class ReviewInputSchema(InputSchema):
    assignment_id = fields.Integer(load_default=None, allow_none=True, strict=True)


submission_schema = SubmissionSchema()
submit_input_schema = SubmitInputSchema()
review_input_schema = ReviewInputSchema()
