from decimal import Decimal

from marshmallow import ValidationError, fields, validate, validates_schema

from .. import ma
from .input_schema import InputSchema


# Numeric(12, 2): ten integer digits and cents
MAX_AMOUNT = Decimal('9999999999.99')
CENT = Decimal('0.01')


def validate_amount(value):
    if value > MAX_AMOUNT:
        raise ValidationError("Amount is too large")
    if value != value.quantize(CENT):
        raise ValidationError("Amount must have at most 2 decimal places")


class MilestoneSchema(ma.Schema):
    milestone_id = fields.Integer(attribute='id')
    title = fields.String()
    description = fields.String(allow_none=True)
    price = fields.Decimal(as_string=True)
    due_date = fields.Date(allow_none=True)


class ProjectSchema(ma.Schema):
    id = fields.Integer()
    project_name = fields.String(attribute='name')
    deadline = fields.Date(allow_none=True)
    total_value = fields.Decimal(as_string=True)
    created_at = fields.DateTime()


class ProjectDetailSchema(ProjectSchema):
    org_name = fields.Function(lambda project: project.organization.name)
    milestones = fields.Nested(MilestoneSchema, many=True)


class MilestoneInputSchema(InputSchema):
    title = fields.String(required=True, validate=validate.Length(min=1, max=200))
    description = fields.String(load_default=None, allow_none=True)
    price = fields.Decimal(load_default=Decimal('0'), allow_nan=False,
                           validate=[validate.Range(min=0, error="Price must not be negative"), validate_amount])
    due_date = fields.Date(load_default=None, allow_none=True)


class ProjectInputSchema(InputSchema):
    project_name = fields.String(required=True, validate=validate.Length(min=1, max=200))
    deadline = fields.Date(load_default=None, allow_none=True)
    milestones = fields.List(fields.Nested(MilestoneInputSchema), required=True,
                             validate=validate.Length(min=1, error="At least one milestone is required"))

    @validates_schema
    def validate_total(self, data, **kwargs):
        total = sum((m['price'] for m in data.get('milestones', [])), Decimal('0'))
        if total > MAX_AMOUNT:
            raise ValidationError("Total value is too large", field_name='milestones')


milestones_schema = MilestoneSchema(many=True)
project_schema = ProjectSchema()
projects_schema = ProjectSchema(many=True)
project_details_schema = ProjectDetailSchema(many=True)
project_input_schema = ProjectInputSchema()
