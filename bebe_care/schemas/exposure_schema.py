from marshmallow import Schema, fields, validate
from bebe_care.utils.enums import Outcome

class RegisterExposureSchema(Schema):
    date = fields.Date(required=True)
    food_id = fields.Int(required=True, data_key="foodId")
    notes = fields.Str(allow_none=True, load_default=None)

class ListExposureQuerySchema(Schema):
    date_from = fields.Date(load_default=None, data_key="from")
    date_to = fields.Date(load_default=None, data_key="to")

class SubmitOutcomeSchema(Schema):
    food_id = fields.Int(required=True, data_key="foodId")
    outcome = fields.Str(required=True, validate=validate.OneOf([e.value for e in Outcome]))
