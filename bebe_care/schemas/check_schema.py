from marshmallow import Schema, fields, validate
from bebe_care.utils.enums import MealSlot

class UpsertCheckSchema(Schema):
    date = fields.Date(required=True)
    food_id = fields.Int(required=True, data_key="foodId")
    meal = fields.Str(required=True, validate=validate.OneOf([e.value for e in MealSlot]))
    checked = fields.Bool(load_default=False)

class ListCheckQuerySchema(Schema):
    month = fields.Str(required=True, validate=validate.Regexp(r"^\d{4}-\d{2}$", error="month=YYYY-MM is required"))
