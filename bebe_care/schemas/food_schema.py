from marshmallow import Schema, fields, validate
from bebe_care.utils.enums import FoodCategory

class UpsertFoodSchema(Schema):
    name = fields.Str(required=True, validate=validate.Length(min=1))
    category = fields.Str(required=True, validate=validate.OneOf([e.value for e in FoodCategory]))
    allergen = fields.Bool(load_default=False)

class ListFoodQuerySchema(Schema):
    category = fields.Str(load_default=None, validate=validate.OneOf([e.value for e in FoodCategory]))
