from marshmallow import Schema, fields, validate

class CreateRecipeSchema(Schema):
    title = fields.Str(required=True, validate=validate.Length(min=1))
    suitable_from = fields.Int(required=True, validate=validate.Range(min=0, max=36))
    steps = fields.Str(required=True, validate=validate.Length(min=1))
    freeze_ok = fields.Bool(load_default=True)
    food_ids = fields.List(fields.Int(), load_default=[], data_key="foodIds")

class ListRecipeQuerySchema(Schema):
    suitable_to = fields.Int(load_default=None, data_key="suitableTo")
    food_id = fields.Int(load_default=None, data_key="foodId")
