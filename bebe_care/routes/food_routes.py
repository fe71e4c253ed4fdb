from flask import Blueprint
from bebe_care.controllers.food_controller import list_foods_handler, get_food_handler, upsert_food_handler

food_bp = Blueprint("foods", __name__, url_prefix="/foods")

@food_bp.route("", methods=["GET"])
def list_foods():
    return list_foods_handler()

@food_bp.route("", methods=["POST"])
def upsert_food():
    return upsert_food_handler()

@food_bp.route("/<int:id>", methods=["GET"])
def get_food(id):
    return get_food_handler(id)
