from flask import Blueprint
from bebe_care.controllers.recipe_controller import list_recipes_handler, create_recipe_handler

recipe_bp = Blueprint("recipes", __name__, url_prefix="/recipes")

@recipe_bp.route("", methods=["GET"])
def list_recipes():
    return list_recipes_handler()

@recipe_bp.route("", methods=["POST"])
def create_recipe():
    return create_recipe_handler()
