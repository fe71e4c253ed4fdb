"""
Recipe Controller Module

Handles recipe listing and creation.
"""

from flask import current_app

from bebe_care.extensions import db
from bebe_care.schemas.recipe_schema import CreateRecipeSchema, ListRecipeQuerySchema
from bebe_care.services.errors import ServiceError
from bebe_care.services.recipe_service import list_recipes, create_recipe
from bebe_care.utils.http import ok, error, json_body, query_args, service_error, validate_schema


def list_recipes_handler():
    """
    Query Parameters:
        - suitableTo: baby's age in months; recipes suitable up to it
        - foodId: only recipes containing this food
    """
    params, errors = validate_schema(ListRecipeQuerySchema, query_args())
    if errors:
        return error("VALIDATION_ERROR", "suitableTo and foodId must be integers", 400, details=errors)

    try:
        return ok(list_recipes(params["suitable_to"], params["food_id"]))
    except Exception:
        current_app.logger.exception("GET /recipes failed")
        return error("UNKNOWN_ERROR", "Error fetching recipes", 500)


def create_recipe_handler():
    data, errors = validate_schema(CreateRecipeSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "title, suitable_from and steps are required", 400, details=errors)

    try:
        result = create_recipe(
            title=data["title"],
            suitable_from=data["suitable_from"],
            steps=data["steps"],
            freeze_ok=data["freeze_ok"],
            food_ids=data["food_ids"],
        )
        return ok(result)
    except ServiceError as e:
        return service_error(e)
    except Exception:
        db.session.rollback()
        current_app.logger.exception("POST /recipes failed")
        return error("UNKNOWN_ERROR", "Error creating recipe", 500)
