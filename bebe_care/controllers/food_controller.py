"""
Food Controller Module

Handles the food catalog endpoints.
"""

from flask import current_app

from bebe_care.extensions import db
from bebe_care.schemas.food_schema import UpsertFoodSchema, ListFoodQuerySchema
from bebe_care.services.errors import ServiceError
from bebe_care.services.food_service import upsert_food, list_foods, get_food
from bebe_care.utils.http import ok, error, json_body, query_args, service_error, validate_schema


def list_foods_handler():
    """
    List foods.

    Query Parameters:
        - category: fruta | verdura | proteina | cereal (optional)
    """
    params, errors = validate_schema(ListFoodQuerySchema, query_args())
    if errors:
        return error("VALIDATION_ERROR", "Invalid category", 400, details=errors)

    try:
        return ok(list_foods(params["category"]))
    except Exception:
        current_app.logger.exception("GET /foods failed")
        return error("UNKNOWN_ERROR", "Error fetching foods", 500)


def get_food_handler(food_id: int):
    try:
        return ok(get_food(food_id))
    except ServiceError as e:
        return service_error(e)
    except Exception:
        current_app.logger.exception("GET /foods/%s failed", food_id)
        return error("UNKNOWN_ERROR", "Error fetching food", 500)


def upsert_food_handler():
    """
    Create a food or update category/allergen of an existing one.

    Body Parameters:
        - name (required)
        - category (required): fruta | verdura | proteina | cereal
        - allergen (optional, default false)
    """
    data, errors = validate_schema(UpsertFoodSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "name and category are required", 400, details=errors)

    try:
        return ok(upsert_food(data["name"], data["category"], data["allergen"]))
    except ServiceError as e:
        return service_error(e)
    except Exception:
        db.session.rollback()
        current_app.logger.exception("POST /foods failed")
        return error("UNKNOWN_ERROR", "Error saving food", 500)
