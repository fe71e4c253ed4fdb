"""
Food Helper Functions

Serialization of catalog and diary rows into JSON-ready dictionaries.
"""

from datetime import date, datetime
from typing import Any, Dict, Optional

from bebe_care.models.daily_check import DailyFoodCheck
from bebe_care.models.exposure import Exposure
from bebe_care.models.food import Food
from bebe_care.models.recipe import Recipe


def _iso(value) -> Optional[str]:
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return value


def serialize_food(food: Food) -> Dict[str, Any]:
    return {
        "id": food.id,
        "name": food.name,
        "category": food.category,
        "allergen": bool(food.allergen),
        "created_at": _iso(food.created_at),
    }


def food_fields(food: Food) -> Dict[str, Any]:
    """Columns of the referenced food that list endpoints join in."""
    return {
        "food_name": food.name,
        "category": food.category,
        "allergen": bool(food.allergen),
    }


def serialize_exposure(exposure: Exposure) -> Dict[str, Any]:
    return {
        "id": exposure.id,
        "date": _iso(exposure.date),
        "food_id": exposure.food_id,
        "notes": exposure.notes,
        "tolerated": exposure.tolerated,
        "outcome": exposure.outcome,
        "created_at": _iso(exposure.created_at),
    }


def serialize_check(check: DailyFoodCheck) -> Dict[str, Any]:
    return {
        "id": check.id,
        "date": _iso(check.date),
        "food_id": check.food_id,
        "meal": check.meal,
        "checked": bool(check.checked),
        "created_at": _iso(check.created_at),
    }


def serialize_recipe(recipe: Recipe) -> Dict[str, Any]:
    return {
        "id": recipe.id,
        "title": recipe.title,
        "suitable_from": recipe.suitable_from,
        "steps": recipe.steps,
        "freeze_ok": bool(recipe.freeze_ok),
        "created_at": _iso(recipe.created_at),
        "food_ids": sorted(food.id for food in recipe.foods),
    }
