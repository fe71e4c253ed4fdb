"""
Food Service

Food catalog operations: upsert by name and filtered listing.
"""

import logging
from typing import Any, Dict, List, Optional

from bebe_care.extensions import db
from bebe_care.models.food import Food
from bebe_care.services.errors import NotFoundError, ValidationError
from bebe_care.services.food_helpers import serialize_food
from bebe_care.utils.db import upsert
from bebe_care.utils.enums import FoodCategory

logger = logging.getLogger(__name__)

CATEGORIES = [c.value for c in FoodCategory]


def upsert_food(name: str, category: str, allergen: bool = False) -> Dict[str, Any]:
    """
    Create a food, or overwrite category/allergen when the name already exists.

    Raises:
        ValidationError: If name or category is missing or category is unknown
    """
    name = (name or "").strip()
    category = (category or "").strip()
    if not name or not category:
        raise ValidationError("name and category are required")
    if category not in CATEGORIES:
        raise ValidationError(f"category must be one of: {', '.join(CATEGORIES)}")

    try:
        food = upsert(
            Food,
            {"name": name, "category": category, "allergen": bool(allergen)},
            conflict_columns=["name"],
            update_columns=["category", "allergen"],
        )
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise

    logger.info("Food upserted: %s (%s, allergen=%s)", food.name, food.category, food.allergen)
    return serialize_food(food)


def list_foods(category: Optional[str] = None) -> List[Dict[str, Any]]:
    query = Food.query
    if category:
        query = query.filter(Food.category == category).order_by(Food.name)
    else:
        query = query.order_by(Food.category, Food.name)
    return [serialize_food(food) for food in query.all()]


def get_food(food_id: int) -> Dict[str, Any]:
    food = db.session.get(Food, food_id)
    if not food:
        raise NotFoundError(f"Food {food_id} not found")
    return serialize_food(food)
