"""
Recipe Service

Handles the recipe catalog: listing by age/food and creation with the
foods each recipe uses.
"""

from typing import Any, Dict, Iterable, List, Optional

from bebe_care.extensions import db
from bebe_care.models.food import Food
from bebe_care.models.recipe import Recipe
from bebe_care.services.errors import NotFoundError, ValidationError
from bebe_care.services.food_helpers import serialize_recipe


def list_recipes(suitable_to: Optional[int] = None, food_id: Optional[int] = None) -> List[Dict[str, Any]]:
    """
    List recipes, youngest suitable age first.

    Args:
        suitable_to: Only recipes suitable from this age (months) or earlier
        food_id: Only recipes that use this food
    """
    query = Recipe.query

    if suitable_to is not None:
        query = query.filter(Recipe.suitable_from <= suitable_to)

    if food_id is not None:
        query = query.filter(Recipe.foods.any(Food.id == food_id))

    recipes = query.order_by(Recipe.suitable_from, Recipe.title).all()
    return [serialize_recipe(recipe) for recipe in recipes]


def create_recipe(
    title: str,
    suitable_from: int,
    steps: str,
    freeze_ok: bool = True,
    food_ids: Iterable[int] = ()
) -> Dict[str, Any]:
    """
    Create a recipe and link it to its foods.

    Returns:
        Dictionary with the new recipe id

    Raises:
        ValidationError: If title, suitable_from or steps is missing
        NotFoundError: If any food id does not exist
    """
    title = (title or "").strip()
    steps = (steps or "").strip()
    if not title or not suitable_from or not steps:
        raise ValidationError("title, suitable_from and steps are required")

    # Duplicate ids are ignored
    try:
        wanted = list(dict.fromkeys(int(fid) for fid in (food_ids or [])))
    except (TypeError, ValueError):
        raise ValidationError("foodIds must be a list of integers")
    foods = Food.query.filter(Food.id.in_(wanted)).all() if wanted else []
    missing = set(wanted) - {food.id for food in foods}
    if missing:
        raise NotFoundError(f"Foods not found: {', '.join(str(fid) for fid in sorted(missing))}")

    try:
        recipe = Recipe(
            title=title,
            suitable_from=int(suitable_from),
            steps=steps,
            freeze_ok=bool(freeze_ok),
        )
        recipe.foods = foods
        db.session.add(recipe)
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise

    return {"id": recipe.id}
