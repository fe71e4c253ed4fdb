from bebe_care.models.food import Food
from bebe_care.models.exposure import Exposure
from bebe_care.models.daily_check import DailyFoodCheck
from bebe_care.models.recipe import Recipe, recipe_foods

__all__ = ["Food", "Exposure", "DailyFoodCheck", "Recipe", "recipe_foods"]
