"""
Daily Check Service

Per-meal checklist of the foods offered on each day, shown as a monthly
calendar.
"""

import re
from datetime import date
from typing import Any, Dict, List, Tuple

from sqlalchemy.exc import IntegrityError

from bebe_care.extensions import db
from bebe_care.models.daily_check import DailyFoodCheck
from bebe_care.models.food import Food
from bebe_care.services.errors import NotFoundError, ValidationError
from bebe_care.services.exposure_service import coerce_food_id, food_exists
from bebe_care.services.food_helpers import food_fields, serialize_check
from bebe_care.utils.db import upsert
from bebe_care.utils.enums import MealSlot
from bebe_care.utils.http import parse_iso_date

MONTH_PATTERN = re.compile(r"^\d{4}-\d{2}$")
MEALS = [m.value for m in MealSlot]


def month_bounds(month: str) -> Tuple[date, date]:
    """Return [first day of ``month``, first day of the next month)."""
    if not month or not MONTH_PATTERN.match(month):
        raise ValidationError("month=YYYY-MM is required")
    year, mon = int(month[:4]), int(month[5:])
    if not 1 <= mon <= 12:
        raise ValidationError("month=YYYY-MM is required")
    start = date(year, mon, 1)
    end = date(year + 1, 1, 1) if mon == 12 else date(year, mon + 1, 1)
    return start, end


def list_checks(month: str) -> List[Dict[str, Any]]:
    start, end = month_bounds(month)
    rows = (
        db.session.query(DailyFoodCheck, Food)
        .join(Food, Food.id == DailyFoodCheck.food_id)
        .filter(DailyFoodCheck.date >= start, DailyFoodCheck.date < end)
        .order_by(DailyFoodCheck.date, DailyFoodCheck.meal, Food.name)
        .all()
    )
    return [{**serialize_check(check), **food_fields(food)} for check, food in rows]


def upsert_check(check_date, food_id: int, meal: str, checked: bool = False) -> Dict[str, Any]:
    """
    Tick (or untick) a food for one meal of one day.

    Raises:
        ValidationError: If date, food_id or meal is missing or invalid
        NotFoundError: If food_id does not reference a food
    """
    if check_date in (None, "") or not food_id or not meal:
        raise ValidationError("date, foodId and meal are required")
    day = parse_iso_date(check_date)
    if day is None:
        raise ValidationError("date must be in YYYY-MM-DD format")
    if meal not in MEALS:
        raise ValidationError(f"meal must be one of: {', '.join(MEALS)}")
    food_id = coerce_food_id(food_id)

    if not food_exists(food_id):
        raise NotFoundError(f"Food {food_id} not found")

    try:
        check = upsert(
            DailyFoodCheck,
            {"date": day, "food_id": food_id, "meal": meal, "checked": bool(checked)},
            conflict_columns=["date", "food_id", "meal"],
            update_columns=["checked"],
        )
        payload = serialize_check(check)
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        raise NotFoundError(f"Food {food_id} not found")
    except Exception:
        db.session.rollback()
        raise

    return payload
