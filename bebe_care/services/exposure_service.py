"""
Exposure Service

Records food exposures (one per food per day) and tells the caller when the
food has reached its 3rd exposure inside the trailing 7-day window, which is
when the caregiver should assess how it was tolerated.
"""

import logging
from datetime import date
from typing import Any, Dict, List, Optional

from sqlalchemy.exc import IntegrityError

from bebe_care.extensions import db
from bebe_care.models.exposure import Exposure
from bebe_care.models.food import Food
from bebe_care.services.errors import NotFoundError, ValidationError
from bebe_care.services.exposure_window import count_in_window, needs_outcome, window_bounds
from bebe_care.services.food_helpers import food_fields, serialize_exposure
from bebe_care.utils.db import upsert
from bebe_care.utils.http import parse_iso_date

logger = logging.getLogger(__name__)


def coerce_food_id(food_id) -> int:
    try:
        return int(food_id)
    except (TypeError, ValueError):
        raise ValidationError("foodId must be an integer")


def food_exists(food_id: int) -> bool:
    return db.session.get(Food, food_id) is not None


def exposure_dates_in_window(food_id: int, anchor: date) -> List[date]:
    """Dates of the food's exposures inside the window ending at ``anchor``."""
    start, end = window_bounds(anchor)
    rows = (
        db.session.query(Exposure.date)
        .filter(Exposure.food_id == food_id, Exposure.date >= start, Exposure.date <= end)
        .all()
    )
    return [row.date for row in rows]


def register_exposure(exposure_date, food_id: int, notes: Optional[str] = None) -> Dict[str, Any]:
    """
    Register that a food was offered on a given day.

    A repeat registration for the same (date, food) only replaces the notes.
    The window count is taken relative to the exposure's own date, so
    backfilled entries are evaluated against their own week.

    Returns:
        The persisted exposure plus ``needsOutcome`` and ``windowCount``

    Raises:
        ValidationError: If date or food_id is missing or malformed
        NotFoundError: If food_id does not reference a food
    """
    if exposure_date in (None, "") or not food_id:
        raise ValidationError("date and foodId are required")
    anchor = parse_iso_date(exposure_date)
    if anchor is None:
        raise ValidationError("date must be in YYYY-MM-DD format")
    food_id = coerce_food_id(food_id)

    if not food_exists(food_id):
        raise NotFoundError(f"Food {food_id} not found")

    try:
        exposure = upsert(
            Exposure,
            {"date": anchor, "food_id": food_id, "notes": notes or None},
            conflict_columns=["date", "food_id"],
            update_columns=["notes"],
        )
        window_count = count_in_window(anchor, exposure_dates_in_window(food_id, anchor))
        payload = serialize_exposure(exposure)
        db.session.commit()
    except IntegrityError:
        # Food removed between the lookup and the insert
        db.session.rollback()
        raise NotFoundError(f"Food {food_id} not found")
    except Exception:
        db.session.rollback()
        raise

    due = needs_outcome(window_count)
    if due:
        logger.info("Food %s reached its 3rd exposure on %s, outcome due", food_id, anchor)

    payload["needsOutcome"] = due
    payload["windowCount"] = window_count
    return payload


def list_exposures(date_from=None, date_to=None) -> List[Dict[str, Any]]:
    """
    List exposures with their food's name, category and allergen flag,
    newest date first, then by food name.
    """
    query = db.session.query(Exposure, Food).join(Food, Food.id == Exposure.food_id)

    if date_from not in (None, ""):
        start = parse_iso_date(date_from)
        if start is None:
            raise ValidationError("from must be in YYYY-MM-DD format")
        query = query.filter(Exposure.date >= start)
    if date_to not in (None, ""):
        end = parse_iso_date(date_to)
        if end is None:
            raise ValidationError("to must be in YYYY-MM-DD format")
        query = query.filter(Exposure.date <= end)

    rows = query.order_by(Exposure.date.desc(), Food.name.asc()).all()
    return [{**serialize_exposure(exposure), **food_fields(food)} for exposure, food in rows]
