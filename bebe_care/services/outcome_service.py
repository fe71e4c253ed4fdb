"""
Outcome Service

Stores the caregiver's verdict once a food sits at exactly 3 exposures in the
7 days ending today.
"""

import logging
from datetime import date
from typing import Any, Dict, Optional

from bebe_care.extensions import db
from bebe_care.models.exposure import Exposure
from bebe_care.services.errors import InvalidStateError, ValidationError
from bebe_care.services.exposure_service import coerce_food_id, exposure_dates_in_window
from bebe_care.services.exposure_window import count_in_window, needs_outcome, window_bounds
from bebe_care.utils.enums import Outcome

logger = logging.getLogger(__name__)

OUTCOMES = [o.value for o in Outcome]


def submit_outcome(food_id: int, outcome: str, today: Optional[date] = None) -> Dict[str, Any]:
    """
    Record the outcome of a completed observation window.

    Every exposure of the food inside the window gets the outcome, and the
    ``tolerated`` flag is rewritten on all of the food's exposures, whatever
    their date: true for ``ok``, false otherwise. A later cycle for the same
    food therefore overwrites the flag left by an earlier one.

    Raises:
        ValidationError: If food_id is missing or outcome is not ok/dudoso/malo
        InvalidStateError: If the food does not have exactly 3 exposures in
            the window ending ``today``
    """
    if not food_id or outcome not in OUTCOMES:
        raise ValidationError("valid foodId and outcome are required")
    food_id = coerce_food_id(food_id)
    today = today or date.today()
    start, end = window_bounds(today)

    try:
        window_count = count_in_window(today, exposure_dates_in_window(food_id, today))
        if not needs_outcome(window_count):
            raise InvalidStateError("food is not exactly at its 3rd exposure")

        (
            Exposure.query
            .filter(Exposure.food_id == food_id, Exposure.date >= start, Exposure.date <= end)
            .update({Exposure.outcome: outcome}, synchronize_session=False)
        )
        (
            Exposure.query
            .filter(Exposure.food_id == food_id)
            .update({Exposure.tolerated: outcome == Outcome.OK.value}, synchronize_session=False)
        )
        db.session.commit()
    except InvalidStateError:
        db.session.rollback()
        logger.warning("Outcome rejected for food %s: %s exposures in window ending %s", food_id, window_count, today)
        raise
    except Exception:
        db.session.rollback()
        raise

    logger.info("Outcome '%s' recorded for food %s", outcome, food_id)
    return {"ok": True}
