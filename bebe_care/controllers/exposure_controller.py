"""
Exposure Controller Module

Handles the exposure diary and the outcome assessment that follows the 3rd
exposure of a food within 7 days.
"""

from flask import current_app

from bebe_care.extensions import db
from bebe_care.schemas.exposure_schema import (
    RegisterExposureSchema,
    ListExposureQuerySchema,
    SubmitOutcomeSchema,
)
from bebe_care.services.errors import ServiceError
from bebe_care.services.exposure_service import register_exposure, list_exposures
from bebe_care.services.outcome_service import submit_outcome
from bebe_care.utils.http import ok, error, json_body, query_args, service_error, validate_schema


def list_exposures_handler():
    """
    List exposures joined with their food.

    Query Parameters:
        - from: first date, inclusive (YYYY-MM-DD)
        - to: last date, inclusive (YYYY-MM-DD)
    """
    params, errors = validate_schema(ListExposureQuerySchema, query_args())
    if errors:
        return error("VALIDATION_ERROR", "from and to must be YYYY-MM-DD dates", 400, details=errors)

    try:
        return ok(list_exposures(params["date_from"], params["date_to"]))
    except ServiceError as e:
        return service_error(e)
    except Exception:
        current_app.logger.exception("GET /exposures failed")
        return error("UNKNOWN_ERROR", "Error fetching exposures", 500)


def register_exposure_handler():
    """
    Register an exposure. The response carries ``needsOutcome`` when this is
    exactly the 3rd exposure of the food in the last 7 days.

    Body Parameters:
        - date (required): YYYY-MM-DD
        - foodId (required)
        - notes (optional)
    """
    data, errors = validate_schema(RegisterExposureSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "date and foodId are required", 400, details=errors)

    try:
        return ok(register_exposure(data["date"], data["food_id"], data["notes"]))
    except ServiceError as e:
        return service_error(e)
    except Exception:
        db.session.rollback()
        current_app.logger.exception("POST /exposures failed")
        return error("UNKNOWN_ERROR", "Error creating exposure", 500)


def submit_outcome_handler():
    """
    Save the outcome after the 3rd exposure.

    Body Parameters:
        - foodId (required)
        - outcome (required): ok | dudoso | malo
    """
    data, errors = validate_schema(SubmitOutcomeSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "valid foodId and outcome are required", 400, details=errors)

    try:
        return ok(submit_outcome(data["food_id"], data["outcome"]))
    except ServiceError as e:
        return service_error(e)
    except Exception:
        db.session.rollback()
        current_app.logger.exception("POST /exposures/outcome failed")
        return error("UNKNOWN_ERROR", "Error saving outcome", 500)
