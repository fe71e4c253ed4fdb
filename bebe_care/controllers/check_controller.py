from flask import current_app

from bebe_care.extensions import db
from bebe_care.schemas.check_schema import UpsertCheckSchema, ListCheckQuerySchema
from bebe_care.services.errors import ServiceError
from bebe_care.services.check_service import list_checks, upsert_check
from bebe_care.utils.http import ok, error, json_body, query_args, service_error, validate_schema


def list_checks_handler():
    params, errors = validate_schema(ListCheckQuerySchema, query_args())
    if errors:
        return error("VALIDATION_ERROR", "month=YYYY-MM is required", 400, details=errors)

    try:
        return ok(list_checks(params["month"]))
    except ServiceError as e:
        return service_error(e)
    except Exception:
        current_app.logger.exception("GET /checks failed")
        return error("UNKNOWN_ERROR", "Error fetching checks", 500)


def upsert_check_handler():
    data, errors = validate_schema(UpsertCheckSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "date, foodId and meal are required", 400, details=errors)

    try:
        return ok(upsert_check(data["date"], data["food_id"], data["meal"], data["checked"]))
    except ServiceError as e:
        return service_error(e)
    except Exception:
        db.session.rollback()
        current_app.logger.exception("POST /checks failed")
        return error("UNKNOWN_ERROR", "Error saving check", 500)
