from datetime import date, datetime
from typing import Any, Dict, Optional, Tuple, Type
from flask import request, jsonify
from marshmallow import EXCLUDE, Schema, ValidationError

def ok(payload: Any, status: int = 200):
    return jsonify(payload), status


def error(code: str, message: str, status: int = 400, **extra):
    body: Dict[str, Any] = {"error": message, "code": code}
    if extra:
        body.update(extra)
    return jsonify(body), status


def service_error(exc):
    """Render a ServiceError raised by the service layer."""
    return error(exc.code, exc.message, exc.status)


def json_body() -> Dict[str, Any]:
    # Try parsing as JSON first (force=True allows missing Content-Type header)
    data = request.get_json(force=True, silent=True)
    if isinstance(data, dict):
        return data
    # Fallback to form data (converted to dict) if JSON parsing fails
    return request.form.to_dict() if request.form else {}


def query_args() -> Dict[str, Any]:
    # Empty query values (?category=) behave like absent ones
    return {k: v for k, v in request.args.items() if v != ""}


def parse_iso_date(value: Any):
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        if isinstance(value, str):
            return date.fromisoformat(value.strip())
    except ValueError:
        pass
    return None


def validate_schema(schema_cls: Type[Schema], data: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
    try:
        return schema_cls(unknown=EXCLUDE).load(data), None
    except ValidationError as err:
        return None, err.messages
