from flask import Blueprint
from bebe_care.controllers.check_controller import list_checks_handler, upsert_check_handler

check_bp = Blueprint("checks", __name__, url_prefix="/checks")

@check_bp.route("", methods=["GET"])
def list_checks():
    return list_checks_handler()

@check_bp.route("", methods=["POST"])
def upsert_check():
    return upsert_check_handler()
