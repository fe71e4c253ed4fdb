from flask import Blueprint
from bebe_care.controllers.exposure_controller import (
    list_exposures_handler,
    register_exposure_handler,
    submit_outcome_handler,
)

exposure_bp = Blueprint("exposures", __name__, url_prefix="/exposures")

@exposure_bp.get("")
def list_exposures():
    return list_exposures_handler()


@exposure_bp.post("")
def register_exposure():
    return register_exposure_handler()


# Outcome after the 3rd exposure in 7 days
@exposure_bp.post("/outcome")
def submit_outcome():
    return submit_outcome_handler()
