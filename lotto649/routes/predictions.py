"""Prediction routes (controllers). No business logic here."""

from __future__ import annotations

from flask import Blueprint, current_app

from lotto649.schemas.prediction import PredictionRecordSchema
from lotto649.services.prediction_service import PredictionService
from lotto649.state import get_state
from lotto649.utils.responses import ok

predictions_bp = Blueprint("predictions", __name__)

_record_schema = PredictionRecordSchema()
_records_schema = PredictionRecordSchema(many=True)


def _service() -> PredictionService:
    return PredictionService(max_retries=int(current_app.config["MAX_SAMPLE_RETRIES"]))


@predictions_bp.get("/predictions")
def list_predictions():
    """Prediction history, newest first."""

    return ok(_records_schema.dump(get_state().history.list_all()))


@predictions_bp.post("/predictions")
def create_prediction():
    """Generate a prediction from the current frequency snapshot."""

    record = _service().generate(get_state())
    return ok(_record_schema.dump(record), status_code=201)
