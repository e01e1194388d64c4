"""Analysis routes (controllers). No business logic here."""

from __future__ import annotations

from flask import Blueprint, current_app, request

from lotto649.errors import ValidationError
from lotto649.models.draw import MAX_NUMBER
from lotto649.schemas.frequency import FrequencySummarySchema
from lotto649.services.frequency_service import FrequencyService
from lotto649.state import get_state
from lotto649.utils.responses import ok

analysis_bp = Blueprint("analysis", __name__)

_frequency_service = FrequencyService()
_summary_schema = FrequencySummarySchema()


@analysis_bp.get("/frequency")
def get_frequency_analysis():
    """Return number frequency counts for 1..49.

    Query params:
    - k: size of the hot/cold buckets (default HOT_COLD_SIZE)
    """

    raw_k = (request.args.get("k") or "").strip()

    # Configured default is clamped; an explicit ?k is validated instead.
    k = min(max(int(current_app.config.get("HOT_COLD_SIZE", 10)), 1), MAX_NUMBER)
    if raw_k:
        try:
            k = int(raw_k)
        except ValueError as e:
            raise ValidationError("k must be an integer") from e

    state = get_state()
    with state.lock:
        draws = state.draws.list_all()
    result = _frequency_service.summarize(draws, hot_cold_size=k)

    return ok(_summary_schema.dump(result))
