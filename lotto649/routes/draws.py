"""Draw routes (controllers). No business logic here."""

from __future__ import annotations

from flask import Blueprint, request

from lotto649.schemas.draw import DrawSchema, DrawSubmissionSchema
from lotto649.services.draw_service import DrawService
from lotto649.state import get_state
from lotto649.utils.responses import ok

draws_bp = Blueprint("draws", __name__)

_submission_schema = DrawSubmissionSchema()
_draw_schema = DrawSchema()
_draws_schema = DrawSchema(many=True)
_service = DrawService()


@draws_bp.get("/draws")
def list_draws():
    """List recorded draws in submission order."""

    return ok(_draws_schema.dump(_service.list_draws(get_state())))


@draws_bp.post("/draws")
def submit_draw():
    """Record a draw.

    A submission whose entries do not parse is discarded, not rejected:
    the response says ``accepted: false`` and nothing is stored.
    """

    payload = request.get_json(silent=True) or {}
    data = _submission_schema.load(payload)

    state = get_state()
    draw = _service.submit(state, data["numbers"], data.get("bonus"), data.get("date"))
    if draw is None:
        return ok({"accepted": False, "draw": None, "total_draws": state.draws.count()})

    return ok(
        {"accepted": True, "draw": _draw_schema.dump(draw), "total_draws": state.draws.count()},
        status_code=201,
    )
