"""State maintenance routes."""

from __future__ import annotations

import logging

from flask import Blueprint

from lotto649.state import get_state
from lotto649.utils.responses import ok

admin_bp = Blueprint("admin", __name__)

logger = logging.getLogger(__name__)


@admin_bp.post("/state/reset")
def reset_state():
    """Drop all draws and predictions."""

    get_state().reset()
    logger.info("In-memory state reset")
    return ok({"draws": 0, "predictions": 0})
