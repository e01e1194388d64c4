"""Web page routes."""

from __future__ import annotations

from flask import Blueprint, current_app, redirect, render_template, request, url_for

from lotto649.models.draw import PICK_COUNT
from lotto649.services.draw_service import DrawService
from lotto649.services.prediction_service import PredictionService
from lotto649.state import get_state

web_bp = Blueprint("web", __name__)

_draw_service = DrawService()


def _blank_form() -> dict:
    return {"date": "", "numbers": [""] * PICK_COUNT, "bonus": ""}


def _render_index(form: dict, status_code: int = 200):
    state = get_state()
    with state.lock:
        context = {
            "form": form,
            "frequency": [{"number": e.number, "count": e.count} for e in state.frequency],
            "prediction": state.prediction,
            "history": state.history.list_all(),
            "total_draws": state.draws.count(),
        }
    return render_template("index.html", **context), status_code


@web_bp.get("/")
def index():
    return _render_index(_blank_form())


@web_bp.post("/draws")
def submit_draw_form():
    numbers = request.form.getlist("numbers")
    bonus = request.form.get("bonus", "")
    date = request.form.get("date", "")

    draw = _draw_service.submit(get_state(), numbers, bonus, date)
    if draw is None:
        # Keep what the user typed.
        padded = (numbers + [""] * PICK_COUNT)[:PICK_COUNT]
        return _render_index({"date": date, "numbers": padded, "bonus": bonus})

    return redirect(url_for("web.index"))


@web_bp.post("/predictions")
def generate_prediction_form():
    service = PredictionService(max_retries=int(current_app.config["MAX_SAMPLE_RETRIES"]))
    service.generate(get_state())
    return redirect(url_for("web.index"))

