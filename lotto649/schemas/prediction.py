"""Schemas for prediction responses."""

from __future__ import annotations

from marshmallow import Schema, fields

from lotto649.utils.formatting import format_prediction_line, join_numbers


class PredictionRecordSchema(Schema):
    """Serialize PredictionRecord, including the strings the page shows."""

    date = fields.DateTime(required=True)
    prediction = fields.List(fields.Integer(), required=True)

    text = fields.Method("_text", dump_only=True)
    display = fields.Method("_display", dump_only=True)

    def _text(self, obj) -> str:  # type: ignore[no-untyped-def]
        return join_numbers(obj.prediction)

    def _display(self, obj) -> str:  # type: ignore[no-untyped-def]
        return format_prediction_line(obj.date, obj.prediction)
