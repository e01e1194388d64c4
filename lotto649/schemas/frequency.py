"""Schemas for frequency analysis responses."""

from __future__ import annotations

from marshmallow import Schema, fields


class FrequencyEntrySchema(Schema):
    number = fields.Integer(required=True)
    count = fields.Integer(required=True)


class FrequencySummarySchema(Schema):
    total_draws = fields.Integer(required=True)
    entries = fields.List(fields.Nested(FrequencyEntrySchema), required=True)
    min_count = fields.Integer(required=True)
    max_count = fields.Integer(required=True)
    hot_numbers = fields.List(fields.Integer(), required=True)
    cold_numbers = fields.List(fields.Integer(), required=True)
