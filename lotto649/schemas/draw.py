"""Schemas for draw submission and listing."""

from __future__ import annotations

from marshmallow import Schema, fields


class DrawSubmissionSchema(Schema):
    """Shape of a submission. Entry contents are parsed leniently by the service."""

    numbers = fields.List(fields.Raw(allow_none=True), required=True)
    bonus = fields.Raw(required=False, load_default=None, allow_none=True)
    date = fields.String(required=False, load_default=None, allow_none=True)


class DrawSchema(Schema):
    """Serialize Draw."""

    date = fields.DateTime(required=True)
    numbers = fields.List(fields.Integer(), required=True)
    bonus = fields.Integer(required=True)
