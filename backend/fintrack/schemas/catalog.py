"""Schemas for catalog lookups."""

from __future__ import annotations

from marshmallow import Schema, fields


class BankSchema(Schema):
    id = fields.Integer(required=True)
    name = fields.String(required=True)


class AccountTypeSchema(Schema):
    id = fields.Integer(required=True)
    name = fields.String(required=True)
