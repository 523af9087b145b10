"""Bank catalog endpoints."""

from __future__ import annotations

from flask import Blueprint

from fintrack.api.deps import require_auth, service_context, success_response, timing
from fintrack.schemas import BankSchema
from fintrack.services import CatalogService

bp = Blueprint("banks", __name__)

bank_schema = BankSchema()
bank_list_schema = BankSchema(many=True)


@bp.get("")
@require_auth
@timing
def list_banks():
    banks = CatalogService(ctx=service_context()).list_banks()
    return success_response(bank_list_schema.dump(banks), "return all banks")


@bp.get("/<int:bank_id>")
@require_auth
@timing
def get_bank(bank_id: int):
    bank = CatalogService(ctx=service_context()).get_bank(bank_id)
    return success_response(bank_schema.dump(bank), "bank successfully returned")
