"""Account type catalog endpoint."""

from __future__ import annotations

from flask import Blueprint

from fintrack.api.deps import require_auth, service_context, success_response, timing
from fintrack.schemas import AccountTypeSchema
from fintrack.services import CatalogService

bp = Blueprint("account_types", __name__)

account_type_list_schema = AccountTypeSchema(many=True)


@bp.get("")
@require_auth
@timing
def list_account_types():
    account_types = CatalogService(ctx=service_context()).list_account_types()
    return success_response(
        account_type_list_schema.dump(account_types), "return all account types"
    )
