"""Account endpoints; all routes require an access token."""

from __future__ import annotations

from flask import Blueprint, request

from fintrack.api.deps import require_auth, service_context, success_response, timing
from fintrack.schemas import AccountCreateSchema, AccountSchema, AccountUpdateSchema
from fintrack.services import AccountCreateIn, AccountService, AccountUpdateIn

bp = Blueprint("accounts", __name__)

account_schema = AccountSchema()
account_list_schema = AccountSchema(many=True)
account_create_schema = AccountCreateSchema()
account_update_schema = AccountUpdateSchema()


def _service() -> AccountService:
    return AccountService(ctx=service_context())


@bp.post("")
@require_auth
@timing
def create_account():
    """Create an account owned by the caller."""

    payload = account_create_schema.load(request.get_json(silent=True) or {})
    account = _service().create(AccountCreateIn(**payload))
    return success_response(
        account_schema.dump(account), "account successfully created", status=201
    )


@bp.get("")
@require_auth
@timing
def list_accounts():
    """Return every account owned by the caller."""

    accounts = _service().list()
    return success_response(account_list_schema.dump(accounts), "return all accounts")


@bp.get("/<int:account_id>")
@require_auth
@timing
def get_account(account_id: int):
    account = _service().get(account_id)
    return success_response(account_schema.dump(account), "account successfully returned")


@bp.patch("/<int:account_id>")
@require_auth
@timing
def update_account(account_id: int):
    """Partially update one of the caller's accounts."""

    payload = account_update_schema.load(request.get_json(silent=True) or {})
    account = _service().update(account_id, AccountUpdateIn(**payload))
    return success_response(account_schema.dump(account), "account successfully updated")


@bp.delete("/<int:account_id>")
@require_auth
@timing
def delete_account(account_id: int):
    _service().delete(account_id)
    return success_response(None, "account successfully deleted")
