# fintrack/services/_shared/base.py
from __future__ import annotations

from dataclasses import dataclass

from fintrack.services._shared.errors import ForbiddenError
from fintrack.services._shared.policies.common import is_owner
from fintrack.uow.sqlalchemy_uow import (
    SQLAlchemyReadOnlyUnitOfWork,
    SQLAlchemyUnitOfWork,
)


@dataclass(slots=True)
class ServiceContext:
    """
    Request-scoped data shared by services.

    :param actor_id: Authenticated user id, taken from the access token claim.
    :param request_id: Correlation id for logging.
    """

    actor_id: int | None = None
    request_id: str | None = None


class BaseService:
    """
    Base class for application services.

    Responsibilities
    ----------------
    * Open read-only and read-write units of work.
    * Enforce resource ownership for the acting user.

    Notes
    -----
    - Services never touch the global session directly; they go through a UoW.
    - Services raise :mod:`fintrack.services._shared.errors` types only; the
      HTTP mapping lives in :mod:`fintrack.core.errors`.
    """

    DEFAULT_READ_ISOLATION = "READ COMMITTED"

    def __init__(self, *, ctx: ServiceContext | None = None) -> None:
        self.ctx = ctx or ServiceContext()

    # -------------------------- UoW helpers ---------------------------------

    def rw_uow(self) -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork()

    def ro_uow(
        self, *, isolation: str | None = None, enforce_db_readonly: bool = True
    ) -> SQLAlchemyReadOnlyUnitOfWork:
        """
        Create a read-only Unit of Work.

        :param isolation: Isolation level hint, defaults to ``READ COMMITTED``.
        :type isolation: str | None
        :param enforce_db_readonly: Apply ``SET TRANSACTION READ ONLY`` when supported.
        :type enforce_db_readonly: bool
        :rtype: SQLAlchemyReadOnlyUnitOfWork
        """
        return SQLAlchemyReadOnlyUnitOfWork(
            isolation_level=isolation or self.DEFAULT_READ_ISOLATION,
            enforce_db_readonly=enforce_db_readonly,
        )

    # --------------------------- AuthZ --------------------------------

    def ensure_owner(self, owner_id: int, *, msg: str | None = None) -> None:
        """
        Ensure the acting user owns a resource.

        :param owner_id: ``user_id`` stored on the resource.
        :type owner_id: int
        :param msg: Optional custom error message.
        :type msg: str | None
        :raises ForbiddenError: If the actor is missing or is not the owner.
        """
        if not is_owner(actor_id=self.ctx.actor_id, owner_id=owner_id):
            raise ForbiddenError(msg)

    def require_actor(self) -> int:
        """
        Return the acting user id.

        :raises RuntimeError: When called without an authenticated context;
            protected routes always provide one.
        """
        if self.ctx.actor_id is None:
            raise RuntimeError("Service requires an authenticated actor in its context.")
        return self.ctx.actor_id
