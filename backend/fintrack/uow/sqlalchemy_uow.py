"""
SQLAlchemy implementation of UnitOfWork for Flask.
"""

from __future__ import annotations

import logging
from contextlib import suppress

from sqlalchemy import event, text
from sqlalchemy.engine import Connection
from sqlalchemy.exc import InvalidRequestError, SQLAlchemyError
from sqlalchemy.orm import Session, SessionTransaction

from fintrack.core.extensions import db
from fintrack.repositories import (
    AccountRepository,
    AccountTypeRepository,
    BankRepository,
    LanguageRepository,
    SexRepository,
    UserRepository,
)
from fintrack.uow.base import UnitOfWork

log = logging.getLogger(__name__)

# Dialects that understand ``SET TRANSACTION ...`` at the start of a transaction.
_SET_TRANSACTION_DIALECTS = ("postgresql", "mysql", "mariadb")

# Leading SQL verbs rejected inside a read-only scope.
_WRITE_VERBS = frozenset(
    {
        "insert",
        "update",
        "delete",
        "merge",
        "upsert",
        "replace",
        "create",
        "alter",
        "drop",
        "truncate",
        "grant",
        "revoke",
    }
)


def _reject_pending_changes(session, flush_context, instances) -> None:
    if session.new or session.dirty or session.deleted:
        raise RuntimeError("Read-only UnitOfWork: ORM flush blocked.")


def _reject_write_statements(conn, cursor, statement, parameters, context, executemany) -> None:
    verb = statement.lstrip().split(None, 1)[0].lower() if statement else ""
    if verb in _WRITE_VERBS:
        raise RuntimeError(f"Read-only UnitOfWork: SQL statement blocked: {verb.upper()}")


class SQLAlchemyRepositoryContainer:
    """Repositories sharing one SQLAlchemy session."""

    def __init__(self, *, session: Session) -> None:
        self.session = session
        self.users = UserRepository(session=self.session)
        self.accounts = AccountRepository(session=self.session)
        self.banks = BankRepository(session=self.session)
        self.account_types = AccountTypeRepository(session=self.session)
        self.sexes = SexRepository(session=self.session)
        self.languages = LanguageRepository(session=self.session)


class SQLAlchemyUnitOfWork(SQLAlchemyRepositoryContainer, UnitOfWork):
    """
    Read-write UoW on the Flask-scoped session.

    Commits when the ``with`` block exits cleanly, rolls back otherwise.
    """

    def __init__(self) -> None:
        super().__init__(session=db.session)

    def __enter__(self) -> SQLAlchemyUnitOfWork:
        # The session autobegins on first use.
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is not None:
            self.rollback()
            return
        try:
            self.commit()
        except Exception:
            self.rollback()
            raise

    def commit(self) -> None:
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()


class SQLAlchemyReadOnlyUnitOfWork(SQLAlchemyRepositoryContainer, UnitOfWork):
    """
    Read-only UoW on the Flask-scoped session.

    - Owns a fresh transaction when possible and, on PostgreSQL/MySQL, marks it
      ``READ ONLY`` with the requested isolation level.
    - Attaches to an already running transaction otherwise (e.g. the test
      SAVEPOINT fixture); ``SET TRANSACTION`` is skipped in that case.
    - Rejects ORM flushes with pending changes and write statements on the
      connection.
    - Never commits; an owned transaction is always rolled back.

    Parameters
    ----------
    isolation_level:
        Isolation level hint, e.g. ``"READ COMMITTED"``. ``None`` keeps the
        connection default.
    enforce_db_readonly:
        Issue ``SET TRANSACTION READ ONLY`` where supported.
    """

    def __init__(
        self,
        *,
        isolation_level: str | None = "READ COMMITTED",
        enforce_db_readonly: bool = True,
    ) -> None:
        super().__init__(session=db.session)
        self.isolation_level = isolation_level
        self.enforce_db_readonly = enforce_db_readonly

        self._conn: Connection | None = None
        self._owned_txn: SessionTransaction | None = None
        self._guarded = False

    # ----------------------------- Context Manager -----------------------------

    def __enter__(self) -> SQLAlchemyReadOnlyUnitOfWork:
        self._owned_txn = self._begin_or_attach()
        self._conn = self.session.connection()
        self._guard()

        if self._owned_txn is not None and self._conn.dialect.name in _SET_TRANSACTION_DIALECTS:
            self._apply_transaction_directives()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        txn, self._owned_txn = self._owned_txn, None
        try:
            if txn is not None:
                with suppress(SQLAlchemyError):
                    self.session.rollback()
                txn.__exit__(exc_type, exc, tb)
        finally:
            self._unguard()
            self._conn = None

    # ----------------------------- Public API ---------------------------------

    def commit(self) -> None:
        """
        :raises RuntimeError: always; read-only scopes never commit.
        """
        raise RuntimeError("Read-only UnitOfWork does not allow commit().")

    def rollback(self) -> None:
        self.session.rollback()

    # ----------------------------- Internals ----------------------------------

    def _begin_or_attach(self) -> SessionTransaction | None:
        try:
            txn = self.session.begin()
        except InvalidRequestError:
            # A transaction is already begun on this session; attach to it.
            return None
        txn.__enter__()
        return txn

    def _apply_transaction_directives(self) -> None:
        statements = []
        if self.isolation_level:
            statements.append(
                f"SET TRANSACTION ISOLATION LEVEL {self.isolation_level.upper().strip()}"
            )
        if self.enforce_db_readonly:
            statements.append("SET TRANSACTION READ ONLY")
        try:
            for statement in statements:
                self.session.execute(text(statement))
        except SQLAlchemyError as exc:
            log.warning("SET TRANSACTION directives failed (%s); guards only.", exc)

    def _guard(self) -> None:
        if self._guarded:
            return
        event.listen(self.session, "before_flush", _reject_pending_changes)
        event.listen(self._conn, "before_cursor_execute", _reject_write_statements)
        self._guarded = True

    def _unguard(self) -> None:
        if not self._guarded:
            return
        with suppress(InvalidRequestError):
            event.remove(self.session, "before_flush", _reject_pending_changes)
        with suppress(InvalidRequestError):
            event.remove(self._conn, "before_cursor_execute", _reject_write_statements)
        self._guarded = False
