"""
RegistrationService
===================

Sign-up flow: reject duplicate email or phone and unknown sex or language
references, then hash the password and create the user in one transaction.

Uniqueness is pre-checked so clients get a precise message; the database
unique constraints close the check-then-insert race and are translated to
the same :class:`ConflictError`.
"""

from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError

from fintrack.models.user import User
from fintrack.services._shared.base import BaseService, ServiceContext
from fintrack.services._shared.errors import ConflictError, NotFoundError, violates
from fintrack.services._shared.ports import PasswordHasher, UserDirectory
from fintrack.services.registration.dto import SignUpIn, UserSummaryOut
from fintrack.uow.sqlalchemy_uow import SQLAlchemyRepositoryContainer

log = logging.getLogger(__name__)

EMAIL_TAKEN = "email address is already registered"
PHONE_TAKEN = "phone number is already registered"


class RegistrationService(BaseService):
    """
    Creates user identities.

    :param hasher: Password hashing port.
    :type hasher: PasswordHasher
    """

    def __init__(self, *, hasher: PasswordHasher, ctx: ServiceContext | None = None) -> None:
        super().__init__(ctx=ctx)
        self.hasher = hasher

    def sign_up(self, dto: SignUpIn) -> UserSummaryOut:
        """
        Register a new user.

        :param dto: Sign-up input.
        :type dto: :class:`SignUpIn`
        :returns: Summary of the created user (no password hash).
        :rtype: :class:`UserSummaryOut`
        :raises ConflictError: When the email, or the phone if given, is taken.
        :raises NotFoundError: When the referenced sex or language does not exist.
        """
        try:
            with self.rw_uow() as uow:
                users: UserDirectory = uow.users

                if users.get_by_email(dto.email) is not None:
                    raise ConflictError(EMAIL_TAKEN)
                if dto.phone and users.get_by_phone(dto.phone) is not None:
                    raise ConflictError(PHONE_TAKEN)
                self._ensure_references(uow, dto.sex_id, dto.language_id)

                user = User(
                    email=dto.email,
                    name=dto.name,
                    last_name=dto.last_name,
                    birthday=dto.birthday,
                    phone=dto.phone,
                    sex_id=dto.sex_id,
                    language_id=dto.language_id,
                    password_hash=self.hasher.hash(dto.password),
                    verify=False,
                )
                users.add(user)
                summary = self._to_summary(user)
        except IntegrityError as exc:
            conflict = self._unique_conflict(exc)
            if conflict is None:
                raise
            log.info("signup.race", extra={"event": "signup_conflict"})
            raise conflict from exc

        log.info("signup.created", extra={"event": "signup", "user_id": summary.id})
        return summary

    # ------------------------------------------------------------------ #
    # Helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _ensure_references(
        uow: SQLAlchemyRepositoryContainer, sex_id: int, language_id: int
    ) -> None:
        if uow.sexes.get(sex_id) is None:
            raise NotFoundError("sex", sex_id)
        if uow.languages.get(language_id) is None:
            raise NotFoundError("language", language_id)

    @staticmethod
    def _unique_conflict(exc: IntegrityError) -> ConflictError | None:
        if violates(exc, "uq_users_email", "users.email"):
            return ConflictError(EMAIL_TAKEN)
        if violates(exc, "uq_users_phone", "users.phone"):
            return ConflictError(PHONE_TAKEN)
        return None

    @staticmethod
    def _to_summary(user: User) -> UserSummaryOut:
        return UserSummaryOut(
            id=user.id,
            email=user.email,
            name=user.name,
            last_name=user.last_name,
            birthday=user.birthday,
            phone=user.phone,
            sex_id=user.sex_id,
            language_id=user.language_id,
            verify=user.verify,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
