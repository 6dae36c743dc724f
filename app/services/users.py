"""Account registration and administrative user management."""

import logging
import secrets

from sqlalchemy.exc import IntegrityError

from app.core.security import hash_secret
from app.models.user import Role
from app.repositories.user import UserRepository
from app.schemas.user import AccountView, UserCreate
from app.services.errors import ConflictError, NotFoundError

logger = logging.getLogger(__name__)

PLACEHOLDER_EMAIL_DOMAIN = "mediq.placeholder.email"


class UserService:
    """User lifecycle operations. All returned accounts are AccountView projections."""

    def __init__(self, users: UserRepository) -> None:
        self.users = users

    def register(self, data: UserCreate) -> AccountView:
        """Create a patient account; email and NIK must both be unused."""
        if self.users.find_by_email_or_nik(data.email, data.nik) is not None:
            raise ConflictError("Email or NIK is already registered")
        try:
            user = self.users.create(
                nik=data.nik,
                name=data.name,
                email=data.email,
                password_hash=hash_secret(data.password) if data.password else None,
                role=Role.PASIEN,
            )
        except IntegrityError as exc:
            raise ConflictError("Email or NIK is already registered") from exc
        logger.info("Registered user", extra={"account_id": user.id})
        return AccountView.model_validate(user)

    def register_from_ocr(self, nik: str, name: str) -> AccountView:
        """
        Register an account from a recognized identity document.

        Returns the existing account when the NIK is already known. New accounts get a
        placeholder email and a random password nobody knows; they log in by NIK and name.
        """
        existing = self.users.find_by_nik(nik)
        if existing is not None:
            return AccountView.model_validate(existing)
        user = self.users.create(
            nik=nik,
            name=name,
            email=f"{nik}@{PLACEHOLDER_EMAIL_DOMAIN}",
            password_hash=hash_secret(secrets.token_urlsafe(32)),
            role=Role.PASIEN,
        )
        logger.info("Registered user from OCR", extra={"account_id": user.id})
        return AccountView.model_validate(user)

    def is_nik_registered(self, nik: str) -> bool:
        return self.users.find_by_nik(nik) is not None

    def find_by_nik(self, nik: str) -> AccountView:
        user = self.users.find_by_nik(nik)
        if user is None:
            raise NotFoundError("User", nik)
        return AccountView.model_validate(user)

    def get_profile(self, user_id: str) -> AccountView:
        user = self.users.get(user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        return AccountView.model_validate(user)

    def list_users(self) -> list[AccountView]:
        return [AccountView.model_validate(u) for u in self.users.list_all()]

    def update_role(self, user_id: str, role: Role) -> AccountView:
        user = self.users.update_role(user_id, role)
        if user is None:
            raise NotFoundError("User", user_id)
        logger.info("Updated role", extra={"account_id": user_id, "role": role.value})
        return AccountView.model_validate(user)

    def delete(self, user_id: str) -> str:
        """Delete an account; returns a confirmation message."""
        if not self.users.delete(user_id):
            raise NotFoundError("User", user_id)
        logger.info("Deleted user", extra={"account_id": user_id})
        return f"User with id {user_id} deleted successfully"
