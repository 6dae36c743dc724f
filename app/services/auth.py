"""Login, refresh and logout on top of the user store and the refresh-token store."""

import logging
from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from functools import lru_cache
from typing import TYPE_CHECKING, NoReturn

from app.core.security import (
    create_access_token,
    create_refresh_token,
    hash_secret,
    verify_secret,
)
from app.models.user import ORDINARY_ROLE
from app.repositories.user import UserRepository
from app.schemas.auth import AccessToken, MessageResponse, TokenPair
from app.schemas.user import AccountView
from app.services.errors import AuthFailure, Unauthenticated
from app.services.refresh_tokens import RefreshTokenStore

if TYPE_CHECKING:
    from app.core.config import Settings

logger = logging.getLogger(__name__)


@lru_cache
def _dummy_hash(rounds: int) -> str:
    return hash_secret("not-a-real-password", rounds=rounds)


class AuthService:
    """
    Stateless authentication flows.

    The only session state is each account's hashed_refresh_token: login overwrites it,
    refresh only checks it, logout clears it. Concurrent calls for the same account are
    not serialized; the last write wins.
    """

    def __init__(
        self,
        users: UserRepository,
        settings: "Settings",
        refresh_store: RefreshTokenStore | None = None,
        now: Callable[[], datetime] | None = None,
    ) -> None:
        self.users = users
        self.settings = settings
        self.refresh_store = refresh_store or RefreshTokenStore(users)
        self._now = now or (lambda: datetime.now(UTC))

    # Credential validation

    def validate_user(self, email: str, password: str) -> AccountView | AuthFailure:
        """Check email and password; return the account projection or the failure cause."""
        user = self.users.find_by_email(email)
        if user is None or not user.password_hash:
            # Same bcrypt cost as a real check so a missing account is not visible in timing.
            verify_secret(password, _dummy_hash(self.settings.BCRYPT_ROUNDS))
            if user is None:
                return AuthFailure.ACCOUNT_NOT_FOUND
            return AuthFailure.NO_CREDENTIAL
        if not verify_secret(password, user.password_hash):
            return AuthFailure.BAD_SECRET
        return AccountView.model_validate(user)

    def validate_admin(self, email: str, password: str) -> AccountView | AuthFailure:
        """validate_user, then reject ordinary (patient) accounts. Role is checked after the secret."""
        result = self.validate_user(email, password)
        if isinstance(result, AuthFailure):
            return result
        if result.role == ORDINARY_ROLE:
            return AuthFailure.ROLE_NOT_ALLOWED
        return result

    # Entry points

    def login_admin(self, email: str, password: str) -> TokenPair:
        result = self.validate_admin(email, password)
        if isinstance(result, AuthFailure):
            self._deny("login_admin", result)
        return self.issue_token_pair(result)

    def login_user(self, nik: str, name: str) -> TokenPair:
        """
        Identity-pair login: exact NIK and case-insensitive name, no secret.

        Only patient accounts may use it; staff must log in with email and password.
        """
        user = self.users.find_by_nik_and_name(nik, name)
        if user is None:
            self._deny("login_user", AuthFailure.IDENTITY_MISMATCH)
        account = AccountView.model_validate(user)
        if not self._identity_pair_allowed(account):
            self._deny("login_user", AuthFailure.ROLE_NOT_ALLOWED)
        return self.issue_token_pair(account)

    @staticmethod
    def _identity_pair_allowed(account: AccountView) -> bool:
        return account.role == ORDINARY_ROLE

    def issue_token_pair(self, account: AccountView) -> TokenPair:
        """
        Sign a new access/refresh pair and store the refresh hash.

        Storing the hash replaces the previous one, so any refresh token issued
        earlier for this account stops working.
        """
        now = self._now()
        access_token = create_access_token(
            {"sub": account.id, "email": account.email, "role": account.role.value},
            self.settings.JWT_SECRET.get_secret_value(),
            timedelta(minutes=self.settings.JWT_EXPIRE_MINUTES),
            now=now,
        )
        refresh_token = create_refresh_token(
            account.id,
            self.settings.JWT_REFRESH_SECRET.get_secret_value(),
            timedelta(minutes=self.settings.JWT_REFRESH_EXPIRE_MINUTES),
            now=now,
        )
        self.refresh_store.save(account.id, refresh_token)
        logger.info("Issued token pair", extra={"account_id": account.id})
        return TokenPair(access_token=access_token, refresh_token=refresh_token)

    def refresh(self, account_id: str, refresh_token: str) -> AccessToken:
        """
        Exchange the current refresh token for a new access token.

        The refresh token itself is not rotated; it stays valid until the next login or logout.
        """
        user = self.users.get(account_id)
        if user is None:
            self._deny("refresh", AuthFailure.ACCOUNT_NOT_FOUND)
        if not user.hashed_refresh_token:
            self._deny("refresh", AuthFailure.NO_STORED_REFRESH_TOKEN)
        if not self.refresh_store.matches(account_id, refresh_token):
            self._deny("refresh", AuthFailure.REFRESH_TOKEN_MISMATCH)

        access_token = create_access_token(
            {"sub": user.id, "email": user.email, "role": user.role.value},
            self.settings.JWT_SECRET.get_secret_value(),
            timedelta(minutes=self.settings.JWT_EXPIRE_MINUTES),
            now=self._now(),
        )
        return AccessToken(access_token=access_token)

    def logout(self, account_id: str) -> MessageResponse:
        """Clear the stored refresh hash. Safe to call repeatedly."""
        self.refresh_store.clear(account_id)
        logger.info("Logged out", extra={"account_id": account_id})
        return MessageResponse(message="Logged out successfully")

    @staticmethod
    def _deny(operation: str, reason: AuthFailure) -> NoReturn:
        logger.info(
            "Authentication failed: op=%s reason=%s",
            operation,
            reason.value,
            extra={"operation": operation, "reason": reason.value},
        )
        raise Unauthenticated(reason)
