"""Service-level errors. Framework-agnostic; routers translate them to HTTP responses."""

import enum

GENERIC_AUTH_MESSAGE = "Access denied"


class AuthFailure(str, enum.Enum):
    """Internal cause of an authentication failure. Logged, never returned to callers."""

    ACCOUNT_NOT_FOUND = "account_not_found"
    NO_CREDENTIAL = "no_credential"
    BAD_SECRET = "bad_secret"
    ROLE_NOT_ALLOWED = "role_not_allowed"
    IDENTITY_MISMATCH = "identity_mismatch"
    NO_STORED_REFRESH_TOKEN = "no_stored_refresh_token"
    REFRESH_TOKEN_MISMATCH = "refresh_token_mismatch"


class ServiceError(Exception):
    """Base class for service-layer errors."""


class Unauthenticated(ServiceError):
    """Authentication failed. The message is the same for every cause."""

    def __init__(self, reason: AuthFailure) -> None:
        super().__init__(GENERIC_AUTH_MESSAGE)
        self.reason = reason


class NotFoundError(ServiceError):
    """An administrative operation targeted an account that does not exist."""

    def __init__(self, entity: str, key: str) -> None:
        super().__init__(f"{entity} not found: {key}")
        self.entity = entity
        self.key = key


class ConflictError(ServiceError):
    """A unique field (email or NIK) is already taken."""
