"""Startup routine ensuring the configured admin account exists with the admin role."""

import enum
import logging
import uuid
from typing import TYPE_CHECKING

from app.core.security import hash_secret
from app.models.user import ADMIN_ROLE
from app.repositories.user import UserRepository

if TYPE_CHECKING:
    from app.core.config import Settings

logger = logging.getLogger(__name__)


class SeedOutcome(str, enum.Enum):
    SKIPPED = "skipped"
    UNCHANGED = "unchanged"
    ROLE_UPDATED = "role_updated"
    CREATED = "created"
    FAILED = "failed"


def _placeholder_nik() -> str:
    return f"ADM-{uuid.uuid4().hex[:12]}"


def seed_admin_if_needed(users: UserRepository, settings: "Settings") -> SeedOutcome:
    """
    Make sure ADMIN_EMAIL belongs to an ADMIN_FASKES account. Idempotent.

    An existing account only has its role corrected; credentials are left alone.
    Errors are logged and swallowed so a failed seed never blocks startup.
    Not safe to run concurrently (read then write); call it once before serving.
    """
    if settings.DISABLE_ADMIN_SEED:
        logger.info("Admin seeding is disabled (DISABLE_ADMIN_SEED=true); skipping.")
        return SeedOutcome.SKIPPED

    email = settings.ADMIN_EMAIL
    try:
        existing = users.find_by_email(email)
        if existing is not None:
            if existing.role == ADMIN_ROLE:
                return SeedOutcome.UNCHANGED
            users.update_role(existing.id, ADMIN_ROLE)
            logger.info("Ensured admin role for %s is %s", email, ADMIN_ROLE.value)
            return SeedOutcome.ROLE_UPDATED

        users.create(
            name=settings.ADMIN_NAME,
            email=email,
            nik=_placeholder_nik(),
            password_hash=hash_secret(settings.ADMIN_PASSWORD.get_secret_value()),
            role=ADMIN_ROLE,
        )
        logger.info("Seeded default admin user: %s (role: %s)", email, ADMIN_ROLE.value)
        return SeedOutcome.CREATED
    except Exception:
        logger.exception("Failed to seed admin user %s", email)
        return SeedOutcome.FAILED
