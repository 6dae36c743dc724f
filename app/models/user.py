"""ORM model for service accounts (patients, operators and admins)."""

import enum
import uuid

from sqlalchemy import Column, DateTime, Enum, String, func

from app.models.base import Base


class Role(str, enum.Enum):
    """Account roles. PASIEN is the ordinary user; ADMIN_FASKES is the administrative role."""

    PASIEN = "PASIEN"
    OPERATOR = "OPERATOR"
    ADMIN_FASKES = "ADMIN_FASKES"


ADMIN_ROLE = Role.ADMIN_FASKES
ORDINARY_ROLE = Role.PASIEN


def _new_id() -> str:
    return str(uuid.uuid4())


class User(Base):
    """
    Account record for JWT authentication and role-based access control.

    Accounts created from identity documents have a NIK and name but no password.
    hashed_refresh_token holds the hash of the only refresh token currently accepted.
    """

    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=_new_id)
    email = Column(String(255), nullable=True, unique=True, index=True)
    nik = Column(String(32), nullable=True, unique=True, index=True)
    name = Column(String(255), nullable=False)
    password_hash = Column(String(255), nullable=True)
    role = Column(
        Enum(Role, name="role"),
        nullable=False,
        default=Role.PASIEN,
    )
    hashed_refresh_token = Column(String(255), nullable=True)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
