"""SQLAlchemy ORM models."""

from app.models.base import Base
from app.models.user import ADMIN_ROLE, ORDINARY_ROLE, Role, User

__all__ = ["ADMIN_ROLE", "ORDINARY_ROLE", "Base", "Role", "User"]
