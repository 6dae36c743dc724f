"""Pydantic request/response schemas."""

from app.schemas.auth import (
    AccessToken,
    AdminLoginRequest,
    CurrentUser,
    MessageResponse,
    TokenPair,
    UserLoginRequest,
)
from app.schemas.health import HealthResponse
from app.schemas.user import AccountView, RoleUpdate, UserCreate, UsersListResponse

__all__ = [
    "AccessToken",
    "AccountView",
    "AdminLoginRequest",
    "CurrentUser",
    "HealthResponse",
    "MessageResponse",
    "RoleUpdate",
    "TokenPair",
    "UserCreate",
    "UserLoginRequest",
    "UsersListResponse",
]
