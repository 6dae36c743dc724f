"""Account projections and user-management request bodies."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from app.core.security import NAME_MAX_LEN, NIK_MAX_LEN, PASSWORD_MAX_LEN, PASSWORD_MIN_LEN
from app.models.user import Role


class AccountView(BaseModel):
    """
    Public projection of a user row.

    Secret columns (password hash, refresh-token hash) are not fields of this model,
    so they cannot leak through serialization.
    """

    model_config = ConfigDict(from_attributes=True)

    id: str
    email: str | None = None
    nik: str | None = None
    name: str
    role: Role
    created_at: datetime | None = None
    updated_at: datetime | None = None


class UserCreate(BaseModel):
    """Registration body."""

    nik: str = Field(..., min_length=1, max_length=NIK_MAX_LEN, description="Nomor Induk Kependudukan")
    name: str = Field(..., min_length=1, max_length=NAME_MAX_LEN, description="Full name")
    email: EmailStr = Field(..., description="Unique email")
    password: str = Field(
        ...,
        min_length=PASSWORD_MIN_LEN,
        max_length=PASSWORD_MAX_LEN,
        description="Password, at least 6 characters",
    )


class RoleUpdate(BaseModel):
    """Admin request to change an account's role."""

    role: Role


class UsersListResponse(BaseModel):
    """Response for GET /users (admin/operator only)."""

    users: list[AccountView]
