"""Request/response schemas for auth endpoints."""

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from app.core.security import NAME_MAX_LEN, NIK_MAX_LEN, PASSWORD_MAX_LEN
from app.models.user import Role


class AdminLoginRequest(BaseModel):
    """Email and password login for admins and operators."""

    email: EmailStr = Field(..., description="Account email")
    password: str = Field(..., min_length=1, max_length=PASSWORD_MAX_LEN, description="Password")


class UserLoginRequest(BaseModel):
    """Identity-pair login for patients: NIK plus the name on the identity document."""

    nik: str = Field(..., min_length=1, max_length=NIK_MAX_LEN, description="Nomor Induk Kependudukan")
    name: str = Field(..., min_length=1, max_length=NAME_MAX_LEN, description="Full name as on the ID card")


class TokenPair(BaseModel):
    """Access and refresh tokens returned after a successful login."""

    access_token: str = Field(..., description="Short-lived JWT access token")
    refresh_token: str = Field(..., description="Long-lived JWT refresh token")
    token_type: str = Field(default="bearer", description="Token type")


class AccessToken(BaseModel):
    """New access token issued from a refresh token."""

    access_token: str = Field(..., description="Short-lived JWT access token")
    token_type: str = Field(default="bearer", description="Token type")


class MessageResponse(BaseModel):
    """Plain confirmation message."""

    message: str


class CurrentUser(BaseModel):
    """Authenticated caller (id, email, role) for dependency injection."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    email: str | None = None
    role: Role
