"""Login, token refresh and logout endpoints."""

import logging
from typing import Annotated

import jwt
from fastapi import APIRouter, Depends

from app.api.deps import (
    get_auth_service,
    get_bearer_token,
    get_current_user,
    unauthorized,
)
from app.core.security import decode_refresh_token
from app.schemas.auth import (
    AccessToken,
    AdminLoginRequest,
    CurrentUser,
    MessageResponse,
    TokenPair,
    UserLoginRequest,
)
from app.services.auth import AuthService
from app.services.errors import Unauthenticated

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/login/admin", response_model=TokenPair)
def login_admin(
    body: AdminLoginRequest,
    service: Annotated[AuthService, Depends(get_auth_service)],
) -> TokenPair:
    """
    Authenticate an admin or operator with email and password.
    Patient accounts are rejected here even with a correct password.
    """
    try:
        return service.login_admin(body.email, body.password)
    except Unauthenticated as exc:
        raise unauthorized(str(exc))


@router.post("/login/user", response_model=TokenPair)
def login_user(
    body: UserLoginRequest,
    service: Annotated[AuthService, Depends(get_auth_service)],
) -> TokenPair:
    """Authenticate a patient by NIK and name (name comparison ignores case)."""
    try:
        return service.login_user(body.nik, body.name)
    except Unauthenticated as exc:
        raise unauthorized(str(exc))


@router.get("/refresh", response_model=AccessToken)
def refresh(
    token: Annotated[str, Depends(get_bearer_token)],
    service: Annotated[AuthService, Depends(get_auth_service)],
) -> AccessToken:
    """
    Exchange a refresh token for a new access token.
    Send the refresh token as: Authorization: Bearer <refresh_token>
    """
    try:
        payload = decode_refresh_token(token)
    except jwt.PyJWTError:
        logger.info("Rejected refresh token with bad signature or expiry")
        raise unauthorized()
    try:
        return service.refresh(str(payload["sub"]), token)
    except Unauthenticated as exc:
        raise unauthorized(str(exc))


@router.get("/logout", response_model=MessageResponse)
def logout(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[AuthService, Depends(get_auth_service)],
) -> MessageResponse:
    """Revoke the caller's refresh token. Access tokens expire on their own."""
    return service.logout(current_user.id)
