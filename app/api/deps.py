"""FastAPI dependencies: store and service wiring, bearer-token authentication, role checks."""

from collections.abc import Callable
from typing import Annotated

import jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.core.config import Settings, get_settings
from app.core.database import get_db
from app.core.security import decode_access_token
from app.models.user import Role
from app.repositories.user import UserRepository
from app.schemas.auth import CurrentUser
from app.services.auth import AuthService
from app.services.errors import GENERIC_AUTH_MESSAGE
from app.services.users import UserService

security = HTTPBearer(auto_error=False)


def unauthorized(detail: str = GENERIC_AUTH_MESSAGE) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_user_repository(db: Annotated[Session, Depends(get_db)]) -> UserRepository:
    """One repository per request, bound to the request's session."""
    return UserRepository(db)


def get_auth_service(
    users: Annotated[UserRepository, Depends(get_user_repository)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> AuthService:
    return AuthService(users, settings)


def get_user_service(
    users: Annotated[UserRepository, Depends(get_user_repository)],
) -> UserService:
    return UserService(users)


def get_bearer_token(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> str:
    """Dependency: raw bearer token from the Authorization header. Raises 401 if missing."""
    if credentials is None or not credentials.credentials:
        raise unauthorized("Not authenticated")
    return credentials.credentials


def get_current_user(
    token: Annotated[str, Depends(get_bearer_token)],
    users: Annotated[UserRepository, Depends(get_user_repository)],
) -> CurrentUser:
    """Dependency: require a valid access token for an existing account."""
    try:
        payload = decode_access_token(token)
    except jwt.PyJWTError:
        raise unauthorized("Invalid or expired token")
    user = users.get(str(payload["sub"]))
    if user is None:
        raise unauthorized()
    return CurrentUser.model_validate(user)


def require_roles(*roles: Role) -> Callable[..., CurrentUser]:
    """Dependency factory: allow only callers whose role is in ``roles``. Raises 403 otherwise."""

    def _check(
        current_user: Annotated[CurrentUser, Depends(get_current_user)],
    ) -> CurrentUser:
        if current_user.role not in roles:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Insufficient role",
            )
        return current_user

    return _check


require_admin = require_roles(Role.ADMIN_FASKES)
require_staff = require_roles(Role.ADMIN_FASKES, Role.OPERATOR)
