"""User registration, lookups and admin-only account management."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response, status

from app.api.deps import get_current_user, get_user_service, require_admin, require_staff
from app.schemas.auth import CurrentUser, MessageResponse
from app.schemas.user import AccountView, RoleUpdate, UserCreate, UsersListResponse
from app.services.errors import ConflictError, NotFoundError
from app.services.users import UserService

router = APIRouter()


def _not_found(exc: NotFoundError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))


@router.post("", response_model=AccountView, status_code=status.HTTP_201_CREATED)
def register(
    body: UserCreate,
    service: Annotated[UserService, Depends(get_user_service)],
) -> AccountView:
    """Register a patient account. 409 when the email or NIK is taken."""
    try:
        return service.register(body)
    except ConflictError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc))


@router.get(
    "/check-nik/{nik}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
def check_nik(
    nik: str,
    service: Annotated[UserService, Depends(get_user_service)],
) -> Response:
    """204 when the NIK is registered, 404 otherwise."""
    if not service.is_nik_registered(nik):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"NIK {nik} is not registered",
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/profile", response_model=AccountView)
def get_profile(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[UserService, Depends(get_user_service)],
) -> AccountView:
    try:
        return service.get_profile(current_user.id)
    except NotFoundError as exc:
        raise _not_found(exc)


@router.get("", response_model=UsersListResponse)
def list_users(
    _staff: Annotated[CurrentUser, Depends(require_staff)],
    service: Annotated[UserService, Depends(get_user_service)],
) -> UsersListResponse:
    """List all accounts (admin or operator)."""
    return UsersListResponse(users=service.list_users())


@router.get("/{user_id}", response_model=AccountView)
def get_user(
    user_id: str,
    _current: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[UserService, Depends(get_user_service)],
) -> AccountView:
    try:
        return service.get_profile(user_id)
    except NotFoundError as exc:
        raise _not_found(exc)


@router.patch("/{user_id}/role", response_model=AccountView)
def update_role(
    user_id: str,
    body: RoleUpdate,
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    service: Annotated[UserService, Depends(get_user_service)],
) -> AccountView:
    """Change an account's role (admin only)."""
    try:
        return service.update_role(user_id, body.role)
    except NotFoundError as exc:
        raise _not_found(exc)


@router.delete("/{user_id}", response_model=MessageResponse)
def delete_user(
    user_id: str,
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    service: Annotated[UserService, Depends(get_user_service)],
) -> MessageResponse:
    """Delete an account (admin only)."""
    try:
        return MessageResponse(message=service.delete(user_id))
    except NotFoundError as exc:
        raise _not_found(exc)
