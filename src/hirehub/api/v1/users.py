"""User account endpoints."""

from typing import Annotated, Any

from fastapi import APIRouter, Body, HTTPException, Response, status

from src.hirehub.api.dependencies import (
    CurrentUser,
    ExpectedVersion,
    UserServiceDep,
    set_etag,
)
from src.hirehub.schemas.user import UserCreate, UserPublic, UserRead

router = APIRouter(prefix="/users", tags=["users"])


@router.post(
    "",
    response_model=UserRead,
    status_code=status.HTTP_201_CREATED,
    responses={
        409: {"description": "Username or email already taken"},
        422: {"description": "Validation error or weak password"},
    },
)
async def register_user(data: UserCreate, service: UserServiceDep) -> UserRead:
    """Register a new user account."""
    user = await service.register(data)
    return UserRead.model_validate(user)


@router.get(
    "/me",
    response_model=UserRead,
    responses={401: {"description": "Not authenticated"}},
)
async def get_current_user(current_user: CurrentUser) -> UserRead:
    """Get current authenticated user."""
    return UserRead.model_validate(current_user)


@router.get(
    "/{username}",
    response_model=UserPublic,
    responses={404: {"description": "User not found"}},
)
async def get_user(username: str, service: UserServiceDep) -> UserPublic:
    """Public profile of a user, as shown to companies.

    Usernames are at least three characters long, so `/me` never shadows one.
    """
    user = await service.get_by_username(username)
    return UserPublic.model_validate(user)


@router.patch(
    "/{user_id}",
    response_model=UserRead,
    responses={
        403: {"description": "Users can only update themselves"},
        404: {"description": "User not found"},
        409: {"description": "Duplicate value or stale If-Match version"},
        422: {"description": "Unknown field or value of the wrong type"},
    },
)
async def update_user(
    user_id: int,
    patch: Annotated[dict[str, Any], Body(examples=[{"name": "Jane Doe"}])],
    current_user: CurrentUser,
    service: UserServiceDep,
    expected_version: ExpectedVersion,
    response: Response,
) -> UserRead:
    """Partially update a user account.

    Patchable fields: username, email, name, phone.
    """
    if current_user.id != user_id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Users can only update their own account",
        )
    user = await service.update_user(user_id, patch, expected_version)
    set_etag(response, user.version)
    return UserRead.model_validate(user)
