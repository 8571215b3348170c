"""Users router for the user CRUD endpoints."""

import logging

from fastapi import APIRouter, status

from userhub.presentation.api.dependencies import DBSession, UserServiceDep
from userhub.presentation.api.schemas import (
    ErrorResponse,
    UserCreateRequest,
    UserResponse,
    UserUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/{user_id}",
    summary="Get user",
    responses={
        200: {"description": "The user"},
        404: {"model": ErrorResponse, "description": "User not found"},
    },
)
async def get_user(user_id: int, service: UserServiceDep) -> UserResponse:
    """Get a single user by ID."""
    dto = await service.get_user_by_id(user_id)
    return UserResponse.from_dto(dto)


@router.get(
    "",
    summary="List users",
    responses={200: {"description": "All users (possibly empty)"}},
)
async def list_users(service: UserServiceDep) -> list[UserResponse]:
    """List all users."""
    dtos = await service.list_users()
    return [UserResponse.from_dto(dto) for dto in dtos]


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create user",
    responses={
        201: {"description": "User created"},
        400: {"model": ErrorResponse, "description": "Field validation failed"},
        409: {"model": ErrorResponse, "description": "Email already in use"},
    },
)
async def create_user(
    request: UserCreateRequest,
    service: UserServiceDep,
    session: DBSession,
) -> UserResponse:
    """
    Create a new user.

    All field violations are reported together in the 400 response.
    """
    try:
        dto = await service.create_user(request.to_domain())
        await session.commit()
    except Exception:
        await session.rollback()
        # Let the global exception handler process domain exceptions
        raise

    return UserResponse.from_dto(dto)


@router.put(
    "/{user_id}",
    summary="Update user",
    responses={
        200: {"description": "User updated"},
        404: {"model": ErrorResponse, "description": "User not found"},
        409: {"model": ErrorResponse, "description": "Email used by another user"},
    },
)
async def update_user(
    user_id: int,
    request: UserUpdateRequest,
    service: UserServiceDep,
    session: DBSession,
) -> UserResponse:
    """
    Update name, email and password of an existing user.

    The ID in the path identifies the user; it is never changed.
    """
    try:
        dto = await service.update_user(user_id, request.to_changes())
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    return UserResponse.from_dto(dto)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete user",
    responses={
        204: {"description": "User deleted"},
        404: {"model": ErrorResponse, "description": "User not found"},
    },
)
async def delete_user(
    user_id: int,
    service: UserServiceDep,
    session: DBSession,
) -> None:
    """Delete a user permanently."""
    try:
        await service.delete_user(user_id)
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    logger.info("User deleted via API: %s", user_id)
