"""Pydantic schemas for API request/response models."""

from userhub.presentation.api.schemas.common import (
    ErrorResponse,
    HealthResponse,
    ViolationResponse,
)
from userhub.presentation.api.schemas.users import (
    UserCreateRequest,
    UserResponse,
    UserUpdateRequest,
)

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "UserCreateRequest",
    "UserResponse",
    "UserUpdateRequest",
    "ViolationResponse",
]
