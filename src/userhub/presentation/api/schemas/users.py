"""User schemas for API request/response models.

Request fields are all optional strings: missing or malformed values are
reported by the domain validator as field violations, not rejected by
pydantic.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from userhub.application.dtos import UserDTO
from userhub.domain.user import User, UserChanges


class UserCreateRequest(BaseModel):
    """Request schema for creating a user."""

    name: Optional[str] = Field(None, description="Display name (non-blank)")
    email: Optional[str] = Field(None, description="Unique email address")
    password: Optional[str] = Field(None, description="Password (min. 3 characters)")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "John",
                "email": "john@example.com",
                "password": "secret",
            },
        },
    )

    def to_domain(self) -> User:
        return User.create(name=self.name, email=self.email, password=self.password)


class UserUpdateRequest(BaseModel):
    """Request schema for updating a user. Omitted fields keep their value."""

    name: Optional[str] = Field(None, description="New display name")
    email: Optional[str] = Field(None, description="New email address")
    password: Optional[str] = Field(None, description="New password")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "New",
                "email": "new@example.com",
                "password": "changed",
            },
        },
    )

    def to_changes(self) -> UserChanges:
        return UserChanges(name=self.name, email=self.email, password=self.password)


class UserResponse(BaseModel):
    """Response schema for a user (never includes the password)."""

    id: Optional[int] = Field(..., description="User ID")
    name: Optional[str] = Field(..., description="Display name")
    email: Optional[str] = Field(..., description="Email address")

    model_config = ConfigDict(from_attributes=True)

    @classmethod
    def from_dto(cls, dto: UserDTO) -> "UserResponse":
        return cls(id=dto.id, name=dto.name, email=dto.email)
