"""Mapping from User aggregates to UserDTOs."""

from typing import Optional, overload

from userhub.application.dtos import UserDTO
from userhub.domain.user import User


@overload
def to_user_dto(user: User) -> UserDTO: ...


@overload
def to_user_dto(user: None) -> None: ...


def to_user_dto(user: Optional[User]) -> Optional[UserDTO]:
    """Project a user onto its public view, dropping the password."""
    if user is None:
        return None
    return UserDTO(id=user.id, name=user.name, email=user.email)
