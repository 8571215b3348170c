"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from userhub.domain.user.aggregates import User


class UserRepository(ABC):
    """Repository interface for User aggregates."""

    @abstractmethod
    async def find_by_id(self, user_id: int) -> Optional[User]:
        """Find a user by their ID."""

    @abstractmethod
    async def find_by_email(self, email: Optional[str]) -> Optional[User]:
        """Find a user by their email address."""

    @abstractmethod
    async def list_all(self) -> list[User]:
        """List all users in store order."""

    @abstractmethod
    async def save(self, user: User) -> User:
        """Insert a new user or update an existing one.

        Returns the persisted state, with the id populated on insert.
        """

    @abstractmethod
    async def delete(self, user_id: int) -> None:
        """Delete a user by ID. Absent IDs are ignored."""

    @abstractmethod
    async def count(self) -> int:
        """Count total users."""
