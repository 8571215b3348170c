"""DTO for the externally visible view of a user."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class UserDTO:
    """User information for the presentation layer (no password)."""

    id: Optional[int]
    name: Optional[str]
    email: Optional[str]

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
        }
