"""Update payload for an existing user.

Carries only the mutable fields. The id of the target record is passed
separately by the caller.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class UserChanges:
    """New values for a user's mutable fields (None = keep current)."""

    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None

    def __repr__(self) -> str:
        # Password is never rendered
        return f"UserChanges(name={self.name!r}, email={self.email!r})"
