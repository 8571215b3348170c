"""Value objects for the user domain."""

from userhub.domain.user.value_objects.user_changes import UserChanges
from userhub.domain.user.value_objects.violation import Violation

__all__ = [
    "UserChanges",
    "Violation",
]
