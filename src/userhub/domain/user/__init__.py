"""User domain.

This domain handles:
- User aggregate (id, name, email, password)
- Field rules (UserValidator) and their Violation results
- The UserRepository port, implemented in infrastructure

Design notes:
- User ID is an integer assigned by the store on first save
- Email is unique across users; the service checks first and the
  database index is the backstop
- The password never leaves the application layer (see UserDTO)
"""

from userhub.domain.user.aggregates import User
from userhub.domain.user.exceptions import (
    EmailAlreadyExistsError,
    PersistenceError,
    UserNotFoundError,
    UserValidationError,
)
from userhub.domain.user.repositories import UserRepository
from userhub.domain.user.services import UserValidator
from userhub.domain.user.value_objects import UserChanges, Violation

__all__ = [
    "EmailAlreadyExistsError",
    "PersistenceError",
    "User",
    "UserChanges",
    "UserNotFoundError",
    "UserRepository",
    "UserValidationError",
    "UserValidator",
    "Violation",
]
