"""User domain exceptions.

Custom exceptions for the user domain, used for validation
and business rule violations.
"""

from collections.abc import Iterable

from userhub.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)
from userhub.domain.user.value_objects import Violation


class UserNotFoundError(EntityNotFoundError):
    """User not found."""

    def __init__(self, user_id: object) -> None:
        self.user_id = user_id
        super().__init__(
            f"User with ID {user_id} not found",
            code=ErrorCode.USER_NOT_FOUND,
            details={"user_id": str(user_id)},
        )


class EmailAlreadyExistsError(ConflictError):
    """Email already registered to another user."""

    def __init__(self, email: str | None) -> None:
        self.email = email
        super().__init__(
            f"Email already in use: {email}",
            code=ErrorCode.DUPLICATE_EMAIL,
            details={"email": email},
        )


class UserValidationError(ValidationError):
    """
    Raised when a user fails one or more field rules.

    Attributes
    ----------
    violations
        Every rule the user broke, not just the first one
    """

    def __init__(self, violations: Iterable[Violation]) -> None:
        self.violations = frozenset(violations)
        fields = sorted({v.field for v in self.violations})
        super().__init__(
            f"Invalid user: {', '.join(fields)}",
            details={"violations": [v.to_dict() for v in self.sorted_violations]},
        )

    @property
    def sorted_violations(self) -> list[Violation]:
        return sorted(self.violations, key=lambda v: (v.field, v.message))

    @property
    def fields(self) -> set[str]:
        return {v.field for v in self.violations}


class PersistenceError(DomainException):
    """The record store failed in a way the service did not anticipate."""

    def __init__(self, message: str = "Could not persist user") -> None:
        super().__init__(message, code=ErrorCode.PERSISTENCE_ERROR)
