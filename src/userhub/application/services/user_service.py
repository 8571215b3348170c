"""User service: the five CRUD use cases over the user repository.

Every method is a short sequence of repository calls. Business failures
are raised as domain exceptions and never swallowed; transaction
boundaries belong to the caller.
"""

from __future__ import annotations

import logging

from userhub.application.dtos import UserDTO
from userhub.application.mappers import to_user_dto
from userhub.domain.user import (
    EmailAlreadyExistsError,
    User,
    UserChanges,
    UserNotFoundError,
    UserRepository,
    UserValidationError,
    UserValidator,
)

logger = logging.getLogger(__name__)


class UserService:
    """Create, read, update and delete users."""

    def __init__(
        self,
        user_repository: UserRepository,
        validator: UserValidator | None = None,
    ):
        self._user_repo = user_repository
        self._validator = validator or UserValidator()

    async def get_user_by_id(self, user_id: int) -> UserDTO:
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return to_user_dto(user)

    async def list_users(self) -> list[UserDTO]:
        users = await self._user_repo.list_all()
        return [to_user_dto(user) for user in users]

    async def create_user(self, candidate: User) -> UserDTO:
        """Store a new user.

        Raises
        ------
        EmailAlreadyExistsError
            If another user already has the candidate's email
        UserValidationError
            If the candidate breaks any field rule
        """
        existing = await self._user_repo.find_by_email(candidate.email)
        if existing is not None:
            logger.warning("Rejected user creation, email in use: %s", candidate.email)
            raise EmailAlreadyExistsError(candidate.email)

        violations = self._validator.validate(candidate)
        if violations:
            logger.warning(
                "Rejected user creation, %d violation(s): %s",
                len(violations),
                ", ".join(sorted(str(v) for v in violations)),
            )
            raise UserValidationError(violations)

        saved = await self._user_repo.save(candidate)
        logger.info("Created user: %s (email: %s)", saved.id, saved.email)
        return to_user_dto(saved)

    async def update_user(self, user_id: int, changes: UserChanges) -> UserDTO:
        """Apply ``changes`` to the stored user with ``user_id``.

        A user may keep their own email; taking another user's email raises
        EmailAlreadyExistsError. Name and email rules are enforced, the
        password length rule is not. On any rejection the record is untouched.
        """
        existing = await self._user_repo.find_by_id(user_id)
        if existing is None:
            raise UserNotFoundError(user_id)

        if changes.email is not None:
            owner = await self._user_repo.find_by_email(changes.email)
            if owner is not None and owner.id != user_id:
                logger.warning(
                    "Rejected update of user %s, email owned by user %s",
                    user_id,
                    owner.id,
                )
                raise EmailAlreadyExistsError(changes.email)

        existing.apply_changes(changes)
        violations = self._validator.validate_update(existing)
        if violations:
            logger.warning(
                "Rejected update of user %s, %d violation(s): %s",
                user_id,
                len(violations),
                ", ".join(sorted(str(v) for v in violations)),
            )
            raise UserValidationError(violations)

        saved = await self._user_repo.save(existing)
        logger.info("Updated user: %s", saved.id)
        return to_user_dto(saved)

    async def delete_user(self, user_id: int) -> None:
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        await self._user_repo.delete(user_id)
        logger.info("Deleted user: %s", user_id)
