"""User record store backed by an SQLAlchemy ``AsyncSession``."""

import logging
from typing import Optional

from sqlalchemy import Select, func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from userhub.domain.shared.time import ensure_tz_aware
from userhub.domain.user import (
    EmailAlreadyExistsError,
    PersistenceError,
    User,
    UserRepository,
)
from userhub.infrastructure.persistence.sqlalchemy.models import UserModel

logger = logging.getLogger(__name__)


def _is_unique_violation(error: IntegrityError) -> bool:
    # SQLite: "UNIQUE constraint failed"; PostgreSQL: "duplicate key ... unique"
    text = str(error.orig if error.orig is not None else error)
    return "unique" in text.lower()


class UserRepositorySQLAlchemy(UserRepository):
    """Stores users in the ``users`` table.

    Writes are flushed but never committed; the caller owns the transaction.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, user_id: int) -> Optional[User]:
        row = await self._get_row(user_id)
        return self._to_domain(row) if row is not None else None

    async def find_by_email(self, email: Optional[str]) -> Optional[User]:
        if email is None:
            return None
        row = await self._one(select(UserModel).where(UserModel.email == email))
        return self._to_domain(row) if row is not None else None

    async def list_all(self) -> list[User]:
        result = await self._session.execute(select(UserModel).order_by(UserModel.id))
        return [self._to_domain(row) for row in result.scalars()]

    async def save(self, user: User) -> User:
        row = await self._get_row(user.id) if user.is_persisted else None
        inserting = row is None

        try:
            if inserting:
                row = self._to_row(user)
                self._session.add(row)
            else:
                self._copy_onto(row, user)
            await self._session.flush()
        except IntegrityError as e:
            if _is_unique_violation(e):
                raise EmailAlreadyExistsError(user.email) from e
            logger.error("Constraint violated saving user %s: %s", user.id, e.orig)
            raise PersistenceError from e
        except SQLAlchemyError as e:
            logger.error("Database error saving user %s: %s", user.id, e)
            raise PersistenceError from e

        logger.debug("%s user row %s", "Inserted" if inserting else "Updated", row.id)
        return self._to_domain(row)

    async def delete(self, user_id: int) -> None:
        row = await self._get_row(user_id)
        if row is None:
            return
        await self._session.delete(row)
        await self._session.flush()
        logger.debug("Deleted user row %s", user_id)

    async def count(self) -> int:
        result = await self._session.execute(
            select(func.count()).select_from(UserModel),
        )
        return result.scalar_one()

    async def _one(self, stmt: Select) -> Optional[UserModel]:
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def _get_row(self, user_id: int) -> Optional[UserModel]:
        return await self._one(select(UserModel).where(UserModel.id == user_id))

    @staticmethod
    def _to_domain(row: UserModel) -> User:
        return User.reconstitute(
            id=row.id,
            name=row.name,
            email=row.email,
            password=row.password,
            created_at=ensure_tz_aware(row.created_at),
            updated_at=ensure_tz_aware(row.updated_at),
        )

    @staticmethod
    def _to_row(user: User) -> UserModel:
        return UserModel(
            id=user.id,
            name=user.name,
            email=user.email,
            password=user.password,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

    @staticmethod
    def _copy_onto(row: UserModel, user: User) -> None:
        row.name = user.name
        row.email = user.email
        row.password = user.password
        row.updated_at = user.updated_at
