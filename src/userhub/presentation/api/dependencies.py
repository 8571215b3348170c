"""FastAPI dependencies.

Settings come from ``app.state.settings`` (set by ``create_app``). One engine
and session factory per database URL; one ``AsyncSession`` and one
``UserService`` per request.
"""

import logging
from functools import lru_cache
from typing import Annotated, AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from userhub.application.services import UserService
from userhub.domain.user import UserRepository, UserValidator
from userhub.infrastructure.persistence.sqlalchemy.init_db import (
    describe_database_url,
    ensure_sqlite_directory,
)
from userhub.infrastructure.persistence.sqlalchemy.repositories import (
    UserRepositorySQLAlchemy,
)
from userhub_config.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def get_app_settings(request: Request) -> Settings:
    """Settings the running app was created with."""
    return getattr(request.app.state, "settings", None) or get_settings()


AppSettings = Annotated[Settings, Depends(get_app_settings)]


@lru_cache()
def get_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """Engine owning the connection pool for ``database_url``.

    Cached per URL, so every request against the same database shares it.
    """
    ensure_sqlite_directory(database_url)
    logger.debug(
        "Creating database engine for %s",
        describe_database_url(database_url),
    )
    return create_async_engine(database_url, echo=echo, pool_pre_ping=True)


@lru_cache()
def get_session_maker(
    database_url: str,
    echo: bool = False,
) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        get_engine(database_url, echo),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db_session(
    settings: AppSettings,
) -> AsyncGenerator[AsyncSession, None]:
    """Yield the request's unit of work.

    Routers commit explicitly; anything left uncommitted is rolled back
    when the session closes.
    """
    session_maker = get_session_maker(settings.database_url, settings.database_echo)
    async with session_maker() as session:
        yield session


DBSession = Annotated[AsyncSession, Depends(get_db_session)]


def get_user_repository(session: DBSession) -> UserRepository:
    return UserRepositorySQLAlchemy(session)


def get_user_validator() -> UserValidator:
    return UserValidator()


def get_user_service(
    user_repository: UserRepository = Depends(get_user_repository),
    validator: UserValidator = Depends(get_user_validator),
) -> UserService:
    """UserService composed from the request's repository and a validator."""
    return UserService(user_repository=user_repository, validator=validator)


UserServiceDep = Annotated[UserService, Depends(get_user_service)]
