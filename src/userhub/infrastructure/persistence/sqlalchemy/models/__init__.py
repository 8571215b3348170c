"""SQLAlchemy models. Importing this package registers them on Base.metadata."""

from userhub.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)
from userhub.infrastructure.persistence.sqlalchemy.models.user_model import UserModel

__all__ = [
    "Base",
    "TimestampMixin",
    "UserModel",
]
