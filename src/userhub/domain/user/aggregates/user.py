"""User aggregate."""

from datetime import datetime
from typing import Optional

from userhub.domain.shared.time import utc_now
from userhub.domain.user.value_objects import UserChanges


class User:
    """
    User aggregate root.

    The id is assigned by the record store on first save and stays fixed
    afterwards. Field values are not checked here; the UserValidator decides
    whether a user is fit to be stored.
    """

    def __init__(
        self,
        name: Optional[str],
        email: Optional[str],
        password: Optional[str],
        id: Optional[int] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        self._id = id
        self._name = name
        self._email = email
        self._password = password
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

    @property
    def id(self) -> Optional[int]:
        return self._id

    @property
    def is_persisted(self) -> bool:
        return self._id is not None

    @property
    def name(self) -> Optional[str]:
        return self._name

    @property
    def email(self) -> Optional[str]:
        return self._email

    @property
    def password(self) -> Optional[str]:
        return self._password

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def apply_changes(self, changes: UserChanges) -> None:
        """Overwrite name, email and password with the supplied values.

        Fields left as None in ``changes`` keep their current value.
        """
        if changes.name is not None:
            self._name = changes.name
        if changes.email is not None:
            self._email = changes.email
        if changes.password is not None:
            self._password = changes.password
        self._updated_at = utc_now()

    @classmethod
    def create(
        cls,
        name: Optional[str],
        email: Optional[str],
        password: Optional[str],
    ) -> "User":
        return cls(name=name, email=email, password=password)

    @classmethod
    def reconstitute(
        cls,
        id: int,
        name: str,
        email: str,
        password: str,
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        return cls(
            id=id,
            name=name,
            email=email,
            password=password,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        if self._id is None or other._id is None:
            return self is other
        return self._id == other._id

    def __hash__(self) -> int:
        if self._id is None:
            return id(self)
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id}, name={self._name!r}, email={self._email!r})"
