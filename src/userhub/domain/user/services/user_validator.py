"""Field-level validation rules for users.

Each rule is checked independently and every violation is reported, so a
client can fix all of its input in one round trip.
"""

import re
from typing import Optional

from userhub.domain.user.aggregates import User
from userhub.domain.user.value_objects import Violation

# local-part@domain.tld; applied with fullmatch so trailing newlines fail
EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")

PASSWORD_MIN_LENGTH = 3

MSG_BLANK = "must not be blank"
MSG_NULL = "must not be null"
MSG_EMAIL = "must be a well-formed email address"
MSG_PASSWORD_SIZE = f"size must be at least {PASSWORD_MIN_LENGTH}"

_PASSWORD_TOO_SHORT = Violation("password", MSG_PASSWORD_SIZE)


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


class UserValidator:
    """Checks a candidate user against the name, email and password rules."""

    def validate(self, user: User) -> frozenset[Violation]:
        violations: set[Violation] = set()
        violations.update(self._check_name(user.name))
        violations.update(self._check_email(user.email))
        violations.update(self._check_password(user.password))
        return frozenset(violations)

    def validate_update(self, user: User) -> frozenset[Violation]:
        """Like ``validate`` but without the password length rule."""
        return frozenset(v for v in self.validate(user) if v != _PASSWORD_TOO_SHORT)

    @staticmethod
    def _check_name(name: Optional[str]) -> list[Violation]:
        if _is_blank(name):
            return [Violation("name", MSG_BLANK)]
        return []

    @staticmethod
    def _check_email(email: Optional[str]) -> list[Violation]:
        if email is None:
            return [Violation("email", MSG_NULL)]
        if not EMAIL_PATTERN.fullmatch(email):
            return [Violation("email", MSG_EMAIL)]
        return []

    @staticmethod
    def _check_password(password: Optional[str]) -> list[Violation]:
        violations = []
        if _is_blank(password):
            violations.append(Violation("password", MSG_BLANK))
        if password is None or len(password) < PASSWORD_MIN_LENGTH:
            violations.append(_PASSWORD_TOO_SHORT)
        return violations

