from userhub.domain.user.services.user_validator import (
    EMAIL_PATTERN,
    PASSWORD_MIN_LENGTH,
    UserValidator,
)

__all__ = [
    "EMAIL_PATTERN",
    "PASSWORD_MIN_LENGTH",
    "UserValidator",
]
