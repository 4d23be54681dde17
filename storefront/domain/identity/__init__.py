"""Identity domain layer."""

from storefront.domain.identity.entities.user import Role, User, is_valid_email
from storefront.domain.identity.exceptions import (
    EmailAlreadyExistsError,
    ForbiddenError,
    InvalidEmailError,
    InvalidLoginCredentialError,
    InvalidNameError,
    InvalidPasswordError,
    InvalidTokenError,
    PasswordSameError,
    TokenGenerationFailedError,
    UserNotFoundError,
)

__all__ = [
    "EmailAlreadyExistsError",
    "ForbiddenError",
    "InvalidEmailError",
    "InvalidLoginCredentialError",
    "InvalidNameError",
    "InvalidPasswordError",
    "InvalidTokenError",
    "PasswordSameError",
    "Role",
    "TokenGenerationFailedError",
    "User",
    "UserNotFoundError",
    "is_valid_email",
]
