"""Identity domain exceptions."""

from storefront.domain.common.exceptions import (
    AuthError,
    ConflictError,
    EntityNotFoundError,
    ExternalServiceError,
    ValidationError,
)


class UserNotFoundError(EntityNotFoundError):
    """Raised when a user cannot be found."""

    code = "USER_NOT_FOUND"

    def __init__(self, user_id: object) -> None:
        super().__init__("User", user_id)


class InvalidNameError(ValidationError):
    """Raised when a name is too short."""

    code = "INVALID_NAME"

    def __init__(self, min_length: int) -> None:
        super().__init__(f"Name must be at least {min_length} characters", field="name")


class InvalidEmailError(ValidationError):
    """Raised when an email address is malformed."""

    code = "INVALID_EMAIL"

    def __init__(self, email: str) -> None:
        super().__init__("Invalid email format", field="email", value=email)


class InvalidPasswordError(ValidationError):
    """Raised when a password is too short."""

    code = "INVALID_PASSWORD"

    def __init__(self, min_length: int) -> None:
        super().__init__(f"Password must be at least {min_length} characters", field="password")


class PasswordSameError(ValidationError):
    """Raised when the new password equals the current one."""

    code = "PASSWORD_SAME"

    def __init__(self) -> None:
        super().__init__("New password must differ from the current password", field="password")


class EmailAlreadyExistsError(ConflictError):
    """Raised when an email is already used by an active user."""

    code = "EMAIL_ALREADY_EXISTS"

    def __init__(self, email: str) -> None:
        super().__init__(f"Email {email} is already registered", field="email", value=email)
        self.email = email


class InvalidLoginCredentialError(AuthError):
    """Raised when login fails; never says which half of the credentials was wrong."""

    code = "INVALID_LOGIN_CREDENTIAL"

    def __init__(self) -> None:
        super().__init__("Invalid email or password")


class InvalidTokenError(AuthError):
    """Raised when a token is malformed, expired or names an unknown user."""

    code = "INVALID_TOKEN"

    def __init__(self) -> None:
        super().__init__("Invalid or expired token")


class ForbiddenError(AuthError):
    """Raised when an authenticated user lacks the required role."""

    code = "FORBIDDEN"

    def __init__(self, required_role: str) -> None:
        super().__init__(f"This action requires the '{required_role}' role")
        self.required_role = required_role


class TokenGenerationFailedError(ExternalServiceError):
    """Raised when the token issuer cannot produce a token pair."""

    code = "TOKEN_GENERATION_FAILED"

    def __init__(self) -> None:
        super().__init__("Failed to generate access token")
