"""HTTP-facing exceptions for the storefront API."""

from starlette import status

from storefront.domain.common.exceptions import DomainError


class ApiError(Exception):
    """
    An error rendered as the failure envelope ``{message, error, data: null}``.

    Routers raise it; the handler registered in ``main`` renders it.
    """

    def __init__(
        self,
        message: str,
        error: str,
        status_code: int = status.HTTP_400_BAD_REQUEST,
        headers: dict[str, str] | None = None,
    ) -> None:
        self.message = message
        self.error = error
        self.status_code = status_code
        self.headers = headers
        super().__init__(message)

    @classmethod
    def from_domain(cls, message: str, error: DomainError) -> "ApiError":
        """Service errors are always reported as 400."""
        return cls(message, error.message)


class CredentialsError(ApiError):
    """Missing, malformed or expired bearer token."""

    def __init__(self, error: str = "Could not validate credentials") -> None:
        super().__init__(
            "Unauthorized",
            error,
            status_code=status.HTTP_401_UNAUTHORIZED,
            headers={"WWW-Authenticate": "Bearer"},
        )


class PermissionDeniedError(ApiError):
    """Authenticated, but the role does not allow the action."""

    def __init__(self, error: str) -> None:
        super().__init__("Forbidden", error, status_code=status.HTTP_403_FORBIDDEN)
