"""FastAPI dependencies for authentication and authorization."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer

from storefront.application.identity.services.user_service import UserService
from storefront.core import container
from storefront.domain.common.exceptions import AuthError
from storefront.domain.identity.entities.user import Role, User
from storefront.domain.identity.exceptions import ForbiddenError
from storefront.exceptions import CredentialsError, PermissionDeniedError
from storefront.infrastructure.common.di import inject_service

# Missing headers are reported through our own envelope, not FastAPI's default
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="api/login", auto_error=False)


def get_current_user(
    token: Annotated[str | None, Depends(oauth2_scheme)],
    user_service: Annotated[UserService, Depends(inject_service(container.user_service))],
) -> User:
    """
    Get the current authenticated user from the access token.

    Raises:
        CredentialsError: If the token is missing, invalid or names a deleted user
    """
    if not token:
        raise CredentialsError("Missing bearer token")

    claims = container.token_service().verify_access_token(token)
    if claims is None:
        raise CredentialsError("Invalid or expired token")

    try:
        return user_service.get_authenticated_user(claims)
    except AuthError as e:
        raise CredentialsError(e.message) from None


def require_admin(current_user: Annotated[User, Depends(get_current_user)]) -> User:
    """Allow only users holding the admin role."""
    if not current_user.is_admin:
        raise PermissionDeniedError(ForbiddenError(Role.ADMIN).message)
    return current_user


CurrentUser = Annotated[User, Depends(get_current_user)]
AdminUser = Annotated[User, Depends(require_admin)]
