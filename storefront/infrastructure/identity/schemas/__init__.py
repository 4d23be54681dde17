"""Identity context schemas."""

from storefront.infrastructure.identity.schemas.user_schemas import (
    LoginRequest,
    RefreshTokenRequest,
    User,
    UserCreateRequest,
    UserRegisterRequest,
    UserUpdateRequest,
)

__all__ = [
    "LoginRequest",
    "RefreshTokenRequest",
    "User",
    "UserCreateRequest",
    "UserRegisterRequest",
    "UserUpdateRequest",
]
