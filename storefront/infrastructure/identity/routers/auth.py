from fastapi import APIRouter, Depends, Request
from starlette import status

from storefront import constants
from storefront.application.identity.dtos import LoginUserRequest, RegisterUserRequest
from storefront.application.identity.protocols import TokenPair
from storefront.application.identity.services.user_service import UserService
from storefront.core import container
from storefront.domain.common.exceptions import DomainError
from storefront.exceptions import ApiError
from storefront.infrastructure.common.di import inject_service
from storefront.infrastructure.common.rate_limit import limiter
from storefront.infrastructure.common.schemas import ApiResponse
from storefront.infrastructure.identity.schemas import (
    LoginRequest,
    RefreshTokenRequest,
    User,
    UserRegisterRequest,
)

router = APIRouter(tags=["auth"])


@router.post("/register", status_code=status.HTTP_201_CREATED)
@limiter.limit("5/minute")  # type: ignore[misc]
def register(
    request: Request,
    register_data: UserRegisterRequest,
    user_service: UserService = Depends(inject_service(container.user_service)),
) -> ApiResponse[User]:
    """Register a new account with the ``user`` role."""
    try:
        user = user_service.register(
            RegisterUserRequest(
                name=register_data.name,
                email=register_data.email,
                password=register_data.password,
            )
        )
    except DomainError as e:
        raise ApiError.from_domain(constants.REGISTER_FAILED, e) from None

    return ApiResponse(message=constants.USER_REGISTERED, data=User.model_validate(user))


@router.post("/login")
@limiter.limit("5/minute")  # type: ignore[misc]
def login(
    request: Request,
    credentials: LoginRequest,
    user_service: UserService = Depends(inject_service(container.user_service)),
) -> ApiResponse[TokenPair]:
    try:
        token_pair = user_service.login(
            LoginUserRequest(email=credentials.email, password=credentials.password)
        )
    except DomainError as e:
        raise ApiError.from_domain(constants.LOGIN_FAILED, e) from None

    return ApiResponse(message=constants.LOGIN_SUCCEEDED, data=token_pair)


@router.post("/refresh")
@limiter.limit("10/minute")  # type: ignore[misc]
def refresh(
    request: Request,
    body: RefreshTokenRequest,
    user_service: UserService = Depends(inject_service(container.user_service)),
) -> ApiResponse[TokenPair]:
    """Exchange a refresh token for a new token pair."""
    try:
        token_pair = user_service.refresh(body.refresh_token)
    except DomainError as e:
        raise ApiError.from_domain(constants.REFRESH_FAILED, e) from None

    return ApiResponse(message=constants.TOKEN_REFRESHED, data=token_pair)
