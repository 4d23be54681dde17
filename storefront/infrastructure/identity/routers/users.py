from fastapi import APIRouter, Depends, Query
from starlette import status

from storefront import constants
from storefront.application.common.pagination import PaginationRequest
from storefront.application.common.patch import patch_from
from storefront.application.identity.dtos import (
    CreateUserRequest,
    DeleteUserRequest,
    UpdateUserRequest,
)
from storefront.application.identity.services.user_service import UserService
from storefront.core import container
from storefront.domain.common.exceptions import DomainError
from storefront.domain.common.value_objects.ids import UserId
from storefront.exceptions import ApiError
from storefront.infrastructure.common.di import inject_service
from storefront.infrastructure.common.schemas import ApiResponse, PaginatedData, PaginationMeta
from storefront.infrastructure.identity.dependencies import AdminUser, CurrentUser
from storefront.infrastructure.identity.schemas import User, UserCreateRequest, UserUpdateRequest

router = APIRouter(prefix="/users", tags=["users"])


def _parse_user_id(raw: str, failure_message: str) -> UserId:
    try:
        return UserId.parse(raw)
    except DomainError as e:
        raise ApiError.from_domain(failure_message, e) from None


@router.post("", status_code=status.HTTP_201_CREATED)
def create_user(
    admin: AdminUser,
    user_data: UserCreateRequest,
    user_service: UserService = Depends(inject_service(container.user_service)),
) -> ApiResponse[User]:
    """Create an account with the ``admin`` role. Admin only."""
    try:
        user = user_service.create_user(
            CreateUserRequest(
                name=user_data.name,
                email=user_data.email,
                password=user_data.password,
                phone_number=user_data.phone_number,
                address=user_data.address,
            )
        )
    except DomainError as e:
        raise ApiError.from_domain(constants.CREATE_USER_FAILED, e) from None

    return ApiResponse(message=constants.USER_CREATED, data=User.model_validate(user))


@router.get("")
def list_users(
    admin: AdminUser,
    user_service: UserService = Depends(inject_service(container.user_service)),
    page: int = Query(1, description="Page number, values below 1 mean the first page"),
    per_page: int = Query(10, description="Page size, values below 1 mean the default"),
    search: str = Query("", description="Filter users by name or email"),
) -> ApiResponse[PaginatedData[User]]:
    """List active users, newest first. Admin only."""
    try:
        result = user_service.list_users_paginated(
            PaginationRequest(search=search, page=page, per_page=per_page)
        )
    except DomainError as e:
        raise ApiError.from_domain(constants.GET_USERS_FAILED, e) from None

    return ApiResponse(
        message=constants.USERS_FETCHED,
        data=PaginatedData(
            items=[User.model_validate(user) for user in result.data],
            pagination=PaginationMeta(
                page=result.page,
                per_page=result.per_page,
                max_page=result.max_page,
                count=result.count,
            ),
        ),
    )


@router.get("/{user_id}")
def get_user(
    user_id: str,
    current_user: CurrentUser,
    user_service: UserService = Depends(inject_service(container.user_service)),
) -> ApiResponse[User]:
    parsed_id = _parse_user_id(user_id, constants.GET_USER_FAILED)
    try:
        user = user_service.get_user_by_id(parsed_id)
    except DomainError as e:
        raise ApiError.from_domain(constants.GET_USER_FAILED, e) from None

    return ApiResponse(message=constants.USER_FETCHED, data=User.model_validate(user))


@router.patch("/{user_id}")
def update_user(
    user_id: str,
    update_data: UserUpdateRequest,
    current_user: CurrentUser,
    user_service: UserService = Depends(inject_service(container.user_service)),
) -> ApiResponse[User]:
    """
    Update a user. Only the fields present in the body are changed.

    A new password must differ from the current one.
    """
    parsed_id = _parse_user_id(user_id, constants.UPDATE_USER_FAILED)
    try:
        user = user_service.update_user(
            UpdateUserRequest(
                id=parsed_id,
                name=patch_from(update_data.name),
                email=patch_from(update_data.email),
                password=patch_from(update_data.password),
                phone_number=patch_from(update_data.phone_number),
                address=patch_from(update_data.address),
            )
        )
    except DomainError as e:
        raise ApiError.from_domain(constants.UPDATE_USER_FAILED, e) from None

    return ApiResponse(message=constants.USER_UPDATED, data=User.model_validate(user))


@router.delete("/{user_id}")
def delete_user(
    user_id: str,
    current_user: CurrentUser,
    user_service: UserService = Depends(inject_service(container.user_service)),
) -> ApiResponse[User]:
    """Soft-delete a user and return the data it had."""
    parsed_id = _parse_user_id(user_id, constants.DELETE_USER_FAILED)
    try:
        user = user_service.delete_user(DeleteUserRequest(id=parsed_id))
    except DomainError as e:
        raise ApiError.from_domain(constants.DELETE_USER_FAILED, e) from None

    return ApiResponse(message=constants.USER_DELETED, data=User.model_validate(user))
