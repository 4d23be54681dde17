from fastapi import APIRouter, Depends, Query
from starlette import status

from storefront import constants
from storefront.application.catalog.dtos import (
    CreateProductRequest,
    DeleteProductRequest,
    UpdateProductRequest,
)
from storefront.application.catalog.services.product_service import ProductService
from storefront.application.common.pagination import PaginationRequest
from storefront.application.common.patch import patch_from
from storefront.core import container
from storefront.domain.common.exceptions import DomainError
from storefront.domain.common.value_objects.ids import ProductId
from storefront.exceptions import ApiError
from storefront.infrastructure.catalog.schemas import (
    Product,
    ProductCreateRequest,
    ProductUpdateRequest,
)
from storefront.infrastructure.common.di import inject_service
from storefront.infrastructure.common.schemas import ApiResponse, PaginatedData, PaginationMeta
from storefront.infrastructure.identity.dependencies import CurrentUser

router = APIRouter(prefix="/products", tags=["products"])


def _parse_product_id(raw: str, failure_message: str) -> ProductId:
    try:
        return ProductId.parse(raw)
    except DomainError as e:
        raise ApiError.from_domain(failure_message, e) from None


@router.post("", status_code=status.HTTP_201_CREATED)
def create_product(
    current_user: CurrentUser,
    product_data: ProductCreateRequest,
    product_service: ProductService = Depends(inject_service(container.product_service)),
) -> ApiResponse[Product]:
    try:
        product = product_service.create_product(
            CreateProductRequest(
                name=product_data.name,
                description=product_data.description,
                merk=product_data.merk,
                material=product_data.material,
                price=product_data.price,
            )
        )
    except DomainError as e:
        raise ApiError.from_domain(constants.CREATE_PRODUCT_FAILED, e) from None

    return ApiResponse(message=constants.PRODUCT_CREATED, data=Product.model_validate(product))


@router.get("")
def list_products(
    current_user: CurrentUser,
    product_service: ProductService = Depends(inject_service(container.product_service)),
    page: int = Query(1, description="Page number, values below 1 mean the first page"),
    per_page: int = Query(10, description="Page size, values below 1 mean the default"),
    search: str = Query("", description="Filter products by name, merk or material"),
) -> ApiResponse[PaginatedData[Product]]:
    """List active products, newest first."""
    try:
        result = product_service.list_products_paginated(
            PaginationRequest(search=search, page=page, per_page=per_page)
        )
    except DomainError as e:
        raise ApiError.from_domain(constants.GET_PRODUCTS_FAILED, e) from None

    return ApiResponse(
        message=constants.PRODUCTS_FETCHED,
        data=PaginatedData(
            items=[Product.model_validate(product) for product in result.data],
            pagination=PaginationMeta(
                page=result.page,
                per_page=result.per_page,
                max_page=result.max_page,
                count=result.count,
            ),
        ),
    )


@router.get("/{product_id}")
def get_product(
    product_id: str,
    current_user: CurrentUser,
    product_service: ProductService = Depends(inject_service(container.product_service)),
) -> ApiResponse[Product]:
    parsed_id = _parse_product_id(product_id, constants.GET_PRODUCT_FAILED)
    try:
        product = product_service.get_product_by_id(parsed_id)
    except DomainError as e:
        raise ApiError.from_domain(constants.GET_PRODUCT_FAILED, e) from None

    return ApiResponse(message=constants.PRODUCT_FETCHED, data=Product.model_validate(product))


@router.patch("/{product_id}")
def update_product(
    product_id: str,
    update_data: ProductUpdateRequest,
    current_user: CurrentUser,
    product_service: ProductService = Depends(inject_service(container.product_service)),
) -> ApiResponse[Product]:
    """Update a product. Only the fields present in the body are changed."""
    parsed_id = _parse_product_id(product_id, constants.UPDATE_PRODUCT_FAILED)
    try:
        product = product_service.update_product(
            UpdateProductRequest(
                id=parsed_id,
                name=patch_from(update_data.name),
                description=patch_from(update_data.description),
                merk=patch_from(update_data.merk),
                material=patch_from(update_data.material),
                price=patch_from(update_data.price),
            )
        )
    except DomainError as e:
        raise ApiError.from_domain(constants.UPDATE_PRODUCT_FAILED, e) from None

    return ApiResponse(message=constants.PRODUCT_UPDATED, data=Product.model_validate(product))


@router.delete("/{product_id}")
def delete_product(
    product_id: str,
    current_user: CurrentUser,
    product_service: ProductService = Depends(inject_service(container.product_service)),
) -> ApiResponse[Product]:
    parsed_id = _parse_product_id(product_id, constants.DELETE_PRODUCT_FAILED)
    try:
        product = product_service.delete_product(DeleteProductRequest(id=parsed_id))
    except DomainError as e:
        raise ApiError.from_domain(constants.DELETE_PRODUCT_FAILED, e) from None

    return ApiResponse(message=constants.PRODUCT_DELETED, data=Product.model_validate(product))
