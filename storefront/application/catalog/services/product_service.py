"""Service for the product catalog."""

from collections.abc import Callable
from decimal import Decimal
from typing import Any, TypeVar

import structlog

from storefront.application.catalog.dtos import (
    CreateProductRequest,
    DeleteProductRequest,
    ProductPaginationResponse,
    ProductResponse,
    UpdateProductRequest,
)
from storefront.application.catalog.protocols import ProductRepositoryProtocol
from storefront.application.common.pagination import PaginationRequest
from storefront.application.common.patch import is_set
from storefront.domain.catalog.entities.product import Product
from storefront.domain.catalog.exceptions import (
    InvalidDescriptionError,
    InvalidPriceError,
    MerkAlreadyExistsError,
    ProductNotFoundError,
)
from storefront.domain.common.exceptions import DomainError, StoreError
from storefront.domain.common.value_objects.ids import ProductId
from storefront.domain.identity.exceptions import InvalidNameError

MIN_NAME_LENGTH = 5
MIN_DESCRIPTION_LENGTH = 8
MIN_UPDATED_DESCRIPTION_LENGTH = 5

_Saved = TypeVar("_Saved", Product, Product | None)


class ProductService:
    """Validates product input, keeps merk unique and drives persistence."""

    def __init__(self, product_repository: ProductRepositoryProtocol, logger: Any = None) -> None:
        self.product_repository = product_repository
        self.logger = logger or structlog.get_logger(__name__)

    def create_product(self, request: CreateProductRequest) -> ProductResponse:
        """
        Create a product.

        Raises:
            InvalidNameError: If the name is shorter than 5 characters
            InvalidDescriptionError: If the description is shorter than 8 characters
            InvalidPriceError: If the price is not positive
            MerkAlreadyExistsError: If an active product already uses the merk
        """
        try:
            self._check_name(request.name)
            self._check_description(request.description, MIN_DESCRIPTION_LENGTH)
            self._check_price(request.price)
            if self.product_repository.find_by_merk(request.merk) is not None:
                raise MerkAlreadyExistsError(request.merk)

            product = Product.create(
                name=request.name,
                description=request.description,
                merk=request.merk,
                material=request.material,
                price=request.price,
            )
            product = self._save(self.product_repository.create, product)
        except DomainError as e:
            self._log_failure("product_creation_failed", e, merk=request.merk)
            raise

        self.logger.info("product_created", product_id=str(product.id), merk=product.merk)
        return ProductResponse.from_entity(product)

    def get_product_by_id(self, product_id: ProductId) -> ProductResponse:
        try:
            product = self._get_existing(product_id)
        except DomainError as e:
            self._log_failure("product_lookup_failed", e, product_id=str(product_id))
            raise
        return ProductResponse.from_entity(product)

    def list_products(self, search: str = "") -> list[ProductResponse]:
        try:
            products = self.product_repository.list_all(search)
        except DomainError as e:
            self._log_failure("product_list_failed", e, search=search)
            raise
        return [ProductResponse.from_entity(product) for product in products]

    def list_products_paginated(self, request: PaginationRequest) -> ProductPaginationResponse:
        try:
            result = self.product_repository.list_paginated(request)
        except DomainError as e:
            self._log_failure("product_list_failed", e, page=request.page)
            raise

        self.logger.info("products_listed", page=result.page, count=result.count)
        return ProductPaginationResponse(
            data=[ProductResponse.from_entity(product) for product in result.items],
            page=result.page,
            per_page=result.per_page,
            max_page=result.max_page,
            count=result.count,
        )

    def update_product(self, request: UpdateProductRequest) -> ProductResponse:
        """
        Apply a partial update. Only fields present on the request are changed.

        The description minimum is lower here than on create.
        """
        try:
            product = self._get_existing(request.id)

            if is_set(request.name):
                self._check_name(request.name)
                product.rename(request.name)

            if is_set(request.description):
                self._check_description(request.description, MIN_UPDATED_DESCRIPTION_LENGTH)
                product.describe(request.description)

            if is_set(request.merk):
                existing = self.product_repository.find_by_merk(request.merk)
                if existing is not None and existing.id != product.id:
                    raise MerkAlreadyExistsError(request.merk)
                product.rebrand(request.merk)

            if is_set(request.material):
                product.change_material(request.material)

            if is_set(request.price):
                self._check_price(request.price)
                product.reprice(request.price)

            updated = self._save(self.product_repository.update, product)
            if updated is None:
                # Deleted between the lookup and the write
                raise ProductNotFoundError(request.id)
            product = updated
        except DomainError as e:
            self._log_failure("product_update_failed", e, product_id=str(request.id))
            raise

        self.logger.info("product_updated", product_id=str(product.id))
        return ProductResponse.from_entity(product)

    def delete_product(self, request: DeleteProductRequest) -> ProductResponse:
        """Soft-delete a product and return the data it had."""
        try:
            product = self._get_existing(request.id)
            self.product_repository.soft_delete(product.id)
        except DomainError as e:
            self._log_failure("product_deletion_failed", e, product_id=str(request.id))
            raise

        self.logger.info("product_deleted", product_id=str(product.id))
        return ProductResponse.from_entity(product)

    def _get_existing(self, product_id: ProductId) -> Product:
        product = self.product_repository.find_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product

    def _save(self, write: Callable[[Product], _Saved], product: Product) -> _Saved:
        try:
            return write(product)
        except StoreError as e:
            if e.unique_violation:
                raise MerkAlreadyExistsError(product.merk) from e
            raise

    def _log_failure(self, event: str, error: DomainError, **context: object) -> None:
        if isinstance(error, StoreError):
            self.logger.error(event, code=error.code, error=str(error), **context)
        else:
            self.logger.warning(event, code=error.code, error=error.message, **context)

    @staticmethod
    def _check_name(name: str) -> None:
        if len(name) < MIN_NAME_LENGTH:
            raise InvalidNameError(MIN_NAME_LENGTH)

    @staticmethod
    def _check_description(description: str, min_length: int) -> None:
        if len(description) < min_length:
            raise InvalidDescriptionError(min_length)

    @staticmethod
    def _check_price(price: Decimal) -> None:
        if price <= 0:
            raise InvalidPriceError(price)
