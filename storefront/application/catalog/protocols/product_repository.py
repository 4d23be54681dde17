from typing import TYPE_CHECKING, Protocol

from storefront.application.common.pagination import PaginatedResult, PaginationRequest
from storefront.domain.catalog.entities.product import Product
from storefront.domain.common.value_objects.ids import ProductId

if TYPE_CHECKING:
    from sqlalchemy.orm import Session


class ProductRepositoryProtocol(Protocol):
    def create(self, product: Product, tx: "Session | None" = None) -> Product: ...

    def find_by_id(self, product_id: ProductId, tx: "Session | None" = None) -> Product | None: ...

    def find_by_merk(self, merk: str, tx: "Session | None" = None) -> Product | None: ...

    def list_all(self, search: str = "", tx: "Session | None" = None) -> list[Product]: ...

    def list_paginated(
        self, request: PaginationRequest, tx: "Session | None" = None
    ) -> PaginatedResult[Product]: ...

    def update(self, product: Product, tx: "Session | None" = None) -> Product | None: ...

    def soft_delete(self, product_id: ProductId, tx: "Session | None" = None) -> None: ...
