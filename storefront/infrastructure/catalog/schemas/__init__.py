"""Catalog context schemas."""

from storefront.infrastructure.catalog.schemas.product_schemas import (
    Product,
    ProductCreateRequest,
    ProductUpdateRequest,
)

__all__ = [
    "Product",
    "ProductCreateRequest",
    "ProductUpdateRequest",
]
