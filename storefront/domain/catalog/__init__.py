"""Catalog domain layer."""

from storefront.domain.catalog.entities.product import Product
from storefront.domain.catalog.exceptions import (
    InvalidDescriptionError,
    InvalidPriceError,
    MerkAlreadyExistsError,
    ProductNotFoundError,
)

__all__ = [
    "InvalidDescriptionError",
    "InvalidPriceError",
    "MerkAlreadyExistsError",
    "Product",
    "ProductNotFoundError",
]
