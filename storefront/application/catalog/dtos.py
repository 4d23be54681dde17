"""DTOs for product service operations."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from uuid import UUID

from storefront.application.common.patch import UNSET, Patch
from storefront.domain.catalog.entities.product import Product
from storefront.domain.common.value_objects.ids import ProductId


@dataclass(frozen=True)
class CreateProductRequest:
    name: str
    description: str
    merk: str
    material: str
    price: Decimal


@dataclass(frozen=True)
class UpdateProductRequest:
    """Partial update; fields left at UNSET keep their stored value."""

    id: ProductId
    name: Patch[str] = UNSET
    description: Patch[str] = UNSET
    merk: Patch[str] = UNSET
    material: Patch[str] = UNSET
    price: Patch[Decimal] = UNSET


@dataclass(frozen=True)
class DeleteProductRequest:
    id: ProductId


@dataclass(frozen=True)
class ProductResponse:
    id: UUID
    name: str
    description: str
    merk: str
    material: str
    price: Decimal
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_entity(cls, product: Product) -> "ProductResponse":
        return cls(
            id=product.id.value,
            name=product.name,
            description=product.description,
            merk=product.merk,
            material=product.material,
            price=product.price,
            created_at=product.created_at,
            updated_at=product.updated_at,
        )


@dataclass(frozen=True)
class ProductPaginationResponse:
    data: list[ProductResponse] = field(default_factory=list)
    page: int = 1
    per_page: int = 10
    max_page: int = 0
    count: int = 0
