"""Product entity for the catalog."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from storefront.domain.common.entity import Entity
from storefront.domain.common.value_objects.ids import ProductId


@dataclass(eq=False)
class Product(Entity[ProductId]):
    """
    Product entity.

    Business Rules:
    - Price is strictly positive
    - Merk (brand) is unique among products that have not been deleted
    - Deletion is soft: ``deleted_at`` records when the product was removed
    """

    id: ProductId
    name: str
    description: str
    merk: str
    material: str
    price: Decimal
    created_at: datetime | None = None
    updated_at: datetime | None = None
    deleted_at: datetime | None = None

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    def rename(self, new_name: str) -> None:
        self.name = new_name

    def describe(self, description: str) -> None:
        self.description = description

    def rebrand(self, merk: str) -> None:
        self.merk = merk

    def change_material(self, material: str) -> None:
        self.material = material

    def reprice(self, price: Decimal) -> None:
        self.price = price

    @classmethod
    def create(
        cls, name: str, description: str, merk: str, material: str, price: Decimal
    ) -> "Product":
        """Create a new product with a freshly generated id."""
        return cls(
            id=ProductId.generate(),
            name=name,
            description=description,
            merk=merk,
            material=material,
            price=price,
        )
