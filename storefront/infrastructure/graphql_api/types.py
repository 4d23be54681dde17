"""GraphQL object and input types."""

from datetime import datetime

import strawberry

from storefront.application.catalog.dtos import ProductPaginationResponse, ProductResponse
from storefront.application.identity.dtos import UserResponse


@strawberry.type
class Product:
    id: strawberry.ID
    name: str
    description: str
    merk: str
    material: str
    price: float
    created_at: datetime | None
    updated_at: datetime | None

    @classmethod
    def from_response(cls, product: ProductResponse) -> "Product":
        return cls(
            id=strawberry.ID(str(product.id)),
            name=product.name,
            description=product.description,
            merk=product.merk,
            material=product.material,
            price=float(product.price),
            created_at=product.created_at,
            updated_at=product.updated_at,
        )


@strawberry.type
class Pagination:
    page: int
    per_page: int
    max_page: int
    count: int


@strawberry.type
class ProductPage:
    data: list[Product]
    pagination: Pagination

    @classmethod
    def from_response(cls, result: ProductPaginationResponse) -> "ProductPage":
        return cls(
            data=[Product.from_response(product) for product in result.data],
            pagination=Pagination(
                page=result.page,
                per_page=result.per_page,
                max_page=result.max_page,
                count=result.count,
            ),
        )


@strawberry.type
class User:
    id: strawberry.ID
    name: str
    email: str
    phone_number: str
    address: str
    role: str

    @classmethod
    def from_response(cls, user: UserResponse) -> "User":
        return cls(
            id=strawberry.ID(str(user.id)),
            name=user.name,
            email=user.email,
            phone_number=user.phone_number,
            address=user.address,
            role=user.role,
        )


@strawberry.input
class CreateProductInput:
    name: str
    description: str
    merk: str
    price: float
    material: str = ""
