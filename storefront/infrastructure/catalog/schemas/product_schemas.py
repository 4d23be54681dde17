"""Pydantic schemas for Product API request/response validation."""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, Field, field_serializer


class ProductCreateRequest(BaseModel):
    """Schema for creating a Product."""

    name: str = Field(..., description="Product name, at least 5 characters")
    description: str = Field(..., description="Product description, at least 8 characters")
    merk: str = Field(..., max_length=255, description="Brand, unique among active products")
    material: str = Field("", max_length=255)
    price: Decimal = Field(..., max_digits=12, decimal_places=2, description="Price, above zero")


class ProductUpdateRequest(BaseModel):
    """Schema for a partial product update. Omitted or null fields are left unchanged."""

    name: str | None = None
    description: str | None = None
    merk: str | None = Field(None, max_length=255)
    material: str | None = Field(None, max_length=255)
    price: Decimal | None = Field(None, max_digits=12, decimal_places=2)


class Product(BaseModel):
    """Schema for Product response."""

    id: UUID
    name: str
    description: str
    merk: str
    material: str
    price: Decimal
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = {"from_attributes": True}

    @field_serializer("price")
    def serialize_price(self, price: Decimal) -> float:
        return float(price)
