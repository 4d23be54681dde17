"""Catalog domain exceptions."""

from storefront.domain.common.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ValidationError,
)


class ProductNotFoundError(EntityNotFoundError):
    """Raised when a product cannot be found."""

    code = "PRODUCT_NOT_FOUND"

    def __init__(self, product_id: object) -> None:
        super().__init__("Product", product_id)


class InvalidDescriptionError(ValidationError):
    """Raised when a product description is too short."""

    code = "INVALID_DESCRIPTION"

    def __init__(self, min_length: int) -> None:
        super().__init__(
            f"Description must be at least {min_length} characters", field="description"
        )


class InvalidPriceError(ValidationError):
    """Raised when a price is zero or negative."""

    code = "INVALID_PRICE"

    def __init__(self, price: object) -> None:
        super().__init__("Price must be greater than zero", field="price", value=str(price))


class MerkAlreadyExistsError(ConflictError):
    """Raised when a merk is already used by an active product."""

    code = "MERK_ALREADY_EXISTS"

    def __init__(self, merk: str) -> None:
        super().__init__(f"Merk {merk} is already registered", field="merk", value=merk)
        self.merk = merk
