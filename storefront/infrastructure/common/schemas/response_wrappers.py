"""Common response envelopes for API responses."""

from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Success envelope."""

    message: str
    data: T


class ApiErrorResponse(BaseModel):
    """Failure envelope. ``data`` is always null."""

    message: str
    error: str
    data: None = None


class PaginationMeta(BaseModel):
    page: int
    per_page: int
    max_page: int
    count: int


class PaginatedData(BaseModel, Generic[T]):
    """Payload of paginated list responses."""

    items: list[T]
    pagination: PaginationMeta
