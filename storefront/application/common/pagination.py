"""
Pagination types for list queries.

Example:
    request = PaginationRequest(search="chair", page=2, per_page=10)
    result = product_repository.list_paginated(request)
    result.max_page  # ceil(result.count / result.per_page)
"""

import math
from dataclasses import dataclass, replace
from typing import Generic, TypeVar

T = TypeVar("T")

DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 10


@dataclass(frozen=True)
class PaginationRequest:
    """
    Search and paging parameters for list queries.

    Attributes:
        search: Case-insensitive substring filter, empty for no filtering
        page: Requested page number (1-indexed)
        per_page: Number of items per page
    """

    search: str = ""
    page: int = DEFAULT_PAGE
    per_page: int = DEFAULT_PER_PAGE

    def normalized(self) -> "PaginationRequest":
        """Return a copy with out-of-range paging values replaced by the defaults."""
        return replace(
            self,
            page=self.page if self.page >= 1 else DEFAULT_PAGE,
            per_page=self.per_page if self.per_page >= 1 else DEFAULT_PER_PAGE,
        )

    @property
    def offset(self) -> int:
        """Calculate the offset for database queries."""
        return (self.page - 1) * self.per_page

    @property
    def limit(self) -> int:
        """Return the limit for database queries."""
        return self.per_page


@dataclass(frozen=True)
class PaginatedResult(Generic[T]):
    """
    One page of items plus the paging envelope.

    Attributes:
        items: Items on the current page
        count: Number of matching items across all pages
        page: Page number that was served
        per_page: Page size that was used
    """

    items: list[T]
    count: int
    page: int
    per_page: int

    @property
    def max_page(self) -> int:
        """Total number of pages."""
        if self.count == 0:
            return 0
        return math.ceil(self.count / self.per_page)
