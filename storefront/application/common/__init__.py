"""Application-layer building blocks shared by every bounded context."""

from .pagination import PaginatedResult, PaginationRequest
from .patch import UNSET, Patch, is_set, patch_from

__all__ = [
    "UNSET",
    "PaginatedResult",
    "PaginationRequest",
    "Patch",
    "is_set",
    "patch_from",
]
