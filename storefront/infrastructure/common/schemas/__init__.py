from .response_wrappers import ApiErrorResponse, ApiResponse, PaginatedData, PaginationMeta

__all__ = ["ApiErrorResponse", "ApiResponse", "PaginatedData", "PaginationMeta"]
