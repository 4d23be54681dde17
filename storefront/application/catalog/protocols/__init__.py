from .product_repository import ProductRepositoryProtocol

__all__ = ["ProductRepositoryProtocol"]
