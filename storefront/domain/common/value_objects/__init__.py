from .ids import ProductId, UserId

__all__ = ["ProductId", "UserId"]
