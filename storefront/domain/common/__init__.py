"""Shared domain building blocks."""

from .entity import Entity, EntityId
from .exceptions import (
    AuthError,
    ConflictError,
    DomainError,
    EntityNotFoundError,
    ExternalServiceError,
    InvalidIDFormatError,
    StoreError,
    ValidationError,
)

__all__ = [
    "AuthError",
    "ConflictError",
    "DomainError",
    "Entity",
    "EntityId",
    "EntityNotFoundError",
    "ExternalServiceError",
    "InvalidIDFormatError",
    "StoreError",
    "ValidationError",
]
