"""
Base class for Entities.

Entities have an identity that runs through time. Two entities are equal if
they have the same identity, regardless of their attributes.
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, Self, TypeVar
from uuid import UUID, uuid4

from .exceptions import InvalidIDFormatError


@dataclass(frozen=True)
class EntityId:
    """
    Base class for strongly-typed, UUID-based entity identifiers.

    Example:
        @dataclass(frozen=True)
        class UserId(EntityId):
            pass

        user_id = UserId.parse("7f0c...")
    """

    value: UUID

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def generate(cls) -> Self:
        """Create a fresh random identifier."""
        return cls(uuid4())

    @classmethod
    def parse(cls, raw: str | UUID) -> Self:
        """
        Build an identifier from its textual form.

        Raises:
            InvalidIDFormatError: If ``raw`` is not a valid UUID
        """
        if isinstance(raw, UUID):
            return cls(raw)
        try:
            return cls(UUID(str(raw)))
        except (ValueError, AttributeError, TypeError):
            raise InvalidIDFormatError(raw) from None


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """
    Base class for Entities in the domain model.

    Subclasses must have an ``id`` attribute of type IdType.
    """

    id: IdType

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id})"
