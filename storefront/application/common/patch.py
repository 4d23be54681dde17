"""
Present-or-absent wrapper for partial updates.

Update requests declare each optional field as ``Patch[T]`` defaulting to
``UNSET``. A field left at ``UNSET`` is not touched by the update; any other
value replaces the stored one.

Example:
    @dataclass(frozen=True)
    class UpdateThing:
        id: ThingId
        name: Patch[str] = UNSET

    if is_set(request.name):
        thing.rename(request.name)
"""

from enum import Enum
from typing import Final, Literal, TypeAlias, TypeGuard, TypeVar

T = TypeVar("T")


class _Unset(Enum):
    UNSET = "UNSET"

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Final = _Unset.UNSET

Patch: TypeAlias = T | Literal[_Unset.UNSET]


def is_set(value: "T | _Unset") -> TypeGuard[T]:
    """Return True when ``value`` carries an update."""
    return value is not UNSET


def patch_from(value: T | None) -> "T | _Unset":
    """Map a nullable transport value to a patch field (None means absent)."""
    return UNSET if value is None else value
