"""DTOs for user service operations."""

from dataclasses import dataclass, field
from uuid import UUID

from storefront.application.common.patch import UNSET, Patch
from storefront.domain.common.value_objects.ids import UserId
from storefront.domain.identity.entities.user import User


@dataclass(frozen=True)
class RegisterUserRequest:
    name: str
    email: str
    password: str


@dataclass(frozen=True)
class CreateUserRequest:
    name: str
    email: str
    password: str
    phone_number: str = ""
    address: str = ""


@dataclass(frozen=True)
class LoginUserRequest:
    email: str
    password: str


@dataclass(frozen=True)
class UpdateUserRequest:
    """Partial update; fields left at UNSET keep their stored value."""

    id: UserId
    name: Patch[str] = UNSET
    email: Patch[str] = UNSET
    password: Patch[str] = UNSET
    phone_number: Patch[str] = UNSET
    address: Patch[str] = UNSET


@dataclass(frozen=True)
class DeleteUserRequest:
    id: UserId


@dataclass(frozen=True)
class UserResponse:
    """Outward view of a user. Never carries the password hash."""

    id: UUID
    name: str
    email: str
    phone_number: str
    address: str
    role: str

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id.value,
            name=user.name,
            email=user.email,
            phone_number=user.phone_number,
            address=user.address,
            role=str(user.role),
        )


@dataclass(frozen=True)
class UserPaginationResponse:
    data: list[UserResponse] = field(default_factory=list)
    page: int = 1
    per_page: int = 10
    max_page: int = 0
    count: int = 0
