"""User entity for identity management."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

from email_validator import EmailNotValidError, validate_email

from storefront.domain.common.entity import Entity
from storefront.domain.common.value_objects.ids import UserId


class Role(StrEnum):
    """Roles a user account can hold."""

    ADMIN = "admin"
    USER = "user"


def is_valid_email(email: str) -> bool:
    """Check the syntax of ``email``. No DNS lookups are made."""
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


@dataclass(eq=False)
class User(Entity[UserId]):
    """
    User entity representing an account in the system.

    Business Rules:
    - Email is unique among users that have not been deleted
      (enforced by the store, pre-checked by the service)
    - The role is fixed by the entry point that created the account
    - Password hashing is an infrastructure concern
    - Deletion is soft: ``deleted_at`` records when the account was removed
    """

    id: UserId
    name: str
    email: str
    hashed_password: str
    phone_number: str = ""
    address: str = ""
    role: Role = Role.USER
    created_at: datetime | None = None
    updated_at: datetime | None = None
    deleted_at: datetime | None = None

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    def rename(self, new_name: str) -> None:
        self.name = new_name

    def change_email(self, new_email: str) -> None:
        self.email = new_email

    def change_password(self, new_hashed_password: str) -> None:
        self.hashed_password = new_hashed_password

    def change_phone_number(self, phone_number: str) -> None:
        self.phone_number = phone_number

    def change_address(self, address: str) -> None:
        self.address = address

    @classmethod
    def create(
        cls,
        name: str,
        email: str,
        hashed_password: str,
        role: Role,
        phone_number: str = "",
        address: str = "",
    ) -> "User":
        """
        Create a new user with a freshly generated id.

        Args:
            name: Display name
            email: Email address
            hashed_password: Already hashed password
            role: Role assigned by the calling entry point
            phone_number: Optional phone number
            address: Optional postal address

        Returns:
            New User instance
        """
        return cls(
            id=UserId.generate(),
            name=name,
            email=email,
            hashed_password=hashed_password,
            phone_number=phone_number,
            address=address,
            role=role,
        )
