from typing import TYPE_CHECKING, Protocol

from storefront.application.common.pagination import PaginatedResult, PaginationRequest
from storefront.domain.common.value_objects.ids import UserId
from storefront.domain.identity.entities.user import User

if TYPE_CHECKING:
    from sqlalchemy.orm import Session


class UserRepositoryProtocol(Protocol):
    def create(self, user: User, tx: "Session | None" = None) -> User: ...

    def find_by_id(self, user_id: UserId, tx: "Session | None" = None) -> User | None: ...

    def find_by_email(self, email: str, tx: "Session | None" = None) -> User | None: ...

    def list_all(self, search: str = "", tx: "Session | None" = None) -> list[User]: ...

    def list_paginated(
        self, request: PaginationRequest, tx: "Session | None" = None
    ) -> PaginatedResult[User]: ...

    def update(self, user: User, tx: "Session | None" = None) -> User | None: ...

    def soft_delete(self, user_id: UserId, tx: "Session | None" = None) -> None: ...
