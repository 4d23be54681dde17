"""In-memory stand-ins for the repositories and the password hasher."""

from dataclasses import replace
from datetime import UTC, datetime, timedelta
from itertools import count
from typing import Any

from storefront.application.common.pagination import PaginatedResult, PaginationRequest
from storefront.domain.catalog.entities.product import Product
from storefront.domain.common.exceptions import StoreError
from storefront.domain.common.value_objects.ids import ProductId, UserId
from storefront.domain.identity.entities.user import User

_EPOCH = datetime(2024, 1, 1, tzinfo=UTC)


class _InMemoryRepository:
    """Keeps copies of entities, like a real store would."""

    unique_field = ""
    search_fields: tuple[str, ...] = ()
    entity_name = ""

    def __init__(self) -> None:
        self.rows: dict[Any, Any] = {}
        self._clock = count()
        self.fail_with: StoreError | None = None

    def _tick(self) -> datetime:
        return _EPOCH + timedelta(seconds=next(self._clock))

    def _check_failure(self) -> None:
        if self.fail_with is not None:
            raise self.fail_with

    def _active(self) -> list[Any]:
        return [row for row in self.rows.values() if row.deleted_at is None]

    def _find_unique(self, value: str) -> Any:
        for row in self._active():
            if getattr(row, self.unique_field) == value:
                return replace(row)
        return None

    def _matching(self, search: str) -> list[Any]:
        rows = self._active()
        if search:
            needle = search.lower()
            rows = [
                row
                for row in rows
                if any(needle in getattr(row, field).lower() for field in self.search_fields)
            ]
        return sorted(rows, key=lambda row: row.created_at, reverse=True)

    def create(self, entity: Any, tx: Any = None) -> Any:
        self._check_failure()
        value = getattr(entity, self.unique_field)
        if self._find_unique(value) is not None:
            raise StoreError(f"create {self.entity_name}", unique_violation=True)
        now = self._tick()
        stored = replace(entity, created_at=now, updated_at=now)
        self.rows[entity.id] = stored
        return replace(stored)

    def find_by_id(self, entity_id: Any, tx: Any = None) -> Any:
        self._check_failure()
        row = self.rows.get(entity_id)
        if row is None or row.deleted_at is not None:
            return None
        return replace(row)

    def list_all(self, search: str = "", tx: Any = None) -> list[Any]:
        self._check_failure()
        return [replace(row) for row in self._matching(search)]

    def list_paginated(self, request: PaginationRequest, tx: Any = None) -> PaginatedResult[Any]:
        self._check_failure()
        request = request.normalized()
        rows = self._matching(request.search)
        page = rows[request.offset : request.offset + request.limit]
        return PaginatedResult(
            items=[replace(row) for row in page],
            count=len(rows),
            page=request.page,
            per_page=request.per_page,
        )

    def update(self, entity: Any, tx: Any = None) -> Any:
        self._check_failure()
        current = self.rows.get(entity.id)
        if current is None or current.deleted_at is not None:
            return None
        stored = replace(entity, updated_at=self._tick())
        self.rows[entity.id] = stored
        return replace(stored)

    def soft_delete(self, entity_id: Any, tx: Any = None) -> None:
        self._check_failure()
        self.rows[entity_id] = replace(self.rows[entity_id], deleted_at=self._tick())


class InMemoryUserRepository(_InMemoryRepository):
    unique_field = "email"
    search_fields = ("name", "email")
    entity_name = "user"

    def find_by_email(self, email: str, tx: Any = None) -> User | None:
        self._check_failure()
        return self._find_unique(email)

    def get(self, user_id: UserId) -> User:
        return self.rows[user_id]


class InMemoryProductRepository(_InMemoryRepository):
    unique_field = "merk"
    search_fields = ("name", "merk", "material")
    entity_name = "product"

    def find_by_merk(self, merk: str, tx: Any = None) -> Product | None:
        self._check_failure()
        return self._find_unique(merk)

    def get(self, product_id: ProductId) -> Product:
        return self.rows[product_id]


class FakePasswordService:
    """Reversible stand-in for the real hasher, so tests stay fast."""

    def hash_password(self, plain_password: str) -> str:
        return f"hashed::{plain_password}"

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        return hashed_password == f"hashed::{plain_password}"

    def get_dummy_hash(self) -> str:
        return "hashed::dummy"
