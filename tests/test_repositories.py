"""Tests for the SQLAlchemy repositories against an in-memory database."""

from decimal import Decimal

import pytest
from sqlalchemy.orm import Session

from storefront import models
from storefront.application.common.pagination import PaginationRequest
from storefront.domain.catalog.entities.product import Product
from storefront.domain.common.exceptions import StoreError
from storefront.domain.common.value_objects.ids import ProductId, UserId
from storefront.domain.identity.entities.user import Role, User
from storefront.infrastructure.catalog.repositories import ProductRepository
from storefront.infrastructure.identity.repositories import UserRepository


def _user(email: str = "jane@example.com", name: str = "Jane Doe") -> User:
    return User.create(name=name, email=email, hashed_password="hashed", role=Role.USER)


def _product(merk: str = "Acme") -> Product:
    return Product.create(
        name="Office Chair",
        description="Ergonomic office chair",
        merk=merk,
        material="Steel",
        price=Decimal("150.00"),
    )


@pytest.fixture
def users(db_session: Session) -> UserRepository:
    return UserRepository(db_session)


@pytest.fixture
def products(db_session: Session) -> ProductRepository:
    return ProductRepository(db_session)


class TestUserRepository:
    def test_create_assigns_timestamps(self, users: UserRepository) -> None:
        created = users.create(_user())

        assert created.created_at is not None
        assert created.updated_at is not None
        assert created.deleted_at is None
        assert users.find_by_email("jane@example.com") == created

    def test_duplicate_active_email_is_a_unique_violation(self, users: UserRepository) -> None:
        users.create(_user())

        with pytest.raises(StoreError) as exc_info:
            users.create(_user(name="Jane Again"))

        assert exc_info.value.unique_violation

    def test_soft_deleted_rows_are_invisible(
        self, users: UserRepository, db_session: Session
    ) -> None:
        created = users.create(_user())

        users.soft_delete(created.id)

        assert users.find_by_id(created.id) is None
        assert users.find_by_email("jane@example.com") is None
        assert users.list_all() == []
        row = db_session.get(models.User, created.id.value)
        assert row is not None
        assert row.deleted_at is not None

    def test_email_is_reusable_after_soft_delete(self, users: UserRepository) -> None:
        first = users.create(_user())
        users.soft_delete(first.id)

        second = users.create(_user(name="Jane Again"))

        assert second.id != first.id

    def test_update_of_missing_row_returns_none(self, users: UserRepository) -> None:
        assert users.update(_user()) is None

    def test_update_of_deleted_row_returns_none(self, users: UserRepository) -> None:
        user = users.create(_user())
        users.soft_delete(user.id)
        user.rename("Jane Renamed")

        assert users.update(user) is None

    def test_find_unknown_id(self, users: UserRepository) -> None:
        assert users.find_by_id(UserId.generate()) is None

    def test_work_in_caller_transaction_is_not_committed(
        self, users: UserRepository, db_session: Session
    ) -> None:
        users.create(_user(), tx=db_session)

        db_session.rollback()

        assert users.find_by_email("jane@example.com") is None


class TestProductPagination:
    @pytest.fixture(autouse=True)
    def _seed(self, products: ProductRepository) -> None:
        for i in range(25):
            products.create(_product(merk=f"Merk {i:02d}"))

    def test_defaults_apply_to_out_of_range_values(self, products: ProductRepository) -> None:
        result = products.list_paginated(PaginationRequest(page=-3, per_page=0))

        assert (result.page, result.per_page, result.max_page, result.count) == (1, 10, 3, 25)
        assert len(result.items) == 10

    def test_last_page_holds_the_remainder(self, products: ProductRepository) -> None:
        result = products.list_paginated(PaginationRequest(page=3, per_page=10))

        assert len(result.items) == 5

    def test_page_past_the_end_is_empty(self, products: ProductRepository) -> None:
        result = products.list_paginated(PaginationRequest(page=4, per_page=10))

        assert result.items == []
        assert result.count == 25

    def test_pages_concatenate_to_list_all(self, products: ProductRepository) -> None:
        paged: list[ProductId] = []
        for page in range(1, 5):
            result = products.list_paginated(PaginationRequest(page=page, per_page=7))
            paged.extend(product.id for product in result.items)

        assert paged == [product.id for product in products.list_all()]

    def test_search_narrows_count(self, products: ProductRepository) -> None:
        result = products.list_paginated(PaginationRequest(search="merk 1", per_page=5))

        assert result.count == 10
        assert result.max_page == 2

    def test_soft_deleted_products_are_not_counted(self, products: ProductRepository) -> None:
        victim = products.find_by_merk("Merk 00")
        assert victim is not None

        products.soft_delete(victim.id)

        assert products.list_paginated(PaginationRequest()).count == 24
        assert products.find_by_merk("Merk 00") is None


class TestProductRepository:
    def test_price_round_trips_as_decimal(self, products: ProductRepository) -> None:
        created = products.create(_product())

        found = products.find_by_id(created.id)

        assert found is not None
        assert found.price == Decimal("150.00")

    def test_duplicate_active_merk_is_a_unique_violation(
        self, products: ProductRepository
    ) -> None:
        products.create(_product())

        with pytest.raises(StoreError) as exc_info:
            products.create(_product())

        assert exc_info.value.unique_violation

    def test_update_writes_fields(self, products: ProductRepository) -> None:
        created = products.create(_product())
        created.reprice(Decimal("99.90"))
        created.rebrand("Acme Pro")

        updated = products.update(created)

        assert updated is not None
        assert updated.price == Decimal("99.90")
        assert updated.merk == "Acme Pro"

    def test_update_of_deleted_product_returns_none(self, products: ProductRepository) -> None:
        created = products.create(_product())
        products.soft_delete(created.id)
        created.reprice(Decimal("99.90"))

        assert products.update(created) is None
