"""Tests for translating SQLAlchemy failures into store errors."""

from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from storefront.domain.common.exceptions import StoreError
from storefront.infrastructure.common.store_errors import store_errors


class TestStoreErrors:
    def test_unique_violation_is_flagged(self) -> None:
        session = MagicMock()
        error = IntegrityError("INSERT", {}, Exception("UNIQUE constraint failed: users.email"))

        with pytest.raises(StoreError) as exc_info, store_errors(session, "create user"):
            raise error

        assert exc_info.value.unique_violation
        assert exc_info.value.cause is error
        assert exc_info.value.message == "Failed to create user"
        session.rollback.assert_called_once()

    def test_check_constraint_is_not_a_unique_violation(self) -> None:
        session = MagicMock()
        error = IntegrityError(
            "INSERT", {}, Exception("CHECK constraint failed: ck_products_price_positive")
        )

        with pytest.raises(StoreError) as exc_info, store_errors(session, "create product"):
            raise error

        assert not exc_info.value.unique_violation

    def test_connectivity_failure(self) -> None:
        session = MagicMock()

        with pytest.raises(StoreError) as exc_info, store_errors(session, "list users"):
            raise OperationalError("SELECT", {}, Exception("connection refused"))

        assert not exc_info.value.unique_violation
        session.rollback.assert_called_once()

    def test_other_exceptions_pass_through(self) -> None:
        session = MagicMock()

        with pytest.raises(KeyError), store_errors(session, "list users"):
            raise KeyError("boom")

        session.rollback.assert_not_called()
