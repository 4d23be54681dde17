"""Fixtures wiring services to in-memory collaborators."""

from unittest.mock import MagicMock

import pytest

from storefront.application.catalog.services.product_service import ProductService
from storefront.application.identity.protocols import TokenPair
from storefront.application.identity.services.user_service import UserService

from .fakes import FakePasswordService, InMemoryProductRepository, InMemoryUserRepository


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def product_repository() -> InMemoryProductRepository:
    return InMemoryProductRepository()


@pytest.fixture
def password_service() -> FakePasswordService:
    return FakePasswordService()


@pytest.fixture
def token_service() -> MagicMock:
    service = MagicMock()
    service.generate.return_value = TokenPair(
        access_token="access", refresh_token="refresh", expires_in=900
    )
    return service


@pytest.fixture
def logger() -> MagicMock:
    return MagicMock()


@pytest.fixture
def user_service(
    user_repository: InMemoryUserRepository,
    password_service: FakePasswordService,
    token_service: MagicMock,
    logger: MagicMock,
) -> UserService:
    return UserService(
        user_repository=user_repository,
        password_service=password_service,
        token_service=token_service,
        logger=logger,
    )


@pytest.fixture
def product_service(
    product_repository: InMemoryProductRepository, logger: MagicMock
) -> ProductService:
    return ProductService(product_repository=product_repository, logger=logger)
