"""Pytest configuration and fixtures."""

import os

# Settings are read at import time, so the environment must be ready first
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["SECRET_KEY"] = "test-secret-key-with-enough-length-for-hs256"
os.environ["REFRESH_TOKEN_SECRET_KEY"] = "test-refresh-secret-key-with-enough-length"
os.environ["ENVIRONMENT"] = "test"
os.environ["RATE_LIMIT_ENABLED"] = "false"

from collections.abc import Callable, Generator  # noqa: E402
from decimal import Decimal  # noqa: E402
from typing import Any  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from storefront import models  # noqa: E402
from storefront.database import Base, get_db  # noqa: E402
from storefront.infrastructure.identity.services.password_service import (  # noqa: E402
    hash_password,
)
from storefront.infrastructure.identity.services.token_service import (  # noqa: E402
    create_access_token,
)
from storefront.main import app  # noqa: E402

# One shared in-memory connection, visible from the TestClient worker threads
test_engine = create_engine(
    "sqlite:///:memory:",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

DEFAULT_PASSWORD = "password123"


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def client(db_session: Session) -> Generator[TestClient, Any, None]:
    """Create a test client with database session."""

    def override_get_db() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db_session: Session) -> Callable[..., models.User]:
    """Insert a user row directly. The password is stored hashed."""

    def _make_user(
        email: str = "jane@example.com",
        name: str = "Jane Doe",
        role: str = "user",
        password: str = DEFAULT_PASSWORD,
    ) -> models.User:
        user = models.User(
            name=name,
            email=email,
            password=hash_password(password),
            role=role,
        )
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user

    return _make_user


@pytest.fixture
def make_product(db_session: Session) -> Callable[..., models.Product]:
    def _make_product(
        merk: str = "Acme", name: str = "Office Chair", **fields: Any
    ) -> models.Product:
        product = models.Product(
            name=name,
            description=fields.pop("description", "Ergonomic office chair"),
            merk=merk,
            material=fields.pop("material", "Steel"),
            price=fields.pop("price", Decimal("150.00")),
            **fields,
        )
        db_session.add(product)
        db_session.commit()
        db_session.refresh(product)
        return product

    return _make_product


def _bearer(user: models.User) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(str(user.id), user.role)}"}


@pytest.fixture
def auth_headers_for() -> Callable[[models.User], dict[str, str]]:
    """Build bearer headers for any user row."""
    return _bearer


@pytest.fixture
def test_user(make_user: Callable[..., models.User]) -> models.User:
    return make_user(email="user@example.com", name="Regular User")


@pytest.fixture
def admin_user(make_user: Callable[..., models.User]) -> models.User:
    return make_user(email="admin@example.com", name="Admin User", role="admin")


@pytest.fixture
def user_headers(test_user: models.User) -> dict[str, str]:
    return _bearer(test_user)


@pytest.fixture
def admin_headers(admin_user: models.User) -> dict[str, str]:
    return _bearer(admin_user)
