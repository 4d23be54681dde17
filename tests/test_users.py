"""Tests for the user management endpoints."""

import uuid
from collections.abc import Callable
from datetime import UTC, datetime

from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from storefront import models


def _new_user_payload(**overrides: str) -> dict[str, str]:
    payload = {
        "name": "New Admin",
        "email": "new.admin@example.com",
        "password": "password123",
        "phone_number": "081234567890",
        "address": "Jl. Merdeka 1",
    }
    payload.update(overrides)
    return payload


class TestUserAccessControl:
    """Test suite for bearer token and role checks."""

    def test_missing_token_is_unauthorized(self, client: TestClient) -> None:
        response = client.get("/api/users")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        body = response.json()
        assert body["message"] == "Unauthorized"
        assert body["data"] is None

    def test_garbage_token_is_unauthorized(self, client: TestClient) -> None:
        response = client.get("/api/users", headers={"Authorization": "Bearer not-a-token"})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_token_of_deleted_user_is_unauthorized(
        self,
        client: TestClient,
        db_session: Session,
        test_user: models.User,
        user_headers: dict[str, str],
    ) -> None:
        test_user.deleted_at = datetime.now(UTC)
        db_session.commit()

        response = client.get(f"/api/users/{test_user.id}", headers=user_headers)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_non_admin_cannot_list_users(
        self, client: TestClient, user_headers: dict[str, str]
    ) -> None:
        response = client.get("/api/users", headers=user_headers)

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.json()["message"] == "Forbidden"

    def test_non_admin_cannot_create_users(
        self, client: TestClient, user_headers: dict[str, str]
    ) -> None:
        response = client.post("/api/users", json=_new_user_payload(), headers=user_headers)

        assert response.status_code == status.HTTP_403_FORBIDDEN


class TestCreateUser:
    """Test suite for POST /api/users."""

    def test_admin_creates_admin_user(
        self, client: TestClient, admin_headers: dict[str, str]
    ) -> None:
        response = client.post("/api/users", json=_new_user_payload(), headers=admin_headers)

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()["data"]
        assert data["role"] == "admin"
        assert data["phone_number"] == "081234567890"
        assert data["address"] == "Jl. Merdeka 1"
        uuid.UUID(data["id"])

    def test_duplicate_email(
        self, client: TestClient, admin_headers: dict[str, str], admin_user: models.User
    ) -> None:
        response = client.post(
            "/api/users", json=_new_user_payload(email=admin_user.email), headers=admin_headers
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["message"] == "Failed to create user"


class TestListUsers:
    """Test suite for GET /api/users."""

    def test_pagination_defaults_and_envelope(
        self,
        client: TestClient,
        admin_headers: dict[str, str],
        make_user: Callable[..., models.User],
    ) -> None:
        for i in range(12):
            make_user(email=f"member{i}@example.com", name=f"Member {i:02d}")

        response = client.get("/api/users?page=0&per_page=0", headers=admin_headers)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()["data"]
        assert len(data["items"]) == 10
        # 12 members plus the admin making the request
        assert data["pagination"] == {"page": 1, "per_page": 10, "max_page": 2, "count": 13}

    def test_search_matches_name_or_email(
        self,
        client: TestClient,
        admin_headers: dict[str, str],
        make_user: Callable[..., models.User],
    ) -> None:
        make_user(email="budi@example.com", name="Budi Santoso")
        make_user(email="siti@example.com", name="Siti Rahma")

        by_name = client.get("/api/users?search=santoso", headers=admin_headers).json()
        by_email = client.get("/api/users?search=SITI@", headers=admin_headers).json()

        assert [u["email"] for u in by_name["data"]["items"]] == ["budi@example.com"]
        assert [u["email"] for u in by_email["data"]["items"]] == ["siti@example.com"]

    def test_deleted_users_are_not_listed(
        self,
        client: TestClient,
        db_session: Session,
        admin_headers: dict[str, str],
        make_user: Callable[..., models.User],
    ) -> None:
        gone = make_user(email="gone@example.com", name="Gone User")
        gone.deleted_at = datetime.now(UTC)
        db_session.commit()

        response = client.get("/api/users?search=gone", headers=admin_headers)

        assert response.json()["data"]["pagination"]["count"] == 0


class TestGetUser:
    """Test suite for GET /api/users/{id}."""

    def test_get_user(
        self, client: TestClient, test_user: models.User, user_headers: dict[str, str]
    ) -> None:
        response = client.get(f"/api/users/{test_user.id}", headers=user_headers)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()["data"]
        assert data["id"] == str(test_user.id)
        assert data["email"] == test_user.email
        assert "password" not in data

    def test_invalid_id_format(self, client: TestClient, user_headers: dict[str, str]) -> None:
        response = client.get("/api/users/123", headers=user_headers)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error"] == "Invalid id format, expected a UUID"

    def test_unknown_id(self, client: TestClient, user_headers: dict[str, str]) -> None:
        response = client.get(f"/api/users/{uuid.uuid4()}", headers=user_headers)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["message"] == "Failed to get user"


class TestUpdateUser:
    """Test suite for PATCH /api/users/{id}."""

    def test_partial_update(
        self, client: TestClient, test_user: models.User, user_headers: dict[str, str]
    ) -> None:
        response = client.patch(
            f"/api/users/{test_user.id}",
            json={"address": "Jl. Sudirman 10", "name": None},
            headers=user_headers,
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()["data"]
        assert data["address"] == "Jl. Sudirman 10"
        assert data["name"] == "Regular User"

    def test_same_password_is_rejected(
        self, client: TestClient, test_user: models.User, user_headers: dict[str, str]
    ) -> None:
        response = client.patch(
            f"/api/users/{test_user.id}",
            json={"password": "password123"},
            headers=user_headers,
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error"] == "New password must differ from the current password"

    def test_changed_password_allows_login(
        self, client: TestClient, test_user: models.User, user_headers: dict[str, str]
    ) -> None:
        client.patch(
            f"/api/users/{test_user.id}",
            json={"password": "brand-new-secret"},
            headers=user_headers,
        )

        response = client.post(
            "/api/login", json={"email": "user@example.com", "password": "brand-new-secret"}
        )

        assert response.status_code == status.HTTP_200_OK

    def test_short_new_password_is_accepted(
        self, client: TestClient, test_user: models.User, user_headers: dict[str, str]
    ) -> None:
        response = client.patch(
            f"/api/users/{test_user.id}",
            json={"password": "abc123"},
            headers=user_headers,
        )

        assert response.status_code == status.HTTP_200_OK
        login = client.post("/api/login", json={"email": "user@example.com", "password": "abc123"})
        assert login.status_code == status.HTTP_200_OK

    def test_email_taken_by_other_user(
        self,
        client: TestClient,
        test_user: models.User,
        admin_user: models.User,
        user_headers: dict[str, str],
    ) -> None:
        response = client.patch(
            f"/api/users/{test_user.id}",
            json={"email": admin_user.email},
            headers=user_headers,
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error"] == f"Email {admin_user.email} is already registered"


class TestDeleteUser:
    """Test suite for DELETE /api/users/{id}."""

    def test_delete_is_soft(
        self,
        client: TestClient,
        db_session: Session,
        make_user: Callable[..., models.User],
        admin_headers: dict[str, str],
    ) -> None:
        victim = make_user(email="victim@example.com", name="Victim User")

        response = client.delete(f"/api/users/{victim.id}", headers=admin_headers)

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["data"]["email"] == "victim@example.com"

        db_session.expire_all()
        row = db_session.get(models.User, victim.id)
        assert row is not None
        assert row.deleted_at is not None

        follow_up = client.get(f"/api/users/{victim.id}", headers=admin_headers)
        assert follow_up.status_code == status.HTTP_400_BAD_REQUEST

    def test_email_can_be_registered_again_after_delete(
        self,
        client: TestClient,
        make_user: Callable[..., models.User],
        admin_headers: dict[str, str],
    ) -> None:
        victim = make_user(email="again@example.com", name="Victim User")
        client.delete(f"/api/users/{victim.id}", headers=admin_headers)

        response = client.post(
            "/api/register",
            json={"name": "Second Life", "email": "again@example.com", "password": "password123"},
        )

        assert response.status_code == status.HTTP_201_CREATED
