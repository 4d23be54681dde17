"""Repository for User domain entities."""

from datetime import UTC, datetime

from sqlalchemy import Select, select, update
from sqlalchemy.orm import Session

from storefront.application.common.pagination import PaginatedResult, PaginationRequest
from storefront.domain.common.value_objects.ids import UserId
from storefront.domain.identity.entities.user import User
from storefront.infrastructure.common.queries import fetch_page, search_filter
from storefront.infrastructure.common.repository import SessionRepository
from storefront.infrastructure.common.store_errors import store_errors
from storefront.infrastructure.identity.mappers.user_mapper import UserMapper
from storefront.models import User as UserORM

_NEWEST_FIRST = (UserORM.created_at.desc(), UserORM.id.desc())


class UserRepository(SessionRepository):
    """Repository for User domain entities. Soft-deleted rows are invisible."""

    mapper = UserMapper()

    def create(self, user: User, tx: Session | None = None) -> User:
        """
        Insert a new user.

        Raises:
            StoreError: On any store failure, with ``unique_violation`` set when
                another active user already holds the email
        """
        session = self._session(tx)
        with store_errors(session, "create user"):
            orm_model = self.mapper.to_orm(user)
            session.add(orm_model)
            self._commit(session, tx)
            session.refresh(orm_model)

        self.logger.debug("Created user %s", orm_model.id)
        return self.mapper.to_domain(orm_model)

    def find_by_id(self, user_id: UserId, tx: Session | None = None) -> User | None:
        session = self._session(tx)
        with store_errors(session, "find user"):
            orm_model = self._get_active(session, user_id)
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_email(self, email: str, tx: Session | None = None) -> User | None:
        session = self._session(tx)
        stmt = select(UserORM).where(UserORM.email == email, UserORM.deleted_at.is_(None))
        with store_errors(session, "find user by email"):
            orm_model = session.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def list_all(self, search: str = "", tx: Session | None = None) -> list[User]:
        """List active users, newest first, optionally filtered by name or email."""
        session = self._session(tx)
        stmt = self._active_matching(search).order_by(*_NEWEST_FIRST)
        with store_errors(session, "list users"):
            orm_models = session.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm_model) for orm_model in orm_models]

    def list_paginated(
        self, request: PaginationRequest, tx: Session | None = None
    ) -> PaginatedResult[User]:
        """
        List one page of active users, newest first.

        Out-of-range ``page`` and ``per_page`` values fall back to the defaults.
        """
        request = request.normalized()
        session = self._session(tx)
        with store_errors(session, "list users"):
            orm_models, count = fetch_page(
                session, self._active_matching(request.search), request, _NEWEST_FIRST
            )
        return PaginatedResult(
            items=[self.mapper.to_domain(orm_model) for orm_model in orm_models],
            count=count,
            page=request.page,
            per_page=request.per_page,
        )

    def update(self, user: User, tx: Session | None = None) -> User | None:
        """
        Write every field of ``user`` onto its row.

        Returns None when the user no longer exists or was soft-deleted.

        Raises:
            StoreError: On any store failure
        """
        session = self._session(tx)
        with store_errors(session, "update user"):
            orm_model = self._get_active(session, user.id)
            if orm_model is None:
                return None
            self.mapper.to_orm(user, orm_model)
            self._commit(session, tx)
            session.refresh(orm_model)

        self.logger.debug("Updated user %s", user.id)
        return self.mapper.to_domain(orm_model)

    def soft_delete(self, user_id: UserId, tx: Session | None = None) -> None:
        session = self._session(tx)
        stmt = (
            update(UserORM)
            .where(UserORM.id == user_id.value, UserORM.deleted_at.is_(None))
            .values(deleted_at=datetime.now(UTC))
        )
        with store_errors(session, "delete user"):
            session.execute(stmt)
            self._commit(session, tx)

        self.logger.debug("Soft-deleted user %s", user_id)

    def _get_active(self, session: Session, user_id: UserId) -> UserORM | None:
        stmt = select(UserORM).where(UserORM.id == user_id.value, UserORM.deleted_at.is_(None))
        return session.execute(stmt).scalar_one_or_none()

    def _active_matching(self, search: str) -> Select[tuple[UserORM]]:
        stmt = select(UserORM).where(UserORM.deleted_at.is_(None))
        if search:
            stmt = stmt.where(search_filter(search, UserORM.name, UserORM.email))
        return stmt
