"""Repository for Product domain entities."""

from datetime import UTC, datetime

from sqlalchemy import Select, select, update
from sqlalchemy.orm import Session

from storefront.application.common.pagination import PaginatedResult, PaginationRequest
from storefront.domain.catalog.entities.product import Product
from storefront.domain.common.value_objects.ids import ProductId
from storefront.infrastructure.catalog.mappers.product_mapper import ProductMapper
from storefront.infrastructure.common.queries import fetch_page, search_filter
from storefront.infrastructure.common.repository import SessionRepository
from storefront.infrastructure.common.store_errors import store_errors
from storefront.models import Product as ProductORM

_NEWEST_FIRST = (ProductORM.created_at.desc(), ProductORM.id.desc())


class ProductRepository(SessionRepository):
    """Repository for Product domain entities. Soft-deleted rows are invisible."""

    mapper = ProductMapper()

    def create(self, product: Product, tx: Session | None = None) -> Product:
        session = self._session(tx)
        with store_errors(session, "create product"):
            orm_model = self.mapper.to_orm(product)
            session.add(orm_model)
            self._commit(session, tx)
            session.refresh(orm_model)

        self.logger.debug("Created product %s", orm_model.id)
        return self.mapper.to_domain(orm_model)

    def find_by_id(self, product_id: ProductId, tx: Session | None = None) -> Product | None:
        session = self._session(tx)
        with store_errors(session, "find product"):
            orm_model = self._get_active(session, product_id)
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_merk(self, merk: str, tx: Session | None = None) -> Product | None:
        session = self._session(tx)
        stmt = select(ProductORM).where(ProductORM.merk == merk, ProductORM.deleted_at.is_(None))
        with store_errors(session, "find product by merk"):
            orm_model = session.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def list_all(self, search: str = "", tx: Session | None = None) -> list[Product]:
        """List active products, newest first, filtered by name, merk or material."""
        session = self._session(tx)
        stmt = self._active_matching(search).order_by(*_NEWEST_FIRST)
        with store_errors(session, "list products"):
            orm_models = session.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm_model) for orm_model in orm_models]

    def list_paginated(
        self, request: PaginationRequest, tx: Session | None = None
    ) -> PaginatedResult[Product]:
        request = request.normalized()
        session = self._session(tx)
        with store_errors(session, "list products"):
            orm_models, count = fetch_page(
                session, self._active_matching(request.search), request, _NEWEST_FIRST
            )
        return PaginatedResult(
            items=[self.mapper.to_domain(orm_model) for orm_model in orm_models],
            count=count,
            page=request.page,
            per_page=request.per_page,
        )

    def update(self, product: Product, tx: Session | None = None) -> Product | None:
        """Write every field of ``product`` onto its row, or return None if it is gone."""
        session = self._session(tx)
        with store_errors(session, "update product"):
            orm_model = self._get_active(session, product.id)
            if orm_model is None:
                return None
            self.mapper.to_orm(product, orm_model)
            self._commit(session, tx)
            session.refresh(orm_model)

        self.logger.debug("Updated product %s", product.id)
        return self.mapper.to_domain(orm_model)

    def soft_delete(self, product_id: ProductId, tx: Session | None = None) -> None:
        session = self._session(tx)
        stmt = (
            update(ProductORM)
            .where(ProductORM.id == product_id.value, ProductORM.deleted_at.is_(None))
            .values(deleted_at=datetime.now(UTC))
        )
        with store_errors(session, "delete product"):
            session.execute(stmt)
            self._commit(session, tx)

        self.logger.debug("Soft-deleted product %s", product_id)

    def _get_active(self, session: Session, product_id: ProductId) -> ProductORM | None:
        stmt = select(ProductORM).where(
            ProductORM.id == product_id.value, ProductORM.deleted_at.is_(None)
        )
        return session.execute(stmt).scalar_one_or_none()

    def _active_matching(self, search: str) -> Select[tuple[ProductORM]]:
        stmt = select(ProductORM).where(ProductORM.deleted_at.is_(None))
        if search:
            stmt = stmt.where(
                search_filter(search, ProductORM.name, ProductORM.merk, ProductORM.material)
            )
        return stmt
