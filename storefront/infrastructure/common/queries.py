"""Query helpers shared by the SQLAlchemy repositories."""

from collections.abc import Sequence
from typing import Any, TypeVar

from sqlalchemy import ColumnElement, Select, func, or_, select
from sqlalchemy.orm import InstrumentedAttribute, Session

from storefront.application.common.pagination import PaginationRequest

T = TypeVar("T")


def search_filter(search: str, *columns: InstrumentedAttribute[str]) -> ColumnElement[bool]:
    """
    Case-insensitive substring match over any of ``columns``.

    LIKE wildcards in ``search`` are matched literally.
    """
    return or_(*(column.icontains(search, autoescape=True) for column in columns))


def fetch_page(
    session: Session,
    stmt: Select[tuple[T]],
    request: PaginationRequest,
    order_by: Sequence[Any],
) -> tuple[list[T], int]:
    """
    Run ``stmt`` for one page.

    Returns:
        Tuple of (rows on the page, total number of matching rows)
    """
    count_stmt = select(func.count()).select_from(stmt.order_by(None).subquery())
    total = session.execute(count_stmt).scalar_one()

    page_stmt = stmt.order_by(*order_by).offset(request.offset).limit(request.limit)
    rows = list(session.execute(page_stmt).scalars().all())
    return rows, total
