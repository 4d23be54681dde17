"""Translation of SQLAlchemy failures into store errors."""

from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from storefront.domain.common.exceptions import StoreError

# SQLSTATE for unique_violation on PostgreSQL
_PG_UNIQUE_VIOLATION = "23505"


def is_unique_violation(error: IntegrityError) -> bool:
    """Check whether an integrity error came from a unique index."""
    orig = error.orig
    if getattr(orig, "pgcode", None) == _PG_UNIQUE_VIOLATION:
        return True
    message = str(orig).lower()
    return "unique constraint" in message or "duplicate key" in message


@contextmanager
def store_errors(session: Session, operation: str) -> Iterator[None]:
    """
    Roll back and re-raise any SQLAlchemy failure as a StoreError.

    Usage:
        with store_errors(self.db, "create user"):
            self.db.add(orm_model)
            self.db.commit()
    """
    try:
        yield
    except IntegrityError as e:
        session.rollback()
        raise StoreError(operation, e, unique_violation=is_unique_violation(e)) from e
    except SQLAlchemyError as e:
        session.rollback()
        raise StoreError(operation, e) from e
