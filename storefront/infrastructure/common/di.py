import threading
from collections.abc import Callable
from typing import TypeVar

from dependency_injector.providers import Provider

from storefront.core import container
from storefront.database import DatabaseSession

T = TypeVar("T")

# Overrides are shared by every thread; sync routes run on a thread pool
_override_lock = threading.Lock()


def inject_service(provider: Provider[T]) -> Callable[[DatabaseSession], T]:
    """
    Create a FastAPI dependency for a container provider.

    Binds container.db to the request-scoped database session while the
    provider builds the service. Only one service is built at a time so a
    concurrent request never sees another request's session.
    """

    def dependency(db: DatabaseSession) -> T:
        with _override_lock:
            try:
                container.db.override(db)
                return provider()
            finally:
                container.db.reset_override()

    return dependency
