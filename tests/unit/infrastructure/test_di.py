"""Tests for building services per request from the container."""

from concurrent.futures import ThreadPoolExecutor
from unittest.mock import MagicMock

from sqlalchemy.orm import Session

from storefront.core import container
from storefront.infrastructure.common.di import inject_service


class TestInjectService:
    def test_service_is_bound_to_the_given_session(self) -> None:
        session = MagicMock(spec=Session)

        service = inject_service(container.product_service)(session)

        assert service.product_repository.db is session

    def test_override_is_released_after_building(self) -> None:
        inject_service(container.product_service)(MagicMock(spec=Session))

        assert not container.db.overridden

    def test_concurrent_requests_keep_their_own_sessions(self) -> None:
        dependency = inject_service(container.product_service)
        sessions = [MagicMock(spec=Session) for _ in range(8)]

        def build_many(session: Session) -> bool:
            return all(
                dependency(session).product_repository.db is session for _ in range(200)
            )

        with ThreadPoolExecutor(max_workers=len(sessions)) as pool:
            results = list(pool.map(build_many, sessions))

        assert all(results)
        assert not container.db.overridden
