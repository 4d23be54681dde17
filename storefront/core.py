import logging

import structlog
from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from storefront.application.catalog.services.product_service import ProductService
from storefront.application.identity.services.user_service import UserService
from storefront.infrastructure.catalog.repositories import ProductRepository
from storefront.infrastructure.identity.repositories import UserRepository
from storefront.infrastructure.identity.services.password_service_adapter import (
    PasswordServiceAdapter,
)
from storefront.infrastructure.identity.services.token_service_adapter import (
    TokenServiceAdapter,
)


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    # Loggers
    repository_logger = providers.Singleton(logging.getLogger, "storefront.repositories")
    service_logger = providers.Singleton(structlog.get_logger, "storefront.services")

    # Repositories
    user_repository = providers.Factory(UserRepository, db=db, logger=repository_logger)
    product_repository = providers.Factory(ProductRepository, db=db, logger=repository_logger)

    # Identity collaborators
    password_service = providers.Singleton(PasswordServiceAdapter)
    token_service = providers.Singleton(TokenServiceAdapter)

    # Services
    user_service = providers.Factory(
        UserService,
        user_repository=user_repository,
        password_service=password_service,
        token_service=token_service,
        logger=service_logger,
    )

    product_service = providers.Factory(
        ProductService,
        product_repository=product_repository,
        logger=service_logger,
    )


# Initialize container
container = Container()
