"""Request context shared by GraphQL resolvers."""

from typing import Annotated

from fastapi import Depends
from graphql import GraphQLError
from strawberry.fastapi import BaseContext

from storefront.application.catalog.services.product_service import ProductService
from storefront.application.identity.services.user_service import UserService
from storefront.core import container
from storefront.domain.common.exceptions import AuthError, DomainError
from storefront.domain.identity.entities.user import Role, User
from storefront.domain.identity.exceptions import ForbiddenError, InvalidTokenError
from storefront.infrastructure.common.di import inject_service
from storefront.infrastructure.identity.dependencies import oauth2_scheme

UNAUTHENTICATED = "UNAUTHENTICATED"


def domain_error(error: DomainError) -> GraphQLError:
    """Expose a service error with its stable code."""
    return GraphQLError(error.message, extensions={"code": error.code})


class GraphQLContext(BaseContext):
    def __init__(
        self,
        user_service: UserService,
        product_service: ProductService,
        token: str | None,
    ) -> None:
        super().__init__()
        self.user_service = user_service
        self.product_service = product_service
        self.token = token

    def current_user(self) -> User:
        """
        Resolve the bearer token of the request to a user.

        Raises:
            GraphQLError: With code UNAUTHENTICATED if the token is missing or invalid
        """
        if not self.token:
            raise GraphQLError("Missing bearer token", extensions={"code": UNAUTHENTICATED})

        claims = container.token_service().verify_access_token(self.token)
        if claims is None:
            error = InvalidTokenError()
            raise GraphQLError(error.message, extensions={"code": UNAUTHENTICATED})

        try:
            return self.user_service.get_authenticated_user(claims)
        except AuthError as e:
            raise GraphQLError(e.message, extensions={"code": UNAUTHENTICATED}) from None

    def require_admin(self) -> User:
        user = self.current_user()
        if not user.is_admin:
            raise domain_error(ForbiddenError(Role.ADMIN))
        return user


def get_context(
    token: Annotated[str | None, Depends(oauth2_scheme)],
    user_service: Annotated[UserService, Depends(inject_service(container.user_service))],
    product_service: Annotated[
        ProductService, Depends(inject_service(container.product_service))
    ],
) -> GraphQLContext:
    return GraphQLContext(user_service=user_service, product_service=product_service, token=token)
