"""GraphQL schema for the catalog and user queries."""

from decimal import Decimal

import strawberry
from graphql import GraphQLError
from strawberry.fastapi import GraphQLRouter
from strawberry.types import ExecutionContext, Info

from storefront.application.catalog.dtos import CreateProductRequest
from storefront.application.common.pagination import (
    DEFAULT_PAGE,
    DEFAULT_PER_PAGE,
    PaginationRequest,
)
from storefront.domain.common.exceptions import DomainError
from storefront.domain.common.value_objects.ids import ProductId
from storefront.infrastructure.graphql_api.context import GraphQLContext, domain_error, get_context
from storefront.infrastructure.graphql_api.types import (
    CreateProductInput,
    Product,
    ProductPage,
    User,
)

GraphQLInfo = Info[GraphQLContext, None]


@strawberry.type
class Query:
    @strawberry.field(description="Active products, newest first.")
    def products(self, info: GraphQLInfo, search: str | None = None) -> list[Product]:
        try:
            products = info.context.product_service.list_products(search or "")
        except DomainError as e:
            raise domain_error(e) from None
        return [Product.from_response(product) for product in products]

    @strawberry.field
    def product(self, info: GraphQLInfo, id: strawberry.ID) -> Product:  # noqa: A002
        try:
            product = info.context.product_service.get_product_by_id(ProductId.parse(id))
        except DomainError as e:
            raise domain_error(e) from None
        return Product.from_response(product)

    @strawberry.field
    def products_with_pagination(
        self,
        info: GraphQLInfo,
        page: int = DEFAULT_PAGE,
        per_page: int = DEFAULT_PER_PAGE,
        search: str | None = None,
    ) -> ProductPage:
        try:
            result = info.context.product_service.list_products_paginated(
                PaginationRequest(search=search or "", page=page, per_page=per_page)
            )
        except DomainError as e:
            raise domain_error(e) from None
        return ProductPage.from_response(result)

    @strawberry.field(description="Active users, newest first. Admin only.")
    def users(self, info: GraphQLInfo, search: str | None = None) -> list[User]:
        info.context.require_admin()
        try:
            users = info.context.user_service.list_users(search or "")
        except DomainError as e:
            raise domain_error(e) from None
        return [User.from_response(user) for user in users]


@strawberry.type
class Mutation:
    @strawberry.mutation
    def create_product(self, info: GraphQLInfo, input: CreateProductInput) -> Product:  # noqa: A002
        info.context.current_user()
        try:
            product = info.context.product_service.create_product(
                CreateProductRequest(
                    name=input.name,
                    description=input.description,
                    merk=input.merk,
                    material=input.material,
                    price=Decimal(str(input.price)),
                )
            )
        except DomainError as e:
            raise domain_error(e) from None
        return Product.from_response(product)


class Schema(strawberry.Schema):
    """Schema that leaves expected errors to the service log."""

    def process_errors(
        self,
        errors: list[GraphQLError],
        execution_context: ExecutionContext | None = None,
    ) -> None:
        # Errors raised on purpose by resolvers were logged by the services
        unexpected = [e for e in errors if not isinstance(e.original_error, GraphQLError)]
        if unexpected:
            super().process_errors(unexpected, execution_context)


schema = Schema(query=Query, mutation=Mutation)


def create_graphql_router() -> GraphQLRouter[GraphQLContext, None]:
    return GraphQLRouter(schema, context_getter=get_context)
