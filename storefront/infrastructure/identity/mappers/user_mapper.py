"""Mapper for User ORM ↔ Domain conversion."""

from storefront.domain.common.value_objects.ids import UserId
from storefront.domain.identity.entities.user import Role, User
from storefront.models import User as UserORM


class UserMapper:
    """Mapper for User ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: UserORM) -> User:
        """Convert ORM model to domain entity."""
        return User(
            id=UserId(orm_model.id),
            name=orm_model.name,
            email=orm_model.email,
            hashed_password=orm_model.password,
            phone_number=orm_model.phone_number,
            address=orm_model.address,
            role=Role(orm_model.role),
            created_at=orm_model.created_at,
            updated_at=orm_model.updated_at,
            deleted_at=orm_model.deleted_at,
        )

    def to_orm(self, domain_entity: User, orm_model: UserORM | None = None) -> UserORM:
        """Convert domain entity to ORM model, updating ``orm_model`` in place when given."""
        if orm_model:
            orm_model.name = domain_entity.name
            orm_model.email = domain_entity.email
            orm_model.password = domain_entity.hashed_password
            orm_model.phone_number = domain_entity.phone_number
            orm_model.address = domain_entity.address
            orm_model.role = str(domain_entity.role)
            return orm_model

        return UserORM(
            id=domain_entity.id.value,
            name=domain_entity.name,
            email=domain_entity.email,
            password=domain_entity.hashed_password,
            phone_number=domain_entity.phone_number,
            address=domain_entity.address,
            role=str(domain_entity.role),
        )
