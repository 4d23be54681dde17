"""Mapper for Product ORM ↔ Domain conversion."""

from storefront.domain.catalog.entities.product import Product
from storefront.domain.common.value_objects.ids import ProductId
from storefront.models import Product as ProductORM


class ProductMapper:
    """Mapper for Product ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: ProductORM) -> Product:
        return Product(
            id=ProductId(orm_model.id),
            name=orm_model.name,
            description=orm_model.description,
            merk=orm_model.merk,
            material=orm_model.material,
            price=orm_model.price,
            created_at=orm_model.created_at,
            updated_at=orm_model.updated_at,
            deleted_at=orm_model.deleted_at,
        )

    def to_orm(self, domain_entity: Product, orm_model: ProductORM | None = None) -> ProductORM:
        if orm_model:
            orm_model.name = domain_entity.name
            orm_model.description = domain_entity.description
            orm_model.merk = domain_entity.merk
            orm_model.material = domain_entity.material
            orm_model.price = domain_entity.price
            return orm_model

        return ProductORM(
            id=domain_entity.id.value,
            name=domain_entity.name,
            description=domain_entity.description,
            merk=domain_entity.merk,
            material=domain_entity.material,
            price=domain_entity.price,
        )
