"""Product repository implementation using SQLAlchemy ORM"""

from typing import Optional, List
from sqlalchemy.orm import Session
from sqlalchemy import or_, desc

from ...domain.entities.product import Product
from ...domain.repositories.product_repository import IProductRepository
from ...domain.value_objects.entity_ids import ProductId
from ...domain.value_objects.price_range import PriceRange
from ...domain.value_objects.product_image import ProductImage
from ...domain.enums import ProductCategory
from ..orm.product_model import ProductModel


class ProductRepositoryImpl(IProductRepository):
    """Repository implementation for Product aggregate"""

    def __init__(self, session: Session):
        self.session = session

    async def get_by_id(self, product_id: ProductId) -> Optional[Product]:
        model = self.session.query(ProductModel).filter(ProductModel.id == product_id.value).first()
        return self._map_to_entity(model) if model else None

    async def get_all(self) -> List[Product]:
        models = self.session.query(ProductModel).order_by(desc(ProductModel.created_at)).all()
        return [self._map_to_entity(model) for model in models]

    async def get_by_category_or_model(self, term: str) -> List[Product]:
        models = self.session.query(ProductModel).filter(
            or_(ProductModel.category == term, ProductModel.model_name == term)
        ).order_by(desc(ProductModel.created_at)).all()
        return [self._map_to_entity(model) for model in models]

    async def get_by_manufacturer_phone(self, phone: str) -> List[Product]:
        models = self.session.query(ProductModel).filter(
            ProductModel.manufacturer_phone == phone
        ).order_by(desc(ProductModel.created_at)).all()
        return [self._map_to_entity(model) for model in models]

    async def add(self, product: Product) -> Product:
        self.session.add(self._create_model_from_entity(product))
        self.session.flush()
        return product

    async def delete(self, product_id: ProductId) -> None:
        model = self.session.query(ProductModel).filter(ProductModel.id == product_id.value).first()
        if model:
            self.session.delete(model)
            self.session.flush()

    def _create_model_from_entity(self, product: Product) -> ProductModel:
        """Create ORM model from domain entity"""
        return ProductModel(
            id=product.id.value,
            model_name=product.model_name,
            category=product.category.value,
            description=product.description,
            price_min=product.price_range.min,
            price_max=product.price_range.max,
            images=[image.to_dict() for image in product.images],
            manufacturer_name=product.manufacturer_name,
            manufacturer_phone=product.manufacturer_phone,
            factory_name=product.factory_name,
            is_available=product.is_available,
            created_at=product.created_at,
            updated_at=product.updated_at
        )

    def _map_to_entity(self, model: ProductModel) -> Product:
        """Map ORM model to domain entity"""
        return Product(
            id=ProductId(model.id),
            model_name=model.model_name,
            category=ProductCategory(model.category),
            price_range=PriceRange(model.price_min, model.price_max),
            images=[ProductImage.from_dict(image) for image in (model.images or [])],
            manufacturer_name=model.manufacturer_name,
            manufacturer_phone=model.manufacturer_phone,
            factory_name=model.factory_name,
            description=model.description,
            is_available=model.is_available,
            created_at=model.created_at,
            updated_at=model.updated_at
        )
