"""Product DTOs for catalog and admin views"""

from dataclasses import dataclass
from typing import List, Optional
from uuid import UUID

from .base import CamelModel


@dataclass
class UploadedImage:
    """An uploaded file, already read from the multipart request"""
    filename: str
    content_type: str
    content: bytes


class ProductCreateDto(CamelModel):
    """Raw add-product form fields. Required fields are checked by the use case."""
    model_name: Optional[str] = None
    category: Optional[str] = None
    description: Optional[str] = None
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    manufacturer_name: Optional[str] = None
    manufacturer_phone: Optional[str] = None
    factory_name: Optional[str] = None


class PriceRangeDto(CamelModel):
    min: float
    max: float


class ProductImageDto(CamelModel):
    filename: str
    path: str
    mimetype: str


class CatalogProductDto(CamelModel):
    """Catalog projection shown to users"""
    id: UUID
    model_name: str
    category: str
    description: Optional[str] = None
    price_range: PriceRangeDto
    images: List[ProductImageDto]
    factory_name: str

    @classmethod
    def from_entity(cls, product) -> 'CatalogProductDto':
        return cls(
            id=product.id.value,
            model_name=product.model_name,
            category=product.category.value,
            description=product.description,
            price_range=PriceRangeDto(min=product.price_range.min, max=product.price_range.max),
            images=[ProductImageDto(**image.to_dict()) for image in product.images],
            factory_name=product.factory_name
        )


class AdminProductDto(CamelModel):
    """Admin dashboard projection"""
    id: UUID
    model_name: str
    category: str
    price_range: PriceRangeDto
    images: List[ProductImageDto]
    manufacturer_name: str
    manufacturer_phone: str
    factory_name: str

    @classmethod
    def from_entity(cls, product) -> 'AdminProductDto':
        return cls(
            id=product.id.value,
            model_name=product.model_name,
            category=product.category.value,
            price_range=PriceRangeDto(min=product.price_range.min, max=product.price_range.max),
            images=[ProductImageDto(**image.to_dict()) for image in product.images],
            manufacturer_name=product.manufacturer_name,
            manufacturer_phone=product.manufacturer_phone,
            factory_name=product.factory_name
        )


class ProductCreatedResponse(CamelModel):
    message: str
    product: AdminProductDto
