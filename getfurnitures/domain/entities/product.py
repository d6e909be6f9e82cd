"""Product entity"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, List

from ..value_objects.entity_ids import ProductId
from ..value_objects.price_range import PriceRange
from ..value_objects.product_image import ProductImage
from ..enums import ProductCategory
from ..exceptions import ValidationError


MAX_IMAGES = 5


@dataclass
class Product:
    id: ProductId
    model_name: str
    category: ProductCategory
    price_range: PriceRange
    images: List[ProductImage]
    manufacturer_name: str
    manufacturer_phone: str
    factory_name: str
    description: Optional[str] = None
    is_available: bool = True

    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    @classmethod
    def create(
        cls,
        model_name: str,
        category: ProductCategory,
        price_range: PriceRange,
        images: List[ProductImage],
        manufacturer_name: str,
        manufacturer_phone: str,
        factory_name: str,
        description: Optional[str] = None,
        max_images: int = MAX_IMAGES
    ) -> 'Product':
        """Factory method: a catalog entry needs between one and max_images images"""
        if not images:
            raise ValidationError("At least one image is required")
        if len(images) > max_images:
            raise ValidationError(f"A product can have at most {max_images} images")

        return cls(
            id=ProductId.generate(),
            model_name=model_name,
            category=category,
            price_range=price_range,
            images=list(images),
            manufacturer_name=manufacturer_name,
            manufacturer_phone=manufacturer_phone,
            factory_name=factory_name,
            description=description
        )

    @property
    def cover_image(self) -> Optional[ProductImage]:
        """The image captured on orders"""
        return self.images[0] if self.images else None

