"""Add product use case"""

import logging
import os
from typing import List

from ...core.config import settings
from ...domain.entities.product import Product
from ...domain.value_objects.price_range import PriceRange
from ...domain.enums import ProductCategory
from ...domain.exceptions import ValidationError
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...infrastructure.external_services.storage_service import StorageService
from ...application.dtos.product_dtos import (
    ProductCreateDto, UploadedImage, AdminProductDto, ProductCreatedResponse
)

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = (
    "model_name", "category", "min_price", "max_price",
    "manufacturer_name", "manufacturer_phone", "factory_name",
)


class AddProductUseCase:
    """Create a catalog entry from the admin upload form"""

    def __init__(self, unit_of_work: IUnitOfWork, storage_service: StorageService):
        self.unit_of_work = unit_of_work
        self.storage_service = storage_service

    def _validate_fields(self, request: ProductCreateDto) -> tuple:
        for name in REQUIRED_FIELDS:
            value = getattr(request, name)
            if value is None or (isinstance(value, str) and not value.strip()):
                raise ValidationError("All fields are required")

        try:
            category = ProductCategory(request.category.strip().lower())
        except ValueError:
            raise ValidationError(
                "Category must be one of: " + ", ".join(c.value for c in ProductCategory)
            )

        try:
            price_range = PriceRange(min=request.min_price, max=request.max_price)
        except ValueError as e:
            raise ValidationError(str(e))

        return category, price_range

    def _validate_images(self, images: List[UploadedImage]) -> None:
        if not images:
            raise ValidationError("At least one image is required")
        if len(images) > settings.MAX_PRODUCT_IMAGES:
            raise ValidationError(f"A product can have at most {settings.MAX_PRODUCT_IMAGES} images")

        for image in images:
            ext = os.path.splitext(image.filename or "")[1].lower()
            if image.content_type not in settings.ALLOWED_IMAGE_TYPES or ext not in settings.ALLOWED_IMAGE_EXTENSIONS:
                raise ValidationError(f"Only image files are allowed: {image.filename}")
            if len(image.content) > settings.MAX_FILE_SIZE:
                raise ValidationError(f"File too large: {image.filename}")

    async def execute(self, request: ProductCreateDto, images: List[UploadedImage]) -> ProductCreatedResponse:
        category, price_range = self._validate_fields(request)
        self._validate_images(images)

        stored = []
        try:
            for image in images:
                stored.append(
                    await self.storage_service.save_image(image.content, image.filename, image.content_type)
                )

            product = Product.create(
                model_name=request.model_name.strip(),
                category=category,
                price_range=price_range,
                images=stored,
                manufacturer_name=request.manufacturer_name.strip(),
                manufacturer_phone=request.manufacturer_phone.strip(),
                factory_name=request.factory_name.strip(),
                description=request.description,
                max_images=settings.MAX_PRODUCT_IMAGES
            )

            async with self.unit_of_work:
                await self.unit_of_work.products.add(product)
                await self.unit_of_work.commit()
        except Exception:
            # No orphaned files for a product that was never saved
            for image in stored:
                await self.storage_service.delete_image(image)
            raise

        logger.info("Product %s added with %d images", product.id, len(stored))

        return ProductCreatedResponse(
            message="Product added successfully",
            product=AdminProductDto.from_entity(product)
        )
