"""Delete product use case"""

import logging

from ...domain.value_objects.entity_ids import ProductId
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...domain.exceptions import NotFoundError
from ...infrastructure.external_services.storage_service import StorageService
from ...application.dtos.base import MessageResponse

logger = logging.getLogger(__name__)


class DeleteProductUseCase:

    def __init__(self, unit_of_work: IUnitOfWork, storage_service: StorageService):
        self.unit_of_work = unit_of_work
        self.storage_service = storage_service

    async def execute(self, product_id: ProductId) -> MessageResponse:
        """Remove a product. Orders keep their snapshot of it."""
        async with self.unit_of_work:
            product = await self.unit_of_work.products.get_by_id(product_id)
            if not product:
                raise NotFoundError("Product not found")

            for image in product.images:
                await self.storage_service.delete_image(image)

            await self.unit_of_work.products.delete(product.id)
            await self.unit_of_work.commit()

        logger.info("Product %s deleted", product_id)
        return MessageResponse(message="Product deleted successfully")
