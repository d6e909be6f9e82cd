"""Place order use case"""

import logging

from ...domain.entities.order import Order
from ...domain.value_objects.entity_ids import UserId, ProductId
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...domain.exceptions import NotFoundError, ConflictError
from ...infrastructure.external_services.notification_dispatcher import NotificationDispatcher
from ...application.dtos.order_dtos import OrderHistoryDto, OrderPlacedResponse

logger = logging.getLogger(__name__)


class PlaceOrderUseCase:
    """Use case for placing an order on a catalog product"""

    def __init__(self, unit_of_work: IUnitOfWork, notifier: NotificationDispatcher):
        self.unit_of_work = unit_of_work
        self.notifier = notifier

    async def execute(self, user_id: UserId, product_id: ProductId) -> OrderPlacedResponse:
        async with self.unit_of_work:
            user = await self.unit_of_work.users.get_by_id(user_id)
            if not user:
                raise NotFoundError("User not found")

            product = await self.unit_of_work.products.get_by_id(product_id)
            if not product:
                raise NotFoundError("Product not found")

            # The partial unique index backs this check up when two requests race
            if await self.unit_of_work.orders.get_live_for(user.id, product.id):
                raise ConflictError("Order already placed")

            order = Order.place(user, product)

            await self.unit_of_work.orders.add(order)
            await self.unit_of_work.commit()

        logger.info("Order %s placed by user %s for product %s", order.id, user.id, product.id)

        self.notifier.publish(order.get_events())

        return OrderPlacedResponse(
            message="Order placed successfully",
            order=OrderHistoryDto.from_entity(order)
        )
