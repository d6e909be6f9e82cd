"""Order lifecycle use cases: cancel, advance and complete"""

import logging

from ...domain.value_objects.entity_ids import UserId, OrderId
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...domain.exceptions import NotFoundError, ValidationError
from ...domain.enums import OrderStatus
from ...infrastructure.external_services.notification_dispatcher import NotificationDispatcher
from ...application.dtos.base import MessageResponse
from ...application.dtos.order_dtos import AdminOrderDto, OrderStatusResponse

logger = logging.getLogger(__name__)


class CancelOrderUseCase:
    """A user withdraws one of their own live orders"""

    def __init__(self, unit_of_work: IUnitOfWork, notifier: NotificationDispatcher):
        self.unit_of_work = unit_of_work
        self.notifier = notifier

    async def execute(self, user_id: UserId, order_id: OrderId) -> MessageResponse:
        async with self.unit_of_work:
            order = await self.unit_of_work.orders.get_by_id(order_id)

            # Someone else's order is reported the same as a missing one
            if not order or not order.is_owned_by(user_id):
                raise NotFoundError("Order not found")

            order.cancel()

            await self.unit_of_work.orders.update(order)
            await self.unit_of_work.commit()

        logger.info("Order %s cancelled by user %s", order.id, user_id)
        self.notifier.publish(order.get_events())

        return MessageResponse(message="Order cancelled successfully")


class AdvanceOrderUseCase:
    """Admin moves an order forward to contacted or in-process"""

    targets = (OrderStatus.CONTACTED, OrderStatus.IN_PROCESS)

    def __init__(self, unit_of_work: IUnitOfWork, notifier: NotificationDispatcher):
        self.unit_of_work = unit_of_work
        self.notifier = notifier

    async def execute(self, order_id: OrderId, status: OrderStatus) -> OrderStatusResponse:
        if status not in self.targets:
            raise ValidationError(
                "Status must be one of: " + ", ".join(s.value for s in self.targets)
            )

        async with self.unit_of_work:
            order = await self.unit_of_work.orders.get_by_id(order_id)
            if not order:
                raise NotFoundError("Order not found")

            order.transition_to(status)

            await self.unit_of_work.orders.update(order)
            await self.unit_of_work.commit()

        logger.info("Order %s moved to %s", order.id, status.value)
        self.notifier.publish(order.get_events())

        return OrderStatusResponse(
            message="Order status updated",
            order=AdminOrderDto.from_entity(order)
        )


class CompleteOrderUseCase:

    def __init__(self, unit_of_work: IUnitOfWork, notifier: NotificationDispatcher):
        self.unit_of_work = unit_of_work
        self.notifier = notifier

    async def execute(self, order_id: OrderId) -> OrderStatusResponse:
        async with self.unit_of_work:
            order = await self.unit_of_work.orders.get_by_id(order_id)
            if not order:
                raise NotFoundError("Order not found")

            order.complete()

            await self.unit_of_work.orders.update(order)
            await self.unit_of_work.commit()

        logger.info("Order %s completed", order.id)
        self.notifier.publish(order.get_events())

        return OrderStatusResponse(
            message="Order completed successfully",
            order=AdminOrderDto.from_entity(order)
        )
