"""Order listing use cases"""

from typing import List

from ...domain.value_objects.entity_ids import UserId
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...domain.enums import OrderStatus, OrderListScope
from ...application.dtos.order_dtos import OrderHistoryDto, AdminOrderDto


SCOPE_STATUSES = {
    OrderListScope.PENDING: (OrderStatus.PENDING,),
    OrderListScope.LIVE: OrderStatus.live(),
    OrderListScope.ALL: None,
}


class GetOrderHistoryUseCase:
    """All of a user's orders, newest first"""

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, user_id: UserId) -> List[OrderHistoryDto]:
        async with self.unit_of_work:
            orders = await self.unit_of_work.orders.get_by_user_id(user_id)
            return [OrderHistoryDto.from_entity(order) for order in orders]


class ListOrdersUseCase:
    """Admin order queue, oldest first"""

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, scope: OrderListScope = OrderListScope.PENDING) -> List[AdminOrderDto]:
        async with self.unit_of_work:
            orders = await self.unit_of_work.orders.get_by_statuses(SCOPE_STATUSES[scope])
            return [AdminOrderDto.from_entity(order) for order in orders]
