"""User order routes"""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status

from ...api.dependencies import get_unit_of_work, get_current_user, get_notification_dispatcher
from ...application.use_cases.place_order import PlaceOrderUseCase
from ...application.use_cases.manage_orders import CancelOrderUseCase
from ...application.use_cases.list_orders import GetOrderHistoryUseCase
from ...application.dtos.base import MessageResponse
from ...application.dtos.order_dtos import OrderHistoryDto, OrderPlacedResponse
from ...domain.entities.user import User
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...domain.value_objects.entity_ids import ProductId, OrderId
from ...infrastructure.external_services.notification_dispatcher import NotificationDispatcher

router = APIRouter()


@router.post("/place-order/{product_id}", response_model=OrderPlacedResponse, status_code=status.HTTP_201_CREATED)
async def place_order(
    product_id: UUID,
    current_user: User = Depends(get_current_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
    notifier: NotificationDispatcher = Depends(get_notification_dispatcher)
):
    """Place an order; the user and the admin are emailed afterwards"""
    use_case = PlaceOrderUseCase(unit_of_work, notifier)
    return await use_case.execute(current_user.id, ProductId(product_id))


@router.get("/order-history", response_model=List[OrderHistoryDto])
async def order_history(
    current_user: User = Depends(get_current_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    use_case = GetOrderHistoryUseCase(unit_of_work)
    return await use_case.execute(current_user.id)


@router.delete("/cancel-order/{order_id}", response_model=MessageResponse)
async def cancel_order(
    order_id: UUID,
    current_user: User = Depends(get_current_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
    notifier: NotificationDispatcher = Depends(get_notification_dispatcher)
):
    use_case = CancelOrderUseCase(unit_of_work, notifier)
    return await use_case.execute(current_user.id, OrderId(order_id))
