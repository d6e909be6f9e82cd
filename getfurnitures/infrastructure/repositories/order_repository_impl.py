"""Order repository implementation using SQLAlchemy ORM"""

from typing import Optional, List, Iterable
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from sqlalchemy import asc, desc

from ...domain.entities.order import Order
from ...domain.repositories.order_repository import IOrderRepository
from ...domain.value_objects.entity_ids import OrderId, UserId, ProductId
from ...domain.value_objects.price_range import PriceRange
from ...domain.value_objects.product_image import ProductImage
from ...domain.enums import OrderStatus
from ...domain.exceptions import ConflictError
from ..orm.order_model import OrderModel


class OrderRepositoryImpl(IOrderRepository):
    """Repository implementation for Order aggregate"""

    def __init__(self, session: Session):
        self.session = session

    async def get_by_id(self, order_id: OrderId) -> Optional[Order]:
        """Get order by ID"""
        model = self.session.query(OrderModel).filter(OrderModel.id == order_id.value).first()
        return self._map_to_entity(model) if model else None

    async def get_by_user_id(self, user_id: UserId) -> List[Order]:
        """Get orders by user ID, newest first"""
        models = self.session.query(OrderModel).filter(
            OrderModel.user_id == user_id.value
        ).order_by(desc(OrderModel.created_at)).all()
        return [self._map_to_entity(model) for model in models]

    async def get_live_for(self, user_id: UserId, product_id: ProductId) -> Optional[Order]:
        model = self.session.query(OrderModel).filter(
            OrderModel.user_id == user_id.value,
            OrderModel.product_id == product_id.value,
            OrderModel.status.in_([status.value for status in OrderStatus.live()])
        ).first()
        return self._map_to_entity(model) if model else None

    async def get_by_statuses(self, statuses: Optional[Iterable[OrderStatus]] = None) -> List[Order]:
        query = self.session.query(OrderModel)
        if statuses is not None:
            query = query.filter(OrderModel.status.in_([status.value for status in statuses]))
        models = query.order_by(asc(OrderModel.created_at)).all()
        return [self._map_to_entity(model) for model in models]

    async def add(self, order: Order) -> Order:
        """Add a new order.

        The partial unique index on live orders rejects a second live order
        for the same (user, product) even when two requests race past the
        read-side check.
        """
        self.session.add(self._create_model_from_entity(order))
        try:
            self.session.flush()
        except IntegrityError:
            self.session.rollback()
            raise ConflictError("Order already placed")
        return order

    async def update(self, order: Order) -> Order:
        """Update an existing order"""
        existing = self.session.query(OrderModel).filter(OrderModel.id == order.id.value).first()
        if existing:
            self._update_model_from_entity(existing, order)
            self.session.flush()
        return order

    def _create_model_from_entity(self, order: Order) -> OrderModel:
        """Create ORM model from domain entity"""
        return OrderModel(
            id=order.id.value,
            user_id=order.user_id.value,
            product_id=order.product_id.value,
            user_name=order.user_name,
            user_phone=order.user_phone,
            user_address=order.user_address,
            model_name=order.model_name,
            price_min=order.price_range.min,
            price_max=order.price_range.max,
            product_image=order.product_image.to_dict() if order.product_image else None,
            manufacturer_name=order.manufacturer_name,
            factory_name=order.factory_name,
            manufacturer_phone=order.manufacturer_phone,
            status=order.status.value,
            created_at=order.created_at,
            updated_at=order.updated_at,
            completed_at=order.completed_at,
            cancelled_at=order.cancelled_at
        )

    def _update_model_from_entity(self, model: OrderModel, order: Order) -> None:
        """Only the lifecycle fields change after placement"""
        model.status = order.status.value
        model.updated_at = order.updated_at
        model.completed_at = order.completed_at
        model.cancelled_at = order.cancelled_at

    def _map_to_entity(self, model: OrderModel) -> Order:
        """Map ORM model to domain entity"""
        return Order(
            id=OrderId(model.id),
            user_id=UserId(model.user_id),
            product_id=ProductId(model.product_id),
            user_name=model.user_name,
            user_phone=model.user_phone,
            user_address=model.user_address,
            model_name=model.model_name,
            price_range=PriceRange(model.price_min, model.price_max),
            product_image=ProductImage.from_dict(model.product_image),
            manufacturer_name=model.manufacturer_name,
            factory_name=model.factory_name,
            manufacturer_phone=model.manufacturer_phone,
            status=OrderStatus(model.status),
            created_at=model.created_at,
            updated_at=model.updated_at,
            completed_at=model.completed_at,
            cancelled_at=model.cancelled_at
        )
