"""Order entity with business logic"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, List, Dict, FrozenSet

from ..value_objects.entity_ids import OrderId, UserId, ProductId
from ..value_objects.price_range import PriceRange
from ..value_objects.product_image import ProductImage
from ..enums import OrderStatus
from ..events.order_events import OrderPlaced, OrderStatusChanged, OrderCompleted, OrderCancelled
from ..exceptions import ConflictError
from .user import User
from .product import Product


ALLOWED_TRANSITIONS: Dict[OrderStatus, FrozenSet[OrderStatus]] = {
    OrderStatus.PENDING: frozenset({OrderStatus.CONTACTED, OrderStatus.IN_PROCESS, OrderStatus.CANCELLED}),
    OrderStatus.CONTACTED: frozenset({OrderStatus.IN_PROCESS, OrderStatus.COMPLETED, OrderStatus.CANCELLED}),
    OrderStatus.IN_PROCESS: frozenset({OrderStatus.COMPLETED, OrderStatus.CANCELLED}),
    OrderStatus.COMPLETED: frozenset(),
    OrderStatus.CANCELLED: frozenset(),
}


@dataclass
class Order:
    id: OrderId
    user_id: UserId
    product_id: ProductId

    # Snapshot taken when the order is placed, never re-synced
    user_name: str
    user_phone: str
    user_address: str
    model_name: str
    price_range: PriceRange
    product_image: Optional[ProductImage]
    manufacturer_name: str
    factory_name: str
    manufacturer_phone: str

    status: OrderStatus = OrderStatus.PENDING

    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)
    completed_at: Optional[datetime] = None
    cancelled_at: Optional[datetime] = None

    # Domain events
    _events: List = field(default_factory=list, init=False)

    @classmethod
    def place(cls, user: User, product: Product) -> 'Order':
        """Factory method: snapshot user and product into a pending order"""
        now = datetime.utcnow()
        order = cls(
            id=OrderId.generate(),
            user_id=user.id,
            product_id=product.id,
            user_name=user.name,
            user_phone=user.phone,
            user_address=user.address,
            model_name=product.model_name,
            price_range=product.price_range,
            product_image=product.cover_image,
            manufacturer_name=product.manufacturer_name,
            factory_name=product.factory_name,
            manufacturer_phone=product.manufacturer_phone,
            status=OrderStatus.PENDING,
            created_at=now,
            updated_at=now
        )
        order._events.append(OrderPlaced(
            order_id=order.id,
            user_id=user.id,
            product_id=product.id,
            user_email=user.email,
            user_name=user.name,
            user_phone=user.phone,
            model_name=product.model_name,
            factory_name=product.factory_name,
            price_range=product.price_range
        ))
        return order

    def can_transition_to(self, status: OrderStatus) -> bool:
        return status in ALLOWED_TRANSITIONS[self.status]

    def transition_to(self, status: OrderStatus) -> None:
        """Business logic: move along the lifecycle, rejecting illegal steps"""
        if not self.can_transition_to(status):
            raise ConflictError(
                f"Cannot move order from '{self.status.value}' to '{status.value}'"
            )
        self._set_status(status)

    def complete(self) -> None:
        """Business logic: admin fulfilment.

        Any live order can be completed directly (pending included); an order
        that is already completed or cancelled cannot.
        """
        if not self.is_live:
            raise ConflictError(f"Cannot complete order with status: {self.status.value}")

        self._set_status(OrderStatus.COMPLETED)
        self.completed_at = self.updated_at

        self._events.append(OrderCompleted(
            order_id=self.id,
            user_id=self.user_id,
            completed_at=self.completed_at
        ))

    def cancel(self) -> None:
        """Business logic: cancel order, keeping the record for history"""
        self.transition_to(OrderStatus.CANCELLED)
        self.cancelled_at = self.updated_at

        self._events.append(OrderCancelled(
            order_id=self.id,
            user_id=self.user_id,
            cancelled_at=self.cancelled_at
        ))

    def _set_status(self, status: OrderStatus) -> None:
        old_status = self.status
        self.status = status
        self.updated_at = datetime.utcnow()

        self._events.append(OrderStatusChanged(
            order_id=self.id,
            user_id=self.user_id,
            old_status=old_status.value,
            new_status=status.value,
            changed_at=self.updated_at
        ))

    @property
    def is_live(self) -> bool:
        return self.status in OrderStatus.live()

    def is_owned_by(self, user_id: UserId) -> bool:
        return self.user_id == user_id

    def get_events(self) -> List:
        """Get and clear domain events"""
        events = self._events.copy()
        self._events.clear()
        return events
