"""Order domain events"""

from dataclasses import dataclass
from datetime import datetime

from ..value_objects.email import Email
from ..value_objects.price_range import PriceRange
from ..value_objects.entity_ids import OrderId, UserId, ProductId


@dataclass(frozen=True)
class OrderPlaced:
    order_id: OrderId
    user_id: UserId
    product_id: ProductId
    user_email: Email
    user_name: str
    user_phone: str
    model_name: str
    factory_name: str
    price_range: PriceRange


@dataclass(frozen=True)
class OrderStatusChanged:
    order_id: OrderId
    user_id: UserId
    old_status: str
    new_status: str
    changed_at: datetime


@dataclass(frozen=True)
class OrderCompleted:
    order_id: OrderId
    user_id: UserId
    completed_at: datetime


@dataclass(frozen=True)
class OrderCancelled:
    order_id: OrderId
    user_id: UserId
    cancelled_at: datetime
