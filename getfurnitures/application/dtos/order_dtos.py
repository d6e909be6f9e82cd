"""Order DTOs for API requests and responses"""

from typing import Optional
from datetime import datetime
from uuid import UUID

from .base import CamelModel
from .product_dtos import PriceRangeDto, ProductImageDto
from ...domain.enums import OrderStatus


class OrderHistoryDto(CamelModel):
    """A user's own order. The owning user id is left out."""
    id: UUID
    product_id: UUID
    user_name: str
    user_phone: str
    user_address: Optional[str] = None
    model_name: str
    price_range: PriceRangeDto
    product_image: Optional[ProductImageDto] = None
    manufacturer_name: str
    factory_name: str
    manufacturer_phone: str
    status: str
    created_at: datetime
    updated_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    cancelled_at: Optional[datetime] = None

    @classmethod
    def _fields_from_entity(cls, order) -> dict:
        return dict(
            id=order.id.value,
            product_id=order.product_id.value,
            user_name=order.user_name,
            user_phone=order.user_phone,
            user_address=order.user_address,
            model_name=order.model_name,
            price_range=PriceRangeDto(min=order.price_range.min, max=order.price_range.max),
            product_image=ProductImageDto(**order.product_image.to_dict()) if order.product_image else None,
            manufacturer_name=order.manufacturer_name,
            factory_name=order.factory_name,
            manufacturer_phone=order.manufacturer_phone,
            status=order.status.value,
            created_at=order.created_at,
            updated_at=order.updated_at,
            completed_at=order.completed_at,
            cancelled_at=order.cancelled_at
        )

    @classmethod
    def from_entity(cls, order) -> 'OrderHistoryDto':
        """Convert domain entity to DTO"""
        return cls(**cls._fields_from_entity(order))


class AdminOrderDto(OrderHistoryDto):
    """Admin view keeps the owning user id"""
    user_id: UUID

    @classmethod
    def from_entity(cls, order) -> 'AdminOrderDto':
        return cls(user_id=order.user_id.value, **cls._fields_from_entity(order))


class OrderStatusUpdateDto(CamelModel):
    status: OrderStatus


class OrderPlacedResponse(CamelModel):
    message: str
    order: OrderHistoryDto


class OrderStatusResponse(CamelModel):
    message: str
    order: AdminOrderDto
