"""Order repository interface"""

from abc import ABC, abstractmethod
from typing import Optional, List, Iterable

from ..entities.order import Order
from ..enums import OrderStatus
from ..value_objects.entity_ids import OrderId, UserId, ProductId


class IOrderRepository(ABC):

    @abstractmethod
    async def get_by_id(self, order_id: OrderId) -> Optional[Order]:
        pass

    @abstractmethod
    async def get_by_user_id(self, user_id: UserId) -> List[Order]:
        """Orders of one user, newest first"""
        pass

    @abstractmethod
    async def get_live_for(self, user_id: UserId, product_id: ProductId) -> Optional[Order]:
        """The live order for a (user, product) pair, if any"""
        pass

    @abstractmethod
    async def get_by_statuses(self, statuses: Optional[Iterable[OrderStatus]] = None) -> List[Order]:
        """Orders in any of the statuses (all orders when None), oldest first"""
        pass

    @abstractmethod
    async def add(self, order: Order) -> Order:
        pass

    @abstractmethod
    async def update(self, order: Order) -> Order:
        pass
