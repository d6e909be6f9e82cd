"""
Domain Enums - Business domain enumerations
"""

from enum import Enum


class UserRole(str, Enum):
    USER = "user"
    ADMIN = "admin"


class ProductCategory(str, Enum):
    SOFA = "sofa"
    BED = "bed"
    CHAIR = "chair"
    TABLE = "table"
    CUPBOARD = "cupboard"
    OTHER = "other"


class OrderStatus(str, Enum):
    PENDING = "pending"
    CONTACTED = "contacted"
    IN_PROCESS = "in-process"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    @classmethod
    def live(cls) -> tuple:
        """Statuses in which an order still blocks a new one for the same product"""
        return (cls.PENDING, cls.CONTACTED, cls.IN_PROCESS)

    @property
    def is_terminal(self) -> bool:
        return self in (OrderStatus.COMPLETED, OrderStatus.CANCELLED)


class OrderListScope(str, Enum):
    PENDING = "pending"
    LIVE = "live"
    ALL = "all"
