"""Unit of Work interface for transaction management"""

from abc import ABC, abstractmethod

from .user_repository import IUserRepository
from .admin_repository import IAdminRepository
from .product_repository import IProductRepository
from .order_repository import IOrderRepository
from .password_reset_repository import IPasswordResetTokenRepository


class IUnitOfWork(ABC):
    """Unit of Work interface for managing transactions across repositories"""

    users: IUserRepository
    admins: IAdminRepository
    products: IProductRepository
    orders: IOrderRepository
    reset_tokens: IPasswordResetTokenRepository

    @abstractmethod
    async def __aenter__(self):
        """Enter async context"""
        pass

    @abstractmethod
    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Exit async context"""
        pass

    @abstractmethod
    async def commit(self):
        """Commit transaction"""
        pass

    @abstractmethod
    async def rollback(self):
        """Rollback transaction"""
        pass
