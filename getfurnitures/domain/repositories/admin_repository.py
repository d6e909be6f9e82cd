"""Admin repository interface"""

from abc import ABC, abstractmethod
from typing import Optional

from ..entities.admin import Admin
from ..value_objects.email import Email
from ..value_objects.entity_ids import AdminId


class IAdminRepository(ABC):

    @abstractmethod
    async def get_by_id(self, admin_id: AdminId) -> Optional[Admin]:
        pass

    @abstractmethod
    async def get_by_email(self, email: Email) -> Optional[Admin]:
        pass

    @abstractmethod
    async def add(self, admin: Admin) -> Admin:
        pass

    @abstractmethod
    async def update(self, admin: Admin) -> Admin:
        pass
