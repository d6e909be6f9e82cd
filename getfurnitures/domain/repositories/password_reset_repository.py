"""Password reset token repository interface"""

from abc import ABC, abstractmethod
from typing import Optional

from ..entities.password_reset_token import PasswordResetToken
from ..value_objects.entity_ids import UserId


class IPasswordResetTokenRepository(ABC):

    @abstractmethod
    async def get_by_token(self, token: str) -> Optional[PasswordResetToken]:
        """Get a token record regardless of expiry"""
        pass

    @abstractmethod
    async def add(self, reset_token: PasswordResetToken) -> PasswordResetToken:
        pass

    @abstractmethod
    async def delete(self, reset_token: PasswordResetToken) -> None:
        pass

    @abstractmethod
    async def delete_for_user(self, user_id: UserId) -> int:
        pass
