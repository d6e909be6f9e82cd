"""Reset password use case"""

import logging

from ..dtos.base import MessageResponse
from ...core.security import get_password_hash
from ...domain.exceptions import ValidationError, ExpiredError
from ...domain.repositories.unit_of_work import IUnitOfWork

logger = logging.getLogger(__name__)


class ResetPasswordUseCase:
    """Use case for resetting password with token"""

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, token: str, new_password: str) -> MessageResponse:
        async with self.unit_of_work:
            reset_token = await self.unit_of_work.reset_tokens.get_by_token(token)

            if not reset_token:
                raise ValidationError("Invalid or expired reset token")

            if reset_token.is_expired():
                await self.unit_of_work.reset_tokens.delete(reset_token)
                await self.unit_of_work.commit()
                raise ExpiredError("Reset token has expired")

            user = await self.unit_of_work.users.get_by_id(reset_token.user_id)
            if not user:
                raise ValidationError("Invalid or expired reset token")

            user.change_password(get_password_hash(new_password))
            await self.unit_of_work.users.update(user)

            # Single use
            await self.unit_of_work.reset_tokens.delete(reset_token)
            await self.unit_of_work.commit()

        logger.info("Password reset for user %s", user.id)
        return MessageResponse(message="Password reset successfully")
