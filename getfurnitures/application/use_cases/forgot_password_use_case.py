"""Forgot password use case"""

import logging

from ..dtos.user_dtos import ForgotPasswordDto
from ..dtos.base import MessageResponse
from ...core.config import settings
from ...core.security import generate_reset_token
from ...domain.entities.password_reset_token import PasswordResetToken
from ...domain.events.user_events import PasswordResetRequested
from ...domain.exceptions import NotFoundError
from ...domain.value_objects.email import Email
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...infrastructure.external_services.notification_dispatcher import NotificationDispatcher

logger = logging.getLogger(__name__)


class ForgotPasswordUseCase:
    """Use case for handling forgot password requests"""

    def __init__(self, unit_of_work: IUnitOfWork, notifier: NotificationDispatcher):
        self.unit_of_work = unit_of_work
        self.notifier = notifier

    async def execute(self, request: ForgotPasswordDto) -> MessageResponse:
        async with self.unit_of_work:
            user = await self.unit_of_work.users.get_by_email(Email(request.email))

            if not user:
                raise NotFoundError("User not found")

            # Only the latest link works
            await self.unit_of_work.reset_tokens.delete_for_user(user.id)

            reset_token = PasswordResetToken.issue(
                user_id=user.id,
                token=generate_reset_token(),
                expires_in_minutes=settings.PASSWORD_RESET_EXPIRE_MINUTES
            )
            await self.unit_of_work.reset_tokens.add(reset_token)
            await self.unit_of_work.commit()

        logger.info("Password reset requested for user %s", user.id)

        self.notifier.publish([PasswordResetRequested(
            user_id=user.id,
            email=user.email,
            name=user.name,
            token=reset_token.token,
            expires_at=reset_token.expires_at
        )])

        return MessageResponse(message="Password reset link sent to your email")
