"""Email OTP verification use case"""

import logging

from ...domain.value_objects.email import Email
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...domain.exceptions import NotFoundError
from ...domain.enums import UserRole
from ...application.dtos.user_dtos import VerifyOtpDto, TokenResponse
from ...core.security import create_access_token

logger = logging.getLogger(__name__)


class VerifyEmailOtpUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, request: VerifyOtpDto) -> TokenResponse:
        """Verify a user by email + OTP and open a session"""
        async with self.unit_of_work:
            # Scoped by email: two pending registrations may hold the same OTP
            user = await self.unit_of_work.users.get_by_email_and_otp(Email(request.email), request.otp)

            if not user:
                raise NotFoundError("User not found or invalid OTP")

            user.verify_email()

            await self.unit_of_work.users.update(user)
            await self.unit_of_work.commit()

        logger.info("Email verified for user %s", user.id)

        token = create_access_token(str(user.id), UserRole.USER.value, str(user.email))
        return TokenResponse(message="User verified successfully", token=token)
