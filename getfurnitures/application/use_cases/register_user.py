"""Register user use case"""

import logging

from ...domain.entities.user import User
from ...domain.value_objects.email import Email
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...domain.exceptions import ConflictError
from ...infrastructure.external_services.notification_dispatcher import NotificationDispatcher
from ...application.dtos.user_dtos import RegisterUserDto
from ...application.dtos.base import MessageResponse
from ...core.security import get_password_hash, generate_otp

logger = logging.getLogger(__name__)


class RegisterUserUseCase:

    def __init__(self, unit_of_work: IUnitOfWork, notifier: NotificationDispatcher):
        self.unit_of_work = unit_of_work
        self.notifier = notifier

    async def execute(self, request: RegisterUserDto) -> MessageResponse:
        async with self.unit_of_work:
            email = Email(request.email)

            if await self.unit_of_work.users.exists_by_email(email):
                raise ConflictError("User already exists")

            user = User.register(
                name=request.name.strip(),
                email=email,
                hashed_password=get_password_hash(request.password),
                phone=request.phone.strip(),
                address=request.address.strip(),
                otp=generate_otp()
            )

            await self.unit_of_work.users.add(user)
            await self.unit_of_work.commit()

        logger.info("Registered user %s", user.id)

        # OTP email goes out after the commit; a mail failure leaves the account in place
        self.notifier.publish(user.get_events())

        return MessageResponse(message=f"User created successfully. Verification OTP sent to {email}")
