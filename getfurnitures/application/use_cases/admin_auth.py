"""Admin registration and login use cases"""

import logging

from ...domain.entities.admin import Admin
from ...domain.value_objects.email import Email
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...domain.exceptions import ConflictError, NotFoundError, UnauthorizedError, ForbiddenError
from ...domain.enums import UserRole
from ...application.dtos.admin_dtos import RegisterAdminDto, LoginAdminDto
from ...application.dtos.base import MessageResponse
from ...application.dtos.user_dtos import TokenResponse
from ...core.config import settings
from ...core.security import get_password_hash, verify_password, create_access_token

logger = logging.getLogger(__name__)


class RegisterAdminUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, request: RegisterAdminDto) -> MessageResponse:
        if not settings.ALLOW_ADMIN_REGISTRATION:
            raise ForbiddenError("Admin registration is disabled")

        async with self.unit_of_work:
            email = Email(request.email)
            if await self.unit_of_work.admins.get_by_email(email):
                raise ConflictError("Admin already exists")

            admin = Admin.create(
                name=request.name.strip(),
                email=email,
                hashed_password=get_password_hash(request.password)
            )
            await self.unit_of_work.admins.add(admin)
            await self.unit_of_work.commit()

        logger.info("Registered admin %s", admin.id)
        return MessageResponse(message="Admin created successfully")


class LoginAdminUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, request: LoginAdminDto) -> TokenResponse:
        async with self.unit_of_work:
            admin = await self.unit_of_work.admins.get_by_email(Email(request.email))
            if not admin:
                raise NotFoundError("Admin not found")

            if not verify_password(request.password, admin.hashed_password):
                raise UnauthorizedError("Invalid credentials")

            admin.record_login()
            await self.unit_of_work.admins.update(admin)
            await self.unit_of_work.commit()

        token = create_access_token(str(admin.id), UserRole.ADMIN.value, str(admin.email))
        return TokenResponse(message="Admin logged in successfully", token=token)
