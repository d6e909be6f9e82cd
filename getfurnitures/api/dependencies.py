"""API dependencies"""

from typing import Union
from uuid import UUID

from fastapi import BackgroundTasks, Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from ..core.security import decode_access_token
from ..db.database import get_db
from ..domain.entities.user import User
from ..domain.entities.admin import Admin
from ..domain.enums import UserRole
from ..domain.exceptions import UnauthorizedError, ForbiddenError
from ..domain.repositories.unit_of_work import IUnitOfWork
from ..domain.value_objects.entity_ids import UserId, AdminId
from ..infrastructure.repositories.unit_of_work_impl import UnitOfWorkImpl
from ..infrastructure.external_services.email_service import EmailService
from ..infrastructure.external_services.storage_service import StorageService
from ..infrastructure.external_services.notification_dispatcher import NotificationDispatcher


# Missing credentials are reported through the error envelope, not FastAPI's 403
security = HTTPBearer(auto_error=False)


def get_unit_of_work(db: Session = Depends(get_db)) -> IUnitOfWork:
    """Get unit of work"""
    return UnitOfWorkImpl(db)


def get_storage_service() -> StorageService:
    """Get storage service"""
    return StorageService()


def get_email_service() -> EmailService:
    """Get email service"""
    return EmailService()


def get_notification_dispatcher(
    background_tasks: BackgroundTasks,
    email_service: EmailService = Depends(get_email_service)
) -> NotificationDispatcher:
    return NotificationDispatcher(email_service, background_tasks)


async def get_token_claims(
    credentials: HTTPAuthorizationCredentials = Depends(security)
) -> dict:
    if credentials is None:
        raise UnauthorizedError("Authentication required")

    claims = decode_access_token(credentials.credentials)
    if not claims:
        raise UnauthorizedError("Invalid or expired token")
    return claims


async def get_current_principal(
    claims: dict = Depends(get_token_claims),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
) -> Union[User, Admin]:
    """Resolve the token subject to a user or an admin according to its role"""
    try:
        subject = UUID(str(claims["sub"]))
    except ValueError:
        raise UnauthorizedError("Invalid or expired token")

    principal = None
    async with unit_of_work:
        if claims["role"] == UserRole.ADMIN.value:
            principal = await unit_of_work.admins.get_by_id(AdminId(subject))
        elif claims["role"] == UserRole.USER.value:
            principal = await unit_of_work.users.get_by_id(UserId(subject))

    if principal is None:
        raise UnauthorizedError("User not found")
    return principal


async def get_current_user(
    principal: Union[User, Admin] = Depends(get_current_principal)
) -> User:
    if not isinstance(principal, User):
        raise ForbiddenError("User access required")
    return principal


async def get_current_admin(
    principal: Union[User, Admin] = Depends(get_current_principal)
) -> Admin:
    if not isinstance(principal, Admin):
        raise ForbiddenError("Admin access required")
    return principal
