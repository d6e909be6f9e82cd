"""Change password use case"""

from ...domain.value_objects.entity_ids import UserId
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...domain.exceptions import NotFoundError, UnauthorizedError
from ...application.dtos.user_dtos import ChangePasswordDto
from ...application.dtos.base import MessageResponse
from ...core.security import get_password_hash, verify_password


class ChangePasswordUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, user_id: UserId, request: ChangePasswordDto) -> MessageResponse:
        async with self.unit_of_work:
            user = await self.unit_of_work.users.get_by_id(user_id)
            if not user:
                raise NotFoundError("User not found")

            if not verify_password(request.old_password, user.hashed_password):
                raise UnauthorizedError("Old password is incorrect")

            user.change_password(get_password_hash(request.new_password))
            await self.unit_of_work.users.update(user)
            await self.unit_of_work.commit()

        return MessageResponse(message="Password updated successfully")
