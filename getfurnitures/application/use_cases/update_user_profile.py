"""Update user profile use case"""

from ...domain.value_objects.entity_ids import UserId
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...domain.exceptions import NotFoundError
from ...application.dtos.user_dtos import UpdateUserDto, UserProfileDto


class UpdateUserProfileUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, user_id: UserId, request: UpdateUserDto) -> UserProfileDto:
        """Update name, phone and address; fields left out stay unchanged"""
        async with self.unit_of_work:
            user = await self.unit_of_work.users.get_by_id(user_id)

            if not user:
                raise NotFoundError("User not found")

            user.update_profile(
                name=request.name,
                phone=request.phone,
                address=request.address
            )

            await self.unit_of_work.users.update(user)
            await self.unit_of_work.commit()

            return UserProfileDto.from_entity(user)
