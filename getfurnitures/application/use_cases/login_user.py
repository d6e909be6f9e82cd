"""Login user use case"""

from ...domain.value_objects.email import Email
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...domain.exceptions import NotFoundError, ForbiddenError, UnauthorizedError
from ...domain.enums import UserRole
from ...application.dtos.user_dtos import LoginUserDto, LoginResponse, UserSummaryDto
from ...core.security import verify_password, create_access_token


class LoginUserUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, request: LoginUserDto) -> LoginResponse:
        async with self.unit_of_work:
            user = await self.unit_of_work.users.get_by_email(Email(request.email))
            if not user:
                raise NotFoundError("User not found")

            if not user.is_verified:
                raise ForbiddenError("Verify your email before logging in")

            if not verify_password(request.password, user.hashed_password):
                raise UnauthorizedError("Invalid password")

            user.record_login()
            await self.unit_of_work.users.update(user)
            await self.unit_of_work.commit()

        token = create_access_token(str(user.id), UserRole.USER.value, str(user.email))

        return LoginResponse(
            message="User logged in successfully",
            token=token,
            user=UserSummaryDto(
                name=user.name,
                email=str(user.email),
                created_at=user.created_at
            )
        )
