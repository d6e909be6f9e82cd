"""Signed-in user profile routes"""

from fastapi import APIRouter, Depends

from ...api.dependencies import get_unit_of_work, get_current_user
from ...application.use_cases.update_user_profile import UpdateUserProfileUseCase
from ...application.use_cases.change_password import ChangePasswordUseCase
from ...application.dtos.base import MessageResponse
from ...application.dtos.user_dtos import UserProfileDto, UpdateUserRequest, ChangePasswordDto
from ...domain.entities.user import User
from ...domain.repositories.unit_of_work import IUnitOfWork

router = APIRouter()


@router.get("/me", response_model=UserProfileDto)
async def get_me(current_user: User = Depends(get_current_user)):
    """Get current user profile"""
    return UserProfileDto.from_entity(current_user)


@router.post("/update-user", response_model=UserProfileDto)
async def update_user(
    request: UpdateUserRequest,
    current_user: User = Depends(get_current_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    use_case = UpdateUserProfileUseCase(unit_of_work)
    return await use_case.execute(current_user.id, request.user_input)


@router.post("/update-password", response_model=MessageResponse)
async def update_password(
    request: ChangePasswordDto,
    current_user: User = Depends(get_current_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    use_case = ChangePasswordUseCase(unit_of_work)
    return await use_case.execute(current_user.id, request)
