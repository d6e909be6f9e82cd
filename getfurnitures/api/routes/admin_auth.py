"""Admin authentication routes"""

from fastapi import APIRouter, Depends, status

from ...api.dependencies import get_unit_of_work
from ...application.use_cases.admin_auth import RegisterAdminUseCase, LoginAdminUseCase
from ...application.dtos.admin_dtos import RegisterAdminDto, LoginAdminDto
from ...application.dtos.base import MessageResponse
from ...application.dtos.user_dtos import TokenResponse
from ...domain.repositories.unit_of_work import IUnitOfWork

router = APIRouter()


@router.post("/admin-register", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def register_admin(
    admin_data: RegisterAdminDto,
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    use_case = RegisterAdminUseCase(unit_of_work)
    return await use_case.execute(admin_data)


@router.post("/admin-login", response_model=TokenResponse)
async def login_admin(
    login_data: LoginAdminDto,
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    use_case = LoginAdminUseCase(unit_of_work)
    return await use_case.execute(login_data)
