"""User authentication routes"""

from fastapi import APIRouter, Depends, status

from ...api.dependencies import get_unit_of_work, get_notification_dispatcher
from ...application.use_cases.register_user import RegisterUserUseCase
from ...application.use_cases.verify_email_otp import VerifyEmailOtpUseCase
from ...application.use_cases.login_user import LoginUserUseCase
from ...application.use_cases.forgot_password_use_case import ForgotPasswordUseCase
from ...application.use_cases.reset_password_use_case import ResetPasswordUseCase
from ...application.dtos.base import MessageResponse
from ...application.dtos.user_dtos import (
    RegisterUserDto, VerifyOtpDto, LoginUserDto, ForgotPasswordDto, ResetPasswordDto,
    TokenResponse, LoginResponse
)
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...infrastructure.external_services.notification_dispatcher import NotificationDispatcher

router = APIRouter()


@router.post("/user-register", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def register_user(
    user_data: RegisterUserDto,
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
    notifier: NotificationDispatcher = Depends(get_notification_dispatcher)
):
    """Register a new user and email them a verification OTP"""
    use_case = RegisterUserUseCase(unit_of_work, notifier)
    return await use_case.execute(user_data)


@router.post("/email-otp", response_model=TokenResponse)
async def verify_email_otp(
    request: VerifyOtpDto,
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    use_case = VerifyEmailOtpUseCase(unit_of_work)
    return await use_case.execute(request)


@router.post("/user-login", response_model=LoginResponse)
async def login_user(
    login_data: LoginUserDto,
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    """Login user"""
    use_case = LoginUserUseCase(unit_of_work)
    return await use_case.execute(login_data)


@router.post("/forgot-password", response_model=MessageResponse)
async def forgot_password(
    request: ForgotPasswordDto,
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
    notifier: NotificationDispatcher = Depends(get_notification_dispatcher)
):
    """Handle forgot password request"""
    use_case = ForgotPasswordUseCase(unit_of_work, notifier)
    return await use_case.execute(request)


@router.post("/reset-password/{token}", response_model=MessageResponse)
async def reset_password(
    token: str,
    request: ResetPasswordDto,
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    """Reset password with token"""
    use_case = ResetPasswordUseCase(unit_of_work)
    return await use_case.execute(token, request.password)
