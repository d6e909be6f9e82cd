"""User DTOs for API layer"""

from pydantic import EmailStr, Field
from typing import Optional
from datetime import datetime

from .base import CamelModel


class RegisterUserDto(CamelModel):
    """DTO for user registration"""
    name: str = Field(..., min_length=1)
    email: EmailStr
    phone: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
    address: str = Field(..., min_length=1)


class VerifyOtpDto(CamelModel):
    """DTO for email OTP verification"""
    email: EmailStr
    otp: int


class LoginUserDto(CamelModel):
    """DTO for user login"""
    email: EmailStr
    password: str


class ForgotPasswordDto(CamelModel):
    """DTO for forgot password request"""
    email: EmailStr


class ResetPasswordDto(CamelModel):
    """DTO for reset password request, the token travels in the path"""
    password: str = Field(..., min_length=6)


class UpdateUserDto(CamelModel):
    name: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None


class UpdateUserRequest(CamelModel):
    """Profile edits arrive wrapped as ``{"userInput": {...}}``"""
    user_input: UpdateUserDto


class ChangePasswordDto(CamelModel):
    old_password: str
    new_password: str = Field(..., min_length=6)


class UserSummaryDto(CamelModel):
    name: str
    email: str
    created_at: Optional[datetime] = None


class UserProfileDto(CamelModel):
    name: str
    email: str
    phone: str
    address: Optional[str] = None
    is_verified: bool
    created_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, user) -> 'UserProfileDto':
        return cls(
            name=user.name,
            email=str(user.email),
            phone=user.phone,
            address=user.address,
            is_verified=user.is_verified,
            created_at=user.created_at
        )


class TokenResponse(CamelModel):
    message: str
    token: str


class LoginResponse(CamelModel):
    message: str
    token: str
    user: UserSummaryDto
