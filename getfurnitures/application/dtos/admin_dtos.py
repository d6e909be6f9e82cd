"""Admin DTOs"""

from pydantic import EmailStr, Field

from .base import CamelModel


class RegisterAdminDto(CamelModel):
    name: str = Field(..., min_length=1)
    email: EmailStr
    password: str = Field(..., min_length=1)


class LoginAdminDto(CamelModel):
    email: EmailStr
    password: str
