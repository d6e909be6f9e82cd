"""User domain events"""

from dataclasses import dataclass
from datetime import datetime

from ..value_objects.email import Email
from ..value_objects.entity_ids import UserId


@dataclass(frozen=True)
class UserRegistered:
    user_id: UserId
    email: Email
    name: str
    otp: int


@dataclass(frozen=True)
class UserEmailVerified:
    user_id: UserId
    email: Email
    verified_at: datetime


@dataclass(frozen=True)
class PasswordResetRequested:
    user_id: UserId
    email: Email
    name: str
    token: str
    expires_at: datetime
