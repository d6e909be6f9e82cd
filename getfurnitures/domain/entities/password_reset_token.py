"""Password reset token entity"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Optional
from uuid import UUID, uuid4

from ..value_objects.entity_ids import UserId


@dataclass
class PasswordResetToken:
    id: UUID
    user_id: UserId
    token: str
    expires_at: datetime
    created_at: datetime = field(default_factory=datetime.utcnow)

    @classmethod
    def issue(cls, user_id: UserId, token: str, expires_in_minutes: int) -> 'PasswordResetToken':
        now = datetime.utcnow()
        return cls(
            id=uuid4(),
            user_id=user_id,
            token=token,
            expires_at=now + timedelta(minutes=expires_in_minutes),
            created_at=now
        )

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        return (now or datetime.utcnow()) >= self.expires_at
