"""Admin entity"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..value_objects.email import Email
from ..value_objects.entity_ids import AdminId


@dataclass
class Admin:
    id: AdminId
    name: str
    email: Email
    hashed_password: str
    created_at: datetime = field(default_factory=datetime.utcnow)
    last_login: Optional[datetime] = None

    @classmethod
    def create(cls, name: str, email: Email, hashed_password: str) -> 'Admin':
        return cls(
            id=AdminId.generate(),
            name=name,
            email=email,
            hashed_password=hashed_password
        )

    def record_login(self) -> None:
        self.last_login = datetime.utcnow()
