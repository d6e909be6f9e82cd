"""Password reset token ORM model"""

from uuid import uuid4

from sqlalchemy import Column, String, DateTime, ForeignKey, Uuid
from sqlalchemy.sql import func

from ...db.models import Base


class PasswordResetTokenORM(Base):
    """Password reset token ORM model"""

    __tablename__ = "password_reset_tokens"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid4, index=True)
    user_id = Column(Uuid(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    token = Column(String(255), unique=True, nullable=False, index=True)
    expires_at = Column(DateTime, nullable=False, index=True)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)

    def __repr__(self):
        return f"<PasswordResetTokenORM(id={self.id}, user_id={self.user_id}, token={self.token[:8]}..., expires_at={self.expires_at})>"
