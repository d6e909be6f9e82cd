"""Admin ORM Model"""

from uuid import uuid4

from sqlalchemy import Column, String, DateTime, Uuid
from sqlalchemy.sql import func

from ...db.models import Base


class AdminModel(Base):
    __tablename__ = 'admins'

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid4, index=True)
    name = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    created_at = Column(DateTime, server_default=func.now())
    last_login = Column(DateTime, nullable=True)
