"""User ORM Model"""

from uuid import uuid4

from sqlalchemy import Column, Integer, String, DateTime, Boolean, ForeignKey, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from ...db.models import Base


class UserModel(Base):
    __tablename__ = 'users'

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid4, index=True)
    name = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    phone = Column(String, nullable=False)
    address = Column(String, nullable=True)
    is_verified = Column(Boolean, default=False, nullable=False)
    email_otp = Column(Integer, nullable=True, index=True)

    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
    last_login = Column(DateTime, nullable=True)

    # Relationships
    favourites = relationship(
        'FavouriteModel',
        back_populates='user',
        cascade='all, delete-orphan',
        lazy='selectin'
    )
    orders = relationship('OrderModel', back_populates='user')


class FavouriteModel(Base):
    """A product favourited by a user. The composite key keeps the set unique."""
    __tablename__ = 'user_favourites'

    user_id = Column(Uuid(as_uuid=True), ForeignKey('users.id', ondelete='CASCADE'), primary_key=True)
    # No foreign key: a favourite may outlive the product, callers resolve ids
    product_id = Column(Uuid(as_uuid=True), primary_key=True, index=True)
    created_at = Column(DateTime, server_default=func.now())

    user = relationship('UserModel', back_populates='favourites')
