"""Order ORM Model"""

from uuid import uuid4

from sqlalchemy import Column, String, Float, DateTime, ForeignKey, JSON, Index, Uuid, text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from ...db.models import Base
from ...domain.enums import OrderStatus


LIVE_STATUS_CONDITION = text(
    "status IN ({})".format(", ".join(f"'{status.value}'" for status in OrderStatus.live()))
)


class OrderModel(Base):
    __tablename__ = 'orders'

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid4, index=True)
    user_id = Column(Uuid(as_uuid=True), ForeignKey('users.id'), nullable=False, index=True)
    # No foreign key: orders keep their snapshot after the product is deleted
    product_id = Column(Uuid(as_uuid=True), nullable=False, index=True)

    # Snapshot fields
    user_name = Column(String, nullable=False)
    user_phone = Column(String, nullable=False)
    user_address = Column(String, nullable=True)
    model_name = Column(String, nullable=False)
    price_min = Column(Float, nullable=False)
    price_max = Column(Float, nullable=False)
    product_image = Column(JSON, nullable=True)  # {filename, path, mimetype}
    manufacturer_name = Column(String, nullable=False)
    factory_name = Column(String, nullable=False)
    manufacturer_phone = Column(String, nullable=False)

    status = Column(String(20), default=OrderStatus.PENDING.value, nullable=False, index=True)

    # Timestamps
    created_at = Column(DateTime, server_default=func.now(), index=True)
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
    completed_at = Column(DateTime, nullable=True)
    cancelled_at = Column(DateTime, nullable=True)

    # Relationships
    user = relationship('UserModel', back_populates='orders')

    __table_args__ = (
        # At most one live order per (user, product)
        Index(
            'uq_orders_live_user_product',
            'user_id',
            'product_id',
            unique=True,
            postgresql_where=LIVE_STATUS_CONDITION,
            sqlite_where=LIVE_STATUS_CONDITION,
        ),
    )
