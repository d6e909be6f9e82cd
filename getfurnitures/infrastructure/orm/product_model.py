"""Product ORM Model"""

from uuid import uuid4

from sqlalchemy import Column, String, Text, Float, DateTime, Boolean, JSON, Uuid
from sqlalchemy.sql import func

from ...db.models import Base


class ProductModel(Base):
    __tablename__ = 'products'

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid4, index=True)
    model_name = Column(String, nullable=False, index=True)
    category = Column(String(20), nullable=False, index=True)
    description = Column(Text, nullable=True)
    price_min = Column(Float, nullable=False)
    price_max = Column(Float, nullable=False)
    images = Column(JSON, nullable=False, default=list)  # [{filename, path, mimetype}]

    manufacturer_name = Column(String, nullable=False)
    manufacturer_phone = Column(String, nullable=False, index=True)
    factory_name = Column(String, nullable=False)
    is_available = Column(Boolean, default=True, nullable=False)

    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
