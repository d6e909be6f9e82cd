"""Admin repository implementation using SQLAlchemy ORM"""

from typing import Optional
from sqlalchemy.orm import Session

from ...domain.repositories.admin_repository import IAdminRepository
from ...domain.entities.admin import Admin
from ...domain.value_objects.email import Email
from ...domain.value_objects.entity_ids import AdminId
from ..orm.admin_model import AdminModel


class AdminRepositoryImpl(IAdminRepository):

    def __init__(self, session: Session):
        self.session = session

    async def get_by_id(self, admin_id: AdminId) -> Optional[Admin]:
        model = self.session.query(AdminModel).filter(AdminModel.id == admin_id.value).first()
        return self._map_to_entity(model) if model else None

    async def get_by_email(self, email: Email) -> Optional[Admin]:
        model = self.session.query(AdminModel).filter(AdminModel.email == str(email)).first()
        return self._map_to_entity(model) if model else None

    async def add(self, admin: Admin) -> Admin:
        self.session.add(AdminModel(
            id=admin.id.value,
            name=admin.name,
            email=str(admin.email),
            hashed_password=admin.hashed_password,
            created_at=admin.created_at,
            last_login=admin.last_login
        ))
        self.session.flush()
        return admin

    async def update(self, admin: Admin) -> Admin:
        existing = self.session.query(AdminModel).filter(AdminModel.id == admin.id.value).first()
        if existing:
            existing.name = admin.name
            existing.hashed_password = admin.hashed_password
            existing.last_login = admin.last_login
            self.session.flush()
        return admin

    def _map_to_entity(self, model: AdminModel) -> Admin:
        return Admin(
            id=AdminId(model.id),
            name=model.name,
            email=Email(model.email),
            hashed_password=model.hashed_password,
            created_at=model.created_at,
            last_login=model.last_login
        )
