"""Password reset token repository implementation"""

from typing import Optional
from sqlalchemy.orm import Session

from ...domain.entities.password_reset_token import PasswordResetToken
from ...domain.repositories.password_reset_repository import IPasswordResetTokenRepository
from ...domain.value_objects.entity_ids import UserId
from ..orm.password_reset_token_model import PasswordResetTokenORM


class PasswordResetTokenRepositoryImpl(IPasswordResetTokenRepository):

    def __init__(self, session: Session):
        self.session = session

    async def get_by_token(self, token: str) -> Optional[PasswordResetToken]:
        model = self.session.query(PasswordResetTokenORM).filter(
            PasswordResetTokenORM.token == token
        ).first()
        return self._map_to_entity(model) if model else None

    async def add(self, reset_token: PasswordResetToken) -> PasswordResetToken:
        self.session.add(PasswordResetTokenORM(
            id=reset_token.id,
            user_id=reset_token.user_id.value,
            token=reset_token.token,
            expires_at=reset_token.expires_at,
            created_at=reset_token.created_at
        ))
        self.session.flush()
        return reset_token

    async def delete(self, reset_token: PasswordResetToken) -> None:
        self.session.query(PasswordResetTokenORM).filter(
            PasswordResetTokenORM.id == reset_token.id
        ).delete(synchronize_session=False)

    async def delete_for_user(self, user_id: UserId) -> int:
        return self.session.query(PasswordResetTokenORM).filter(
            PasswordResetTokenORM.user_id == user_id.value
        ).delete(synchronize_session=False)

    def _map_to_entity(self, model: PasswordResetTokenORM) -> PasswordResetToken:
        return PasswordResetToken(
            id=model.id,
            user_id=UserId(model.user_id),
            token=model.token,
            expires_at=model.expires_at,
            created_at=model.created_at
        )
