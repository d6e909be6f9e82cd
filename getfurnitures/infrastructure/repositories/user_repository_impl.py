"""User repository implementation using SQLAlchemy ORM"""

from typing import Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from ...domain.repositories.user_repository import IUserRepository
from ...domain.entities.user import User
from ...domain.value_objects.email import Email
from ...domain.value_objects.entity_ids import UserId, ProductId
from ...domain.exceptions import ConflictError
from ..orm.user_model import UserModel, FavouriteModel


class UserRepositoryImpl(IUserRepository):
    """Repository implementation for User aggregate"""

    def __init__(self, session: Session):
        self.session = session

    async def get_by_id(self, user_id: UserId) -> Optional[User]:
        """Get user by ID"""
        model = self.session.query(UserModel).filter(UserModel.id == user_id.value).first()
        return self._map_to_entity(model) if model else None

    async def get_by_email(self, email: Email) -> Optional[User]:
        """Get user by email"""
        model = self.session.query(UserModel).filter(UserModel.email == str(email)).first()
        return self._map_to_entity(model) if model else None

    async def get_by_email_and_otp(self, email: Email, otp: int) -> Optional[User]:
        model = self.session.query(UserModel).filter(
            UserModel.email == str(email),
            UserModel.email_otp == otp,
            UserModel.email_otp.isnot(None)
        ).first()
        return self._map_to_entity(model) if model else None

    async def exists_by_email(self, email: Email) -> bool:
        """Check if user exists by email"""
        return self.session.query(UserModel).filter(UserModel.email == str(email)).first() is not None

    async def add(self, user: User) -> User:
        """Add a new user.

        The unique email constraint catches a registration that raced past
        the existence check.
        """
        self.session.add(self._create_model_from_entity(user))
        try:
            self.session.flush()
        except IntegrityError:
            self.session.rollback()
            raise ConflictError("User already exists")
        return user

    async def update(self, user: User) -> User:
        """Update an existing user"""
        existing = self.session.query(UserModel).filter(UserModel.id == user.id.value).first()
        if existing:
            self._update_model_from_entity(existing, user)
            self.session.flush()
        return user

    def _create_model_from_entity(self, user: User) -> UserModel:
        """Create ORM model from domain entity"""
        model = UserModel(
            id=user.id.value,
            name=user.name,
            email=str(user.email),
            hashed_password=user.hashed_password,
            phone=user.phone,
            address=user.address,
            is_verified=user.is_verified,
            email_otp=user.email_otp,
            created_at=user.created_at,
            updated_at=user.updated_at,
            last_login=user.last_login
        )
        model.favourites = [
            FavouriteModel(product_id=product_id.value) for product_id in user.favourites
        ]
        return model

    def _update_model_from_entity(self, model: UserModel, user: User) -> None:
        """Update ORM model from domain entity"""
        model.name = user.name
        model.email = str(user.email)
        model.hashed_password = user.hashed_password
        model.phone = user.phone
        model.address = user.address
        model.is_verified = user.is_verified
        model.email_otp = user.email_otp
        model.updated_at = user.updated_at
        model.last_login = user.last_login
        self._sync_favourites(model, user)

    def _sync_favourites(self, model: UserModel, user: User) -> None:
        wanted = {product_id.value for product_id in user.favourites}
        current = {favourite.product_id for favourite in model.favourites}

        for favourite in list(model.favourites):
            if favourite.product_id not in wanted:
                model.favourites.remove(favourite)
        for product_id in wanted - current:
            model.favourites.append(FavouriteModel(product_id=product_id))

    def _map_to_entity(self, model: UserModel) -> User:
        """Map ORM model to domain entity"""
        return User(
            id=UserId(model.id),
            name=model.name,
            email=Email(model.email),
            hashed_password=model.hashed_password,
            phone=model.phone,
            address=model.address,
            favourites={ProductId(favourite.product_id) for favourite in model.favourites},
            is_verified=model.is_verified,
            email_otp=model.email_otp,
            created_at=model.created_at,
            updated_at=model.updated_at,
            last_login=model.last_login
        )
