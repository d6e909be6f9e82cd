"""User entity with business logic"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, List, Set

from ..value_objects.email import Email
from ..value_objects.entity_ids import UserId, ProductId
from ..events.user_events import UserRegistered, UserEmailVerified
from ..exceptions import ConflictError, ValidationError


@dataclass
class User:
    id: UserId
    name: str
    email: Email
    hashed_password: str
    phone: str
    address: str
    favourites: Set[ProductId] = field(default_factory=set)
    is_verified: bool = False
    email_otp: Optional[int] = None

    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)
    last_login: Optional[datetime] = None

    # Domain events
    _events: List = field(default_factory=list, init=False)

    @classmethod
    def register(
        cls,
        name: str,
        email: Email,
        hashed_password: str,
        phone: str,
        address: str,
        otp: int
    ) -> 'User':
        """Factory method: a new, unverified account waiting for its OTP"""
        now = datetime.utcnow()
        user = cls(
            id=UserId.generate(),
            name=name,
            email=email,
            hashed_password=hashed_password,
            phone=phone,
            address=address,
            is_verified=False,
            email_otp=otp,
            created_at=now,
            updated_at=now
        )
        user._events.append(UserRegistered(
            user_id=user.id,
            email=email,
            name=name,
            otp=otp
        ))
        return user

    def verify_email(self) -> None:
        """Business logic: mark the account verified and burn the OTP"""
        self.is_verified = True
        self.email_otp = None
        self.updated_at = datetime.utcnow()

        self._events.append(UserEmailVerified(
            user_id=self.id,
            email=self.email,
            verified_at=self.updated_at
        ))

    def add_favourite(self, product_id: ProductId) -> None:
        if product_id in self.favourites:
            raise ConflictError("Product already in favourites")
        self.favourites.add(product_id)
        self.updated_at = datetime.utcnow()

    def remove_favourite(self, product_id: ProductId) -> None:
        """Idempotent: removing a product that is not a favourite is a no-op"""
        if product_id in self.favourites:
            self.favourites.discard(product_id)
            self.updated_at = datetime.utcnow()

    def update_profile(
        self,
        name: Optional[str] = None,
        phone: Optional[str] = None,
        address: Optional[str] = None
    ) -> None:
        """Business logic: only name, phone and address are user-editable"""
        if name is not None:
            if not name.strip():
                raise ValidationError("Name is required")
            self.name = name.strip()
        if phone is not None:
            self.phone = phone.strip()
        if address is not None:
            self.address = address.strip()
        self.updated_at = datetime.utcnow()

    def change_password(self, hashed_password: str) -> None:
        self.hashed_password = hashed_password
        self.updated_at = datetime.utcnow()

    def record_login(self) -> None:
        """Record user login"""
        self.last_login = datetime.utcnow()

    def get_events(self) -> List:
        """Get and clear domain events"""
        events = self._events.copy()
        self._events.clear()
        return events
