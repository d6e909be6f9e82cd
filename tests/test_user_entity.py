"""User and value object rules"""

import pytest

from getfurnitures.domain.entities.user import User
from getfurnitures.domain.entities.password_reset_token import PasswordResetToken
from getfurnitures.domain.events.user_events import UserRegistered
from getfurnitures.domain.exceptions import ConflictError, ValidationError
from getfurnitures.domain.value_objects.email import Email
from getfurnitures.domain.value_objects.entity_ids import ProductId, UserId
from getfurnitures.domain.value_objects.price_range import PriceRange
from getfurnitures.core.security import generate_otp, generate_reset_token


def make_user():
    return User.register(
        name="Jane",
        email=Email("Jane@Example.com "),
        hashed_password="hash",
        phone="9876543210",
        address="12 Lake Road",
        otp=654321
    )


def test_register_is_unverified_and_emits_event():
    user = make_user()

    assert str(user.email) == "jane@example.com"
    assert not user.is_verified
    assert user.email_otp == 654321
    events = user.get_events()
    assert isinstance(events[0], UserRegistered)
    assert events[0].otp == 654321


def test_verify_email_burns_otp():
    user = make_user()
    user.verify_email()

    assert user.is_verified
    assert user.email_otp is None


def test_favourites_are_a_set():
    user = make_user()
    product_id = ProductId.generate()

    user.add_favourite(product_id)
    with pytest.raises(ConflictError):
        user.add_favourite(ProductId(product_id.value))

    user.remove_favourite(product_id)
    user.remove_favourite(product_id)
    assert user.favourites == set()


def test_update_profile_rejects_blank_name():
    user = make_user()
    with pytest.raises(ValidationError):
        user.update_profile(name="   ")

    user.update_profile(phone="1112223333")
    assert user.name == "Jane"
    assert user.phone == "1112223333"


def test_email_must_be_valid():
    with pytest.raises(ValueError):
        Email("not-an-email")


def test_price_range_bounds():
    with pytest.raises(ValueError):
        PriceRange(500, 100)
    with pytest.raises(ValueError):
        PriceRange(-1, 100)
    assert str(PriceRange(100, 250.5)) == "100 - 250.5"


def test_reset_token_expiry():
    token = PasswordResetToken.issue(UserId.generate(), generate_reset_token(), expires_in_minutes=10)

    assert len(token.token) == 64
    assert not token.is_expired()
    assert token.is_expired(now=token.expires_at)


def test_otp_is_six_digits():
    for _ in range(50):
        assert 100000 <= generate_otp() <= 999999
