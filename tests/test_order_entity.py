"""Order lifecycle rules"""

import pytest

from getfurnitures.domain.entities.order import Order
from getfurnitures.domain.entities.product import Product
from getfurnitures.domain.entities.user import User
from getfurnitures.domain.enums import OrderStatus, ProductCategory
from getfurnitures.domain.events.order_events import OrderPlaced, OrderCompleted, OrderCancelled
from getfurnitures.domain.exceptions import ConflictError
from getfurnitures.domain.value_objects.email import Email
from getfurnitures.domain.value_objects.price_range import PriceRange
from getfurnitures.domain.value_objects.product_image import ProductImage


def make_user():
    return User.register(
        name="Jane",
        email=Email("jane@example.com"),
        hashed_password="hash",
        phone="9876543210",
        address="12 Lake Road",
        otp=123456
    )


def make_product():
    return Product.create(
        model_name="Oslo",
        category=ProductCategory.SOFA,
        price_range=PriceRange(15000, 22000),
        images=[ProductImage("a.png", "uploads/products/a.png", "image/png")],
        manufacturer_name="Ravi",
        manufacturer_phone="9000000001",
        factory_name="Ravi Woodworks"
    )


def make_order(status=OrderStatus.PENDING):
    order = Order.place(make_user(), make_product())
    order.get_events()
    order.status = status
    return order


def test_place_snapshots_user_and_product():
    user, product = make_user(), make_product()
    order = Order.place(user, product)

    assert order.status == OrderStatus.PENDING
    assert order.user_name == "Jane"
    assert order.model_name == "Oslo"
    assert order.price_range == PriceRange(15000, 22000)
    assert order.product_image.filename == "a.png"

    events = order.get_events()
    assert len(events) == 1
    assert isinstance(events[0], OrderPlaced)
    assert order.get_events() == []


@pytest.mark.parametrize("source,target", [
    (OrderStatus.PENDING, OrderStatus.CONTACTED),
    (OrderStatus.PENDING, OrderStatus.IN_PROCESS),
    (OrderStatus.CONTACTED, OrderStatus.IN_PROCESS),
    (OrderStatus.CONTACTED, OrderStatus.COMPLETED),
    (OrderStatus.IN_PROCESS, OrderStatus.COMPLETED),
])
def test_allowed_transitions(source, target):
    order = make_order(source)
    order.transition_to(target)
    assert order.status == target


@pytest.mark.parametrize("source,target", [
    (OrderStatus.IN_PROCESS, OrderStatus.CONTACTED),
    (OrderStatus.CONTACTED, OrderStatus.PENDING),
    (OrderStatus.COMPLETED, OrderStatus.CANCELLED),
    (OrderStatus.CANCELLED, OrderStatus.PENDING),
])
def test_rejected_transitions(source, target):
    order = make_order(source)
    with pytest.raises(ConflictError):
        order.transition_to(target)
    assert order.status == source


def test_complete_from_pending_sets_timestamp():
    order = make_order()
    order.complete()

    assert order.status == OrderStatus.COMPLETED
    assert order.completed_at is not None
    assert any(isinstance(e, OrderCompleted) for e in order.get_events())


def test_terminal_orders_cannot_complete_or_cancel():
    for status in (OrderStatus.COMPLETED, OrderStatus.CANCELLED):
        order = make_order(status)
        with pytest.raises(ConflictError):
            order.complete()
        with pytest.raises(ConflictError):
            order.cancel()


def test_cancel_keeps_record():
    order = make_order(OrderStatus.CONTACTED)
    order.cancel()

    assert order.status == OrderStatus.CANCELLED
    assert order.cancelled_at is not None
    assert not order.is_live
    assert any(isinstance(e, OrderCancelled) for e in order.get_events())
