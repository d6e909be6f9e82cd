"""Store-level guarantees of the repositories, below the use case checks"""

import asyncio

import pytest

from getfurnitures.db.database import SessionLocal
from getfurnitures.domain.entities.order import Order
from getfurnitures.domain.entities.product import Product
from getfurnitures.domain.entities.user import User
from getfurnitures.domain.enums import OrderStatus, ProductCategory
from getfurnitures.domain.exceptions import ConflictError
from getfurnitures.domain.value_objects.email import Email
from getfurnitures.domain.value_objects.price_range import PriceRange
from getfurnitures.domain.value_objects.product_image import ProductImage
from getfurnitures.infrastructure.repositories.unit_of_work_impl import UnitOfWorkImpl


def make_user(email="jane@example.com"):
    return User.register(
        name="Jane",
        email=Email(email),
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


async def live_order_index_scenario(unit_of_work, finish):
    user, product = make_user(), make_product()

    async with unit_of_work:
        await unit_of_work.users.add(user)
        await unit_of_work.products.add(product)
        first = Order.place(user, product)
        await unit_of_work.orders.add(first)
        await unit_of_work.commit()

    # Bypasses get_live_for: only the partial unique index stands in the way
    with pytest.raises(ConflictError):
        async with unit_of_work:
            await unit_of_work.orders.add(Order.place(user, product))

    async with unit_of_work:
        finish(first)
        await unit_of_work.orders.update(first)
        await unit_of_work.commit()

    async with unit_of_work:
        await unit_of_work.orders.add(Order.place(user, product))
        await unit_of_work.commit()

    async with unit_of_work:
        return await unit_of_work.orders.get_by_user_id(user.id)


@pytest.mark.parametrize("finish", [Order.complete, Order.cancel])
def test_live_order_index_rejects_duplicate_insert(tables, finish):
    session = SessionLocal()
    try:
        orders = asyncio.run(live_order_index_scenario(UnitOfWorkImpl(session), finish))
    finally:
        session.close()

    assert len(orders) == 2
    assert orders[0].status == OrderStatus.PENDING
    assert orders[1].status in (OrderStatus.COMPLETED, OrderStatus.CANCELLED)


async def duplicate_email_scenario(unit_of_work):
    async with unit_of_work:
        await unit_of_work.users.add(make_user())
        await unit_of_work.commit()

    with pytest.raises(ConflictError):
        async with unit_of_work:
            await unit_of_work.users.add(make_user(email="JANE@example.com"))


def test_unique_email_is_conflict(tables):
    session = SessionLocal()
    try:
        asyncio.run(duplicate_email_scenario(UnitOfWorkImpl(session)))
    finally:
        session.close()
