"""Favourite products use cases"""

from typing import List

from ...domain.value_objects.entity_ids import UserId, ProductId
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...domain.exceptions import NotFoundError
from ...application.dtos.base import MessageResponse


class AddFavouriteUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, user_id: UserId, product_id: ProductId) -> MessageResponse:
        async with self.unit_of_work:
            user = await self.unit_of_work.users.get_by_id(user_id)
            if not user:
                raise NotFoundError("User not found")

            product = await self.unit_of_work.products.get_by_id(product_id)
            if not product:
                raise NotFoundError("Product not found")

            user.add_favourite(product.id)
            await self.unit_of_work.users.update(user)
            await self.unit_of_work.commit()

        return MessageResponse(message="Product added to favorites")


class RemoveFavouriteUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, user_id: UserId, product_id: ProductId) -> MessageResponse:
        """Idempotent: succeeds whether or not the product was a favourite"""
        async with self.unit_of_work:
            user = await self.unit_of_work.users.get_by_id(user_id)
            if not user:
                raise NotFoundError("User not found")

            user.remove_favourite(product_id)
            await self.unit_of_work.users.update(user)
            await self.unit_of_work.commit()

        return MessageResponse(message="Product removed from favorites")


class ListFavouritesUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, user_id: UserId) -> List[str]:
        """Raw product ids; resolving them to products is up to the caller"""
        async with self.unit_of_work:
            user = await self.unit_of_work.users.get_by_id(user_id)
            if not user:
                raise NotFoundError("User not found")

            return sorted(str(product_id) for product_id in user.favourites)
