"""Catalog listing use cases"""

from typing import List

from ...domain.repositories.unit_of_work import IUnitOfWork
from ...application.dtos.product_dtos import CatalogProductDto, AdminProductDto


class ListProductsUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self) -> List[CatalogProductDto]:
        async with self.unit_of_work:
            products = await self.unit_of_work.products.get_all()
            return [CatalogProductDto.from_entity(p) for p in products]


class ListProductsByCategoryUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, term: str) -> List[CatalogProductDto]:
        """Matches the category or the exact model name"""
        async with self.unit_of_work:
            products = await self.unit_of_work.products.get_by_category_or_model(term)
            return [CatalogProductDto.from_entity(p) for p in products]


class ListAdminProductsUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self) -> List[AdminProductDto]:
        async with self.unit_of_work:
            products = await self.unit_of_work.products.get_all()
            return [AdminProductDto.from_entity(p) for p in products]


class ListProductsByManufacturerUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, phone: str) -> List[AdminProductDto]:
        async with self.unit_of_work:
            products = await self.unit_of_work.products.get_by_manufacturer_phone(phone)
            return [AdminProductDto.from_entity(p) for p in products]
