"""Product repository interface"""

from abc import ABC, abstractmethod
from typing import Optional, List

from ..entities.product import Product
from ..value_objects.entity_ids import ProductId


class IProductRepository(ABC):

    @abstractmethod
    async def get_by_id(self, product_id: ProductId) -> Optional[Product]:
        pass

    @abstractmethod
    async def get_all(self) -> List[Product]:
        pass

    @abstractmethod
    async def get_by_category_or_model(self, term: str) -> List[Product]:
        """Products whose category or model name equals the term"""
        pass

    @abstractmethod
    async def get_by_manufacturer_phone(self, phone: str) -> List[Product]:
        pass

    @abstractmethod
    async def add(self, product: Product) -> Product:
        pass

    @abstractmethod
    async def delete(self, product_id: ProductId) -> None:
        pass
