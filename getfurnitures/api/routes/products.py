"""Catalog routes, open to any signed-in user or admin"""

from typing import List

from fastapi import APIRouter, Depends

from ...api.dependencies import get_unit_of_work, get_current_principal
from ...application.use_cases.list_products import ListProductsUseCase, ListProductsByCategoryUseCase
from ...application.dtos.product_dtos import CatalogProductDto
from ...domain.repositories.unit_of_work import IUnitOfWork

router = APIRouter(dependencies=[Depends(get_current_principal)])


@router.get("/products", response_model=List[CatalogProductDto])
async def list_products(unit_of_work: IUnitOfWork = Depends(get_unit_of_work)):
    use_case = ListProductsUseCase(unit_of_work)
    return await use_case.execute()


@router.get("/products/{category}", response_model=List[CatalogProductDto])
async def list_products_by_category(
    category: str,
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    """Products whose category or model name equals the path value"""
    use_case = ListProductsByCategoryUseCase(unit_of_work)
    return await use_case.execute(category)
