"""Favourite product routes"""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends

from ...api.dependencies import get_unit_of_work, get_current_user
from ...application.use_cases.favourites import (
    AddFavouriteUseCase, RemoveFavouriteUseCase, ListFavouritesUseCase
)
from ...application.dtos.base import MessageResponse
from ...domain.entities.user import User
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...domain.value_objects.entity_ids import ProductId

router = APIRouter()


@router.post("/add-to-favourites/{product_id}", response_model=MessageResponse)
async def add_to_favourites(
    product_id: UUID,
    current_user: User = Depends(get_current_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    use_case = AddFavouriteUseCase(unit_of_work)
    return await use_case.execute(current_user.id, ProductId(product_id))


@router.delete("/remove-from-favourites/{product_id}", response_model=MessageResponse)
async def remove_from_favourites(
    product_id: UUID,
    current_user: User = Depends(get_current_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    use_case = RemoveFavouriteUseCase(unit_of_work)
    return await use_case.execute(current_user.id, ProductId(product_id))


@router.get("/favourites", response_model=List[str])
async def list_favourites(
    current_user: User = Depends(get_current_user),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    """Product ids only"""
    use_case = ListFavouritesUseCase(unit_of_work)
    return await use_case.execute(current_user.id)
