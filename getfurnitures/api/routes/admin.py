"""Admin routes: product management and the order queue"""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status

from ...api.dependencies import (
    get_unit_of_work, get_current_admin, get_storage_service, get_notification_dispatcher
)
from ...application.use_cases.add_product import AddProductUseCase
from ...application.use_cases.delete_product import DeleteProductUseCase
from ...application.use_cases.list_products import ListAdminProductsUseCase, ListProductsByManufacturerUseCase
from ...application.use_cases.list_orders import ListOrdersUseCase
from ...application.use_cases.manage_orders import CompleteOrderUseCase, AdvanceOrderUseCase
from ...application.dtos.base import MessageResponse
from ...application.dtos.product_dtos import (
    ProductCreateDto, UploadedImage, AdminProductDto, ProductCreatedResponse
)
from ...application.dtos.order_dtos import AdminOrderDto, OrderStatusUpdateDto, OrderStatusResponse
from ...domain.enums import OrderListScope
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...domain.value_objects.entity_ids import ProductId, OrderId
from ...infrastructure.external_services.storage_service import StorageService
from ...infrastructure.external_services.notification_dispatcher import NotificationDispatcher

router = APIRouter(dependencies=[Depends(get_current_admin)])


@router.post("/add-product", response_model=ProductCreatedResponse, status_code=status.HTTP_201_CREATED)
async def add_product(
    model_name: Optional[str] = Form(None, alias="modelName"),
    category: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    min_price: Optional[float] = Form(None, alias="minPrice"),
    max_price: Optional[float] = Form(None, alias="maxPrice"),
    manufacturer_name: Optional[str] = Form(None, alias="manufacturerName"),
    manufacturer_phone: Optional[str] = Form(None, alias="manufacturerPhone"),
    factory_name: Optional[str] = Form(None, alias="factoryName"),
    images: List[UploadFile] = File(default=[]),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
    storage_service: StorageService = Depends(get_storage_service)
):
    """Create a product from multipart form fields and up to five images"""
    request = ProductCreateDto(
        model_name=model_name,
        category=category,
        description=description,
        min_price=min_price,
        max_price=max_price,
        manufacturer_name=manufacturer_name,
        manufacturer_phone=manufacturer_phone,
        factory_name=factory_name
    )

    uploaded = []
    for image in images:
        uploaded.append(UploadedImage(
            filename=image.filename or "",
            content_type=image.content_type or "",
            content=await image.read()
        ))

    use_case = AddProductUseCase(unit_of_work, storage_service)
    return await use_case.execute(request, uploaded)


@router.delete("/delete-product/{product_id}", response_model=MessageResponse)
async def delete_product(
    product_id: UUID,
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
    storage_service: StorageService = Depends(get_storage_service)
):
    use_case = DeleteProductUseCase(unit_of_work, storage_service)
    return await use_case.execute(ProductId(product_id))


@router.get("/get-all-products", response_model=List[AdminProductDto])
async def get_all_products(unit_of_work: IUnitOfWork = Depends(get_unit_of_work)):
    use_case = ListAdminProductsUseCase(unit_of_work)
    return await use_case.execute()


@router.get("/products-man/{phone}", response_model=List[AdminProductDto])
async def get_products_by_manufacturer(
    phone: str,
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    use_case = ListProductsByManufacturerUseCase(unit_of_work)
    return await use_case.execute(phone)


@router.get("/getallorders", response_model=List[AdminOrderDto])
async def get_all_orders(
    scope: OrderListScope = Query(OrderListScope.PENDING),
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    """Order queue, pending only unless a wider scope is asked for"""
    use_case = ListOrdersUseCase(unit_of_work)
    return await use_case.execute(scope)


@router.get("/completeorder/{order_id}", response_model=OrderStatusResponse)
async def complete_order(
    order_id: UUID,
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
    notifier: NotificationDispatcher = Depends(get_notification_dispatcher)
):
    use_case = CompleteOrderUseCase(unit_of_work, notifier)
    return await use_case.execute(OrderId(order_id))


@router.patch("/order-status/{order_id}", response_model=OrderStatusResponse)
async def update_order_status(
    order_id: UUID,
    request: OrderStatusUpdateDto,
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
    notifier: NotificationDispatcher = Depends(get_notification_dispatcher)
):
    use_case = AdvanceOrderUseCase(unit_of_work, notifier)
    return await use_case.execute(OrderId(order_id), request.status)
