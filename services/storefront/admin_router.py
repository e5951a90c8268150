from fastapi import APIRouter, Depends, status

from shared.security import require_admin
from services.order_service.schemas import OrderHeaderResponse, OrderResponse
from services.product_service.schemas import ProductCreate, ProductResponse

from .backend import BackendClient, get_backend
from .dashboard import build_dashboard
from .errors import BackendError, ProductDeleteFailedError, ProductSaveFailedError
from .schemas import DashboardResponse, ProductPatch, StatusChange
from .status import delete_order, update_order_status

router = APIRouter(prefix="/admin", tags=["Admin"], dependencies=[Depends(require_admin)])


@router.get("/dashboard", response_model=DashboardResponse)
async def dashboard(backend: BackendClient = Depends(get_backend)):
    return await build_dashboard(backend)


# --- products ---

@router.get("/products", response_model=list[ProductResponse])
async def list_products(backend: BackendClient = Depends(get_backend)):
    return await backend.list_products()

@router.post("/products", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
async def create_product(form: ProductCreate, backend: BackendClient = Depends(get_backend)):
    try:
        return await backend.create_product(form.model_dump(mode="json"))
    except BackendError as e:
        raise ProductSaveFailedError(e) from e

@router.patch("/products/{product_id}", response_model=ProductResponse)
async def update_product(product_id: int, form: ProductPatch, backend: BackendClient = Depends(get_backend)):
    try:
        return await backend.update_product(product_id, form.model_dump(mode="json", exclude_unset=True))
    except BackendError as e:
        raise ProductSaveFailedError(e) from e

@router.delete("/products/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(product_id: int, backend: BackendClient = Depends(get_backend)):
    try:
        await backend.delete_product(product_id)
    except BackendError as e:
        raise ProductDeleteFailedError(e) from e


# --- orders ---

@router.get("/orders", response_model=list[OrderResponse])
async def list_orders(backend: BackendClient = Depends(get_backend)):
    return await backend.list_orders()

@router.patch("/orders/{order_id}/status", response_model=OrderHeaderResponse)
async def change_status(order_id: int, payload: StatusChange, backend: BackendClient = Depends(get_backend)):
    return await update_order_status(backend, order_id, payload.status)

@router.delete("/orders/{order_id}")
async def remove_order(order_id: int, backend: BackendClient = Depends(get_backend)):
    deleted_items = await delete_order(backend, order_id)
    return {"order_id": order_id, "deleted_items": deleted_items}
