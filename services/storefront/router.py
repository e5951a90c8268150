from typing import Optional
from fastapi import APIRouter, Depends, Query, Request, status

from shared.config.settings import CHECKOUT_RATE_LIMIT
from shared.security import get_current_user, limiter, require_buyer
from services.order_service.schemas import OrderResponse
from services.product_service.schemas import ProductResponse

from .backend import BackendClient, get_backend
from .catalog import filter_products
from .checkout_saga import ShippingDetails, place_order
from .schemas import CheckoutRequest

router = APIRouter()

@router.get("/health")
async def health_check():
    return {"service": "storefront", "status": "running"}

@router.get("/products", response_model=list[ProductResponse])
async def list_catalog(
    search: Optional[str] = Query(default=None),
    category: Optional[str] = Query(default=None),
    backend: BackendClient = Depends(get_backend),
):
    products = await backend.list_products()
    return filter_products(products, search=search, category=category)

@router.get("/products/{product_id}", response_model=ProductResponse)
async def get_catalog_product(product_id: int, backend: BackendClient = Depends(get_backend)):
    return await backend.get_product(product_id)

@router.post("/checkout", response_model=OrderResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(CHECKOUT_RATE_LIMIT)
async def checkout(
    request: Request,                          # REQUIRED: slowapi needs this to check IP/Headers
    payload: CheckoutRequest,
    user_id: str = Depends(require_buyer),
    backend: BackendClient = Depends(get_backend),
):
    shipping = ShippingDetails(
        phone=payload.phone,
        address=payload.address,
        payment_method=payload.payment_method,
    )
    return await place_order(backend, int(user_id), payload.to_cart(), shipping)

@router.get("/orders", response_model=list[OrderResponse])
async def my_orders(
    user_id: str = Depends(get_current_user),
    backend: BackendClient = Depends(get_backend),
):
    return await backend.list_orders(user_id=int(user_id))
