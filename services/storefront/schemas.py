from typing import List, Optional
from pydantic import BaseModel, Field

from services.auth_service.schemas import ProfileResponse
from services.order_service.models import PaymentMethod
from services.order_service.schemas import OrderResponse
from services.product_service.schemas import ProductUpdate

from .cart import Cart, CartItem


class CartLine(BaseModel):
    product_id: int
    name: str
    price: int = Field(ge=0)
    quantity: int = Field(ge=1)
    category: str = ""
    image_url: str = ""


class CheckoutRequest(BaseModel):
    items: List[CartLine] = []
    phone: str = ""
    address: str = ""
    payment_method: PaymentMethod = PaymentMethod.COD

    def to_cart(self) -> Cart:
        return Cart([CartItem(**line.model_dump()) for line in self.items])


class StatusChange(BaseModel):
    # Plain string so unknown values get the storefront's own message
    status: str


class ProductPatch(ProductUpdate):
    # Admins may not set a negative stock; only the decrement fallback can
    stock: Optional[int] = Field(default=None, ge=0)


class DashboardResponse(BaseModel):
    total_products: int
    total_orders: int
    total_revenue: int
    total_users: int
    recent_orders: List[OrderResponse]
    customers: List[ProfileResponse]
