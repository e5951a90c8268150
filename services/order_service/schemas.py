from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field
from services.product_service.schemas import ProductResponse
from .models import OrderStatus, PaymentMethod


class OrderCreate(BaseModel):
    user_id: int
    total_amount: int = Field(ge=0)
    phone: str = Field(min_length=1)
    address: str = Field(min_length=1)
    payment_method: PaymentMethod


class OrderItemCreate(BaseModel):
    product_id: int
    quantity: int = Field(ge=1)
    price_at_time: int = Field(ge=0)


class StatusUpdate(BaseModel):
    status: OrderStatus


class OrderItemResponse(BaseModel):
    id: int
    order_id: int
    product_id: int
    quantity: int
    price_at_time: int

    class Config:
        from_attributes = True


class OrderItemDetail(OrderItemResponse):
    product: Optional[ProductResponse] = None


class OrderHeaderResponse(BaseModel):
    id: int
    user_id: int
    total_amount: int
    status: str
    phone: str
    address: str
    payment_method: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class OrderResponse(OrderHeaderResponse):
    items: List[OrderItemDetail] = []
