from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field
from .models import ProductCategory


class ProductCreate(BaseModel):
    name: str = Field(min_length=1)
    description: str = ""
    price: int = Field(ge=0)
    stock: int = Field(default=0, ge=0)
    category: ProductCategory = ProductCategory.PAPER
    image_url: str = ""


class ProductUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    price: Optional[int] = Field(default=None, ge=0)
    # No lower bound: the read-then-write stock fallback may write a negative value
    stock: Optional[int] = None
    category: Optional[ProductCategory] = None
    image_url: Optional[str] = None


class StockUpdate(BaseModel):
    quantity: int = Field(gt=0)


class StockDecrement(BaseModel):
    row_id: int
    amount: int = Field(gt=0)


class ProductResponse(BaseModel):
    id: int
    name: str
    description: str
    price: int
    stock: int
    category: str
    image_url: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
