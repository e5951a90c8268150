from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
from shared.config.database import get_db
from shared.security.dependencies import verify_internal_api_key
from .schemas import (
    OrderCreate,
    OrderHeaderResponse,
    OrderItemCreate,
    OrderItemResponse,
    OrderResponse,
    StatusUpdate,
)
from .service import OrderService

# THIS PROTECTS THE ENTIRE SERVICE
router = APIRouter(dependencies=[Depends(verify_internal_api_key)])
public_router = APIRouter()

@public_router.get("/health", include_in_schema=False)
async def health_check():
    return {"service": "order", "status": "running"}

@router.post("/", response_model=OrderHeaderResponse, status_code=status.HTTP_201_CREATED)
async def create_order(order: OrderCreate, db: AsyncSession = Depends(get_db)):
    return await OrderService.create_order(db, order)

@router.get("/", response_model=list[OrderResponse])
async def list_orders(
    user_id: Optional[int] = Query(default=None),
    limit: Optional[int] = Query(default=None, ge=1),
    db: AsyncSession = Depends(get_db)
):
    return await OrderService.list_orders(db, user_id=user_id, limit=limit)

@router.get("/{order_id}", response_model=OrderResponse)
async def get_order(order_id: int, db: AsyncSession = Depends(get_db)):
    order = await OrderService.get_order(db, order_id)
    if not order:
        raise HTTPException(status_code=404, detail="Order not found")
    return order

@router.post("/{order_id}/items", response_model=OrderItemResponse, status_code=status.HTTP_201_CREATED)
async def add_item(order_id: int, item: OrderItemCreate, db: AsyncSession = Depends(get_db)):
    return await OrderService.add_item(db, order_id, item)

@router.patch("/{order_id}/status", response_model=OrderHeaderResponse)
async def update_status(order_id: int, payload: StatusUpdate, db: AsyncSession = Depends(get_db)):
    order = await OrderService.update_status(db, order_id, payload.status)
    if not order:
        raise HTTPException(status_code=404, detail="Order not found")
    return order

@router.delete("/{order_id}/items")
async def delete_items(order_id: int, db: AsyncSession = Depends(get_db)):
    deleted = await OrderService.delete_items(db, order_id)
    return {"order_id": order_id, "deleted": deleted}

@router.delete("/{order_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_order(order_id: int, db: AsyncSession = Depends(get_db)):
    if not await OrderService.delete_order(db, order_id):
        raise HTTPException(status_code=404, detail="Order not found")
