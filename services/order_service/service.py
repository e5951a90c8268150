from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from .models import Order, OrderItem, OrderStatus
from .repository import OrderRepository
from .schemas import OrderCreate, OrderItemCreate

class OrderService:
    @staticmethod
    async def create_order(db: AsyncSession, data: OrderCreate):
        # Every order starts its life as pending
        order = Order(
            **data.model_dump(mode="json"),
            status=OrderStatus.PENDING.value,
        )
        return await OrderRepository.create_order(db, order)

    @staticmethod
    async def add_item(db: AsyncSession, order_id: int, data: OrderItemCreate):
        if not await OrderRepository.get_order(db, order_id):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Order not found")
        item = OrderItem(order_id=order_id, **data.model_dump())
        try:
            return await OrderRepository.add_item(db, item)
        except IntegrityError:
            await db.rollback()
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=f"Product {data.product_id} does not exist",
            )

    @staticmethod
    async def get_order(db: AsyncSession, order_id: int):
        return await OrderRepository.get_order(db, order_id)

    @staticmethod
    async def list_orders(db: AsyncSession, user_id: int | None = None, limit: int | None = None):
        return await OrderRepository.list_orders(db, user_id=user_id, limit=limit)

    @staticmethod
    async def update_status(db: AsyncSession, order_id: int, new_status: OrderStatus):
        return await OrderRepository.update_status(db, order_id, new_status.value)

    @staticmethod
    async def delete_items(db: AsyncSession, order_id: int) -> int:
        return await OrderRepository.delete_items(db, order_id)

    @staticmethod
    async def delete_order(db: AsyncSession, order_id: int) -> bool:
        try:
            return await OrderRepository.delete_order(db, order_id)
        except IntegrityError:
            await db.rollback()
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="Order still has line items; delete them first",
            )
