from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from .models import Order, OrderItem


class OrderRepository:
    @staticmethod
    async def create_order(db: AsyncSession, order: Order) -> Order:
        db.add(order)
        await db.commit()
        await db.refresh(order)
        return order

    @staticmethod
    async def add_item(db: AsyncSession, item: OrderItem) -> OrderItem:
        db.add(item)
        await db.commit()
        await db.refresh(item)
        return item

    @staticmethod
    async def get_order(db: AsyncSession, order_id: int) -> Optional[Order]:
        result = await db.execute(select(Order).where(Order.id == order_id))
        return result.scalars().first()

    @staticmethod
    async def list_orders(db: AsyncSession, user_id: Optional[int] = None, limit: Optional[int] = None):
        stmt = select(Order).order_by(Order.created_at.desc(), Order.id.desc())
        if user_id is not None:
            stmt = stmt.where(Order.user_id == user_id)
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await db.execute(stmt)
        return result.scalars().all()

    @staticmethod
    async def update_status(db: AsyncSession, order_id: int, status: str) -> Optional[Order]:
        order = await OrderRepository.get_order(db, order_id)
        if not order:
            return None

        order.status = status

        await db.commit()
        await db.refresh(order)
        return order

    @staticmethod
    async def delete_items(db: AsyncSession, order_id: int) -> int:
        result = await db.execute(delete(OrderItem).where(OrderItem.order_id == order_id))
        await db.commit()
        return result.rowcount

    @staticmethod
    async def delete_order(db: AsyncSession, order_id: int) -> bool:
        result = await db.execute(delete(Order).where(Order.id == order_id))
        await db.commit()
        return result.rowcount > 0
