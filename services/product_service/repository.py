from typing import Optional

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from services.order_service.models import OrderItem
from .models import Product


class ProductRepository:

    @staticmethod
    async def create_product(db: AsyncSession, product: Product) -> Product:
        db.add(product)
        await db.commit()
        await db.refresh(product)
        return product

    @staticmethod
    async def get_all_products(db: AsyncSession):
        result = await db.execute(
            select(Product).order_by(Product.created_at.desc(), Product.id.desc())
        )
        return result.scalars().all()

    @staticmethod
    async def get_product_by_id(db: AsyncSession, product_id: int) -> Optional[Product]:
        result = await db.execute(select(Product).where(Product.id == product_id))
        return result.scalars().first()

    @staticmethod
    async def update_product(db: AsyncSession, product: Product) -> Product:
        db.add(product)
        await db.commit()
        await db.refresh(product)
        return product

    @staticmethod
    async def delete_product(db: AsyncSession, product_id: int) -> bool:
        result = await db.execute(delete(Product).where(Product.id == product_id))
        await db.commit()
        return result.rowcount > 0

    @staticmethod
    async def is_referenced(db: AsyncSession, product_id: int) -> bool:
        result = await db.execute(
            select(OrderItem.id).where(OrderItem.product_id == product_id).limit(1)
        )
        return result.first() is not None

    @staticmethod
    async def decrement_stock(db: AsyncSession, product_id: int, amount: int) -> Optional[int]:
        """Conditional decrement in one UPDATE; returns the new stock or None when refused."""
        result = await db.execute(
            update(Product)
            .where(Product.id == product_id, Product.stock >= amount)
            .values(stock=Product.stock - amount)
        )
        if result.rowcount == 0:
            await db.rollback()
            return None
        new_stock = await db.scalar(select(Product.stock).where(Product.id == product_id))
        await db.commit()
        return new_stock

    @staticmethod
    async def restore_stock(db: AsyncSession, product_id: int, quantity: int) -> Optional[int]:
        result = await db.execute(
            update(Product)
            .where(Product.id == product_id)
            .values(stock=Product.stock + quantity)
        )
        if result.rowcount == 0:
            await db.rollback()
            return None
        new_stock = await db.scalar(select(Product.stock).where(Product.id == product_id))
        await db.commit()
        return new_stock
