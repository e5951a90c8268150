from fastapi import HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from .models import Product
from .repository import ProductRepository
from .schemas import ProductCreate, ProductUpdate

class ProductService:

    @staticmethod
    async def create_product(db: AsyncSession, data: ProductCreate):
        product = Product(**data.model_dump(mode="json"))
        return await ProductRepository.create_product(db, product)

    @staticmethod
    async def list_products(db: AsyncSession):
        return await ProductRepository.get_all_products(db)

    @staticmethod
    async def get_product_by_id(db: AsyncSession, product_id: int):
        return await ProductRepository.get_product_by_id(db, product_id)

    @staticmethod
    async def update_product(db: AsyncSession, product_id: int, data: ProductUpdate):
        product = await ProductRepository.get_product_by_id(db, product_id)
        if not product:
            return None
        for field, value in data.model_dump(mode="json", exclude_unset=True).items():
            setattr(product, field, value)
        return await ProductRepository.update_product(db, product)

    @staticmethod
    async def delete_product(db: AsyncSession, product_id: int) -> bool:
        # Order lines keep a reference to the product forever
        if await ProductRepository.is_referenced(db, product_id):
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="Product has already been ordered by a customer",
            )
        return await ProductRepository.delete_product(db, product_id)

    @staticmethod
    async def decrement_stock(db: AsyncSession, product_id: int, amount: int) -> int:
        new_stock = await ProductRepository.decrement_stock(db, product_id, amount)
        if new_stock is not None:
            return new_stock

        product = await ProductRepository.get_product_by_id(db, product_id)
        if not product:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found")
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Insufficient stock for {product.name}. Remaining: {product.stock}",
        )

    @staticmethod
    async def restore_stock(db: AsyncSession, product_id: int, quantity: int):
        return await ProductRepository.restore_stock(db, product_id, quantity)
