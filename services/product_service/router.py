from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from shared.config.database import get_db
from shared.security.dependencies import verify_internal_api_key
from .schemas import ProductCreate, ProductResponse, ProductUpdate, StockDecrement, StockUpdate
from .service import ProductService

router = APIRouter(dependencies=[Depends(verify_internal_api_key)])
public_router = APIRouter()  # For any public endpoints (e.g. health check)

@public_router.get("/health", include_in_schema=False)
async def health_check():
    return {"service": "product", "status": "running"}


@router.post("/", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
async def create_product(product: ProductCreate, db: AsyncSession = Depends(get_db)):
    return await ProductService.create_product(db, product)

@router.get("/", response_model=list[ProductResponse])
async def list_products(db: AsyncSession = Depends(get_db)):
    return await ProductService.list_products(db)

# Stored-procedure style endpoint; declared before /{product_id} routes
@router.post("/rpc/decrement_stock")
async def decrement_stock(payload: StockDecrement, db: AsyncSession = Depends(get_db)):
    new_stock = await ProductService.decrement_stock(db, payload.row_id, payload.amount)
    return {"id": payload.row_id, "stock": new_stock}

@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: int, db: AsyncSession = Depends(get_db)):
    product = await ProductService.get_product_by_id(db, product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product

@router.patch("/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: int,
    payload: ProductUpdate,
    db: AsyncSession = Depends(get_db)
):
    product = await ProductService.update_product(db, product_id, payload)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product

@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(product_id: int, db: AsyncSession = Depends(get_db)):
    if not await ProductService.delete_product(db, product_id):
        raise HTTPException(status_code=404, detail="Product not found")

# Saga compensation for a decrement that already went through
@router.post("/{product_id}/restore_stock")
async def restore_stock(product_id: int, payload: StockUpdate, db: AsyncSession = Depends(get_db)):
    new_stock = await ProductService.restore_stock(db, product_id, payload.quantity)
    if new_stock is None:
        raise HTTPException(status_code=404, detail="Product not found")
    return {"id": product_id, "stock": new_stock}
