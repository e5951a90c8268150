from fastapi import FastAPI
from shared.config.database import engine, Base
from shared.observability import setup_observability
from .router import router, public_router
from .models import Product  # noqa: F401 registers the table with Base

product_app = FastAPI(
    title="Product Service",
    version="1.0.0"
)

# --- OBSERVABILITY BOOTSTRAP ---
setup_observability(product_app, "product_service")

product_app.include_router(public_router)
product_app.include_router(router)

@product_app.on_event("startup")
async def startup_event():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
