from fastapi import FastAPI
from shared.config.database import engine, Base

# IMPORTANT: import models so they register with Base
from services.product_service import models as product_models  # noqa: F401
from services.order_service import models as order_models  # noqa: F401
from services.auth_service import models as auth_models  # noqa: F401

from services.product_service.main import product_app
from services.order_service.main import order_app
from services.auth_service.main import auth_app
from services.storefront.main import storefront_app

app = FastAPI(title="Office Supply Storefront")

@app.on_event("startup")
async def startup_event():
    # Mounted sub-apps do not get their own startup events
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

app.mount("/products", product_app)
app.mount("/orders", order_app)
app.mount("/auth", auth_app)
app.mount("/store", storefront_app)
