from fastapi import FastAPI

from shared.config.database import Base, engine
from shared.observability import setup_observability

from .models import Profile  # noqa: F401 registers the table with Base
from .router import router, internal_router, public_router

auth_app = FastAPI(
    title="Auth Service",
    version="2.0.0",
    description="Profiles and JWT authentication: register, login, roles.",
)

setup_observability(auth_app, "auth_service")

auth_app.include_router(router)
auth_app.include_router(internal_router)
auth_app.include_router(public_router)

@auth_app.on_event("startup")
async def startup_event() -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
