from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from shared.observability import setup_observability
from shared.security import limiter

from .admin_router import router as admin_router
from .errors import StorefrontError
from .router import router

storefront_app = FastAPI(
    title="Storefront",
    version="1.0.0",
    description="Catalog, checkout and back-office for the office-supplies shop.",
)

# --- OBSERVABILITY BOOTSTRAP ---
setup_observability(storefront_app, "storefront")

# --- SECURITY SETUP ---
storefront_app.state.limiter = limiter
storefront_app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


@storefront_app.exception_handler(StorefrontError)
async def storefront_error_handler(request: Request, exc: StorefrontError):
    # One transient message per failed action; nothing is retried
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


storefront_app.include_router(router)
storefront_app.include_router(admin_router)
