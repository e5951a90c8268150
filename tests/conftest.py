import os
import tempfile

# Configuration is read at import time, so it has to be in place first
_DB_DIR = tempfile.mkdtemp(prefix="storefront-tests-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_DB_DIR}/storefront.db"
os.environ["JWT_SECRET_KEY"] = "test-jwt-secret"
os.environ["INTERNAL_API_KEY"] = "test-internal-key"
os.environ["TRACING_ENABLED"] = "false"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["PRODUCT_URL"] = "http://backend/products"
os.environ["ORDER_URL"] = "http://backend/orders"
os.environ["AUTH_URL"] = "http://backend/auth"

import httpx
import pytest

from main import app
from shared.config.database import Base, engine
from shared.security import create_profile_token
from services.storefront.backend import BackendClient, get_backend
from services.storefront.main import storefront_app

INTERNAL_HEADERS = {"X-Internal-API-Key": "test-internal-key"}


@pytest.fixture
async def database():
    """Fresh schema per test."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def http(database):
    """In-process client for the whole cluster (backend services + storefront)."""
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://backend") as client:
        yield client


@pytest.fixture
def backend(http):
    return BackendClient(http)


@pytest.fixture
def storefront(http, backend):
    """Storefront API whose backend calls go through the in-process client."""
    async def _backend():
        yield backend

    storefront_app.dependency_overrides[get_backend] = _backend
    yield http
    storefront_app.dependency_overrides.clear()


@pytest.fixture
def buyer_headers():
    return {"Authorization": f"Bearer {create_profile_token(7, 'buyer')}"}


@pytest.fixture
def admin_headers():
    return {"Authorization": f"Bearer {create_profile_token(1, 'admin')}"}


@pytest.fixture
def make_product(backend):
    async def _make(name="Kertas HVS A4", price=10000, stock=10, category="Kertas"):
        return await backend.create_product(
            {"name": name, "price": price, "stock": stock, "category": category}
        )
    return _make
