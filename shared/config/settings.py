import os
from dotenv import load_dotenv

load_dotenv()


def env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


# Backend service locations (the storefront talks to these over HTTP)
PRODUCT_URL = os.getenv("PRODUCT_URL", "http://localhost:8000/products")
ORDER_URL = os.getenv("ORDER_URL", "http://localhost:8000/orders")
AUTH_URL = os.getenv("AUTH_URL", "http://localhost:8000/auth")

# None means no client-side timeout on backend round-trips
_timeout = os.getenv("BACKEND_TIMEOUT", "")
BACKEND_TIMEOUT = float(_timeout) if _timeout else None

# Read-then-write stock update used when the atomic decrement is unavailable.
# Racy under concurrent checkouts; set to false to fail the checkout instead.
STOCK_DECREMENT_FALLBACK = env_flag("STOCK_DECREMENT_FALLBACK", "true")

RATE_LIMIT_ENABLED = env_flag("RATE_LIMIT_ENABLED", "true")
CHECKOUT_RATE_LIMIT = os.getenv("CHECKOUT_RATE_LIMIT", "10/minute")

TRACING_ENABLED = env_flag("TRACING_ENABLED", "true")
OTLP_ENDPOINT = os.getenv("OTLP_ENDPOINT", "http://localhost:4317")
