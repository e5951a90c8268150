"""
Stock validation before checkout and stock decrement during it.

Validation is a plain read per line with no reservation: two shoppers can
both pass it for the last unit. The backend's conditional decrement is what
finally decides who gets the stock.
"""
from typing import Iterable

import structlog

from shared.config.settings import STOCK_DECREMENT_FALLBACK
from shared.observability import ecomm_stock_fallback_total

from .backend import BackendClient
from .cart import CartItem
from .errors import BackendError, CheckoutValidationError, InsufficientStockError, ProductUnavailableError

logger = structlog.get_logger(__name__)


async def validate_stock(backend: BackendClient, lines: Iterable[CartItem]):
    lines = list(lines)
    if not lines:
        raise CheckoutValidationError("Cart is empty")

    for line in lines:
        if line.quantity < 1:
            raise CheckoutValidationError(f"Invalid quantity for {line.name}")
        try:
            stock = await backend.get_product_stock(line.product_id)
        except BackendError as e:
            raise ProductUnavailableError(f"Could not verify stock for {line.name}") from e
        if stock < line.quantity:
            raise InsufficientStockError(line.name, stock)


async def decrement_stock(
    backend: BackendClient,
    line: CartItem,
    allow_fallback: bool | None = None,
) -> int:
    """Takes ``line.quantity`` units off the product's stock and returns what is left."""
    if allow_fallback is None:
        allow_fallback = STOCK_DECREMENT_FALLBACK
    try:
        return await backend.decrement_stock(line.product_id, line.quantity)
    except BackendError as e:
        # 409 is the procedure refusing to go below zero: never bypass it
        if e.backend_status == 409:
            raise InsufficientStockError(line.name, message=e.message) from e
        if not allow_fallback:
            raise
        logger.warning(
            "stock_decrement_fallback",
            product_id=line.product_id,
            quantity=line.quantity,
            reason=e.message,
        )

    # Read-then-write: not atomic, concurrent checkouts can push stock below zero
    ecomm_stock_fallback_total.inc()
    current = await backend.get_product_stock(line.product_id)
    remaining = current - line.quantity
    await backend.set_product_stock(line.product_id, remaining)
    return remaining
