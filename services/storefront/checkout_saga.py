import time
from dataclasses import dataclass
from functools import partial

import structlog

from shared.observability import ecomm_checkout_duration_seconds, ecomm_checkout_total
from services.order_service.models import PaymentMethod

from .backend import BackendClient
from .cart import Cart, CartItem
from .errors import BackendError, CheckoutFailedError, CheckoutValidationError, StorefrontError
from .saga import SagaOrchestrator
from .status import delete_order_rows
from .stock import decrement_stock, validate_stock

logger = structlog.get_logger(__name__)


@dataclass
class ShippingDetails:
    phone: str
    address: str
    payment_method: PaymentMethod = PaymentMethod.COD

    def validate(self):
        if not self.phone.strip() or not self.address.strip():
            raise CheckoutValidationError("Please provide a phone number and a shipping address")


# --- ACTIONS ---

async def create_order_header(ctx: dict):
    backend, shipping = ctx["backend"], ctx["shipping"]
    order = await backend.insert_order(
        user_id=ctx["user_id"],
        total_amount=ctx["total_amount"],
        phone=shipping.phone.strip(),
        address=shipping.address.strip(),
        payment_method=shipping.payment_method.value,
    )
    ctx["order_id"] = order["id"]
    ctx["order"] = order

async def insert_order_item(line: CartItem, ctx: dict):
    # Price captured when the line entered the cart, not re-read
    item = await ctx["backend"].insert_order_item(
        ctx["order_id"], line.product_id, line.quantity, line.price
    )
    ctx["items"].append(item)

async def take_stock(line: CartItem, ctx: dict):
    ctx["stock_left"][line.product_id] = await decrement_stock(ctx["backend"], line)


# --- COMPENSATIONS (Rollbacks) ---

async def rollback_order_header(ctx: dict):
    # Also removes every line item written after the header
    order_id = ctx.get("order_id")
    if order_id:
        await delete_order_rows(ctx["backend"], order_id)

async def rollback_stock(line: CartItem, ctx: dict):
    await ctx["backend"].restore_stock(line.product_id, line.quantity)


# --- BUILDER FACTORY ---

def build_order_saga(lines: list[CartItem]) -> SagaOrchestrator:
    saga = SagaOrchestrator()
    saga.add_step("create_order", create_order_header, rollback_order_header)
    for line in lines:
        saga.add_step("insert_order_item", partial(insert_order_item, line), None) # removed with the header
        saga.add_step("decrement_stock", partial(take_stock, line), partial(rollback_stock, line))
    return saga


def checkout_context(backend: BackendClient, user_id: int, cart: Cart, shipping: ShippingDetails) -> dict:
    """Shared state handed to every saga step of one checkout."""
    return {
        "backend": backend,
        "user_id": user_id,
        "shipping": shipping,
        "total_amount": cart.total_price,
        "items": [],
        "stock_left": {},
    }


async def place_order(backend: BackendClient, user_id: int, cart: Cart, shipping: ShippingDetails) -> dict:
    """Validates stock, then writes the order, its lines, and the stock decrements.

    Runs as one sequence of awaited backend calls. On success the cart is
    cleared and the stored order (with its lines) is returned; on failure
    every completed write is compensated and CheckoutFailedError carries the
    message for the shopper.
    """
    lines = cart.items
    started = time.perf_counter()
    log = logger.bind(user_id=user_id, lines=len(lines), total_amount=cart.total_price)
    ctx = checkout_context(backend, user_id, cart, shipping)

    try:
        shipping.validate()
        await validate_stock(backend, lines)
        await build_order_saga(lines).execute(ctx)
    except StorefrontError as e:
        # Only errors raised before the first write count as a rejection
        if isinstance(e, CheckoutValidationError) and "failed_step" not in ctx:
            ecomm_checkout_total.labels(status="rejected").inc()
            log.info("checkout_rejected", reason=e.message)
        else:
            ecomm_checkout_total.labels(status="failed").inc()
            log.error(
                "checkout_failed",
                error=e.message,
                failed_step=ctx.get("failed_step"),
                compensation_failures=ctx.get("compensation_failures", []),
            )
        raise CheckoutFailedError(e) from e
    finally:
        ecomm_checkout_duration_seconds.observe(time.perf_counter() - started)

    ecomm_checkout_total.labels(status="success").inc()
    log.info("checkout_completed", order_id=ctx["order_id"], stock_left=ctx["stock_left"])

    try:
        order = await backend.get_order(ctx["order_id"])
    except BackendError as e:
        # The order is in place; only the read-back failed
        log.warning("order_readback_failed", order_id=ctx["order_id"], error=e.message)
        order = {**ctx["order"], "items": ctx["items"]}

    cart.clear()
    return order
