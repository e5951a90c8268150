"""
Administrator-side order lifecycle: status changes and permanent deletion.

Any status can follow any other (pending -> delivered -> pending is legal);
only values outside the five known states are rejected. Re-applying the
current status is a harmless no-op.
"""
import structlog

from shared.observability import ecomm_order_status_updates_total
from services.order_service.models import OrderStatus

from .backend import BackendClient
from .errors import BackendError, OrderDeleteFailedError, StatusUpdateFailedError

logger = structlog.get_logger(__name__)


def parse_status(value: str) -> OrderStatus:
    try:
        return OrderStatus(value)
    except ValueError:
        allowed = ", ".join(s.value for s in OrderStatus)
        raise StatusUpdateFailedError(f"Unknown status '{value}' (expected one of: {allowed})")


async def update_order_status(backend: BackendClient, order_id: int, status: str) -> dict:
    new_status = parse_status(status)
    try:
        order = await backend.update_order_status(order_id, new_status.value)
    except BackendError as e:
        raise StatusUpdateFailedError(e) from e

    ecomm_order_status_updates_total.labels(status=new_status.value).inc()
    logger.info("order_status_updated", order_id=order_id, status=new_status.value)
    return order


async def delete_order_rows(backend: BackendClient, order_id: int) -> int:
    """Line items first, then the header.

    If removing the items fails the header is left as it is and the error
    propagates; nothing is put back.
    """
    deleted_items = await backend.delete_order_items(order_id)
    await backend.delete_order(order_id)
    return deleted_items


async def delete_order(backend: BackendClient, order_id: int) -> int:
    try:
        deleted_items = await delete_order_rows(backend, order_id)
    except BackendError as e:
        logger.warning("order_delete_failed", order_id=order_id, error=e.message)
        raise OrderDeleteFailedError(e) from e

    logger.info("order_deleted", order_id=order_id, items=deleted_items)
    return deleted_items
