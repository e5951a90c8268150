import itertools

import pytest

from services.order_service.models import OrderStatus
from services.storefront.errors import BackendError, OrderDeleteFailedError, StatusUpdateFailedError
from services.storefront.status import delete_order, update_order_status


@pytest.fixture
async def order_with_items(backend, make_product):
    order = await backend.insert_order(7, 0, "0813", "Jl. Diponegoro 3", "cod")
    for n in range(3):
        product = await make_product(name=f"Produk {n}", price=1000)
        await backend.insert_order_item(order["id"], product["id"], 1, 1000)
    return order


async def test_every_transition_is_allowed(backend, order_with_items):
    order_id = order_with_items["id"]
    states = [s.value for s in OrderStatus]
    for current, target in itertools.product(states, states):
        await update_order_status(backend, order_id, current)
        updated = await update_order_status(backend, order_id, target)
        assert updated["status"] == target


async def test_repeating_a_status_is_a_no_op(backend, order_with_items):
    order_id = order_with_items["id"]
    first = await update_order_status(backend, order_id, "shipped")
    second = await update_order_status(backend, order_id, "shipped")
    assert first["status"] == second["status"] == "shipped"
    assert (await backend.get_order(order_id))["status"] == "shipped"


async def test_unknown_status_is_rejected(backend, order_with_items):
    with pytest.raises(StatusUpdateFailedError, match="Failed to update status: Unknown status 'lost'"):
        await update_order_status(backend, order_with_items["id"], "lost")
    assert (await backend.get_order(order_with_items["id"]))["status"] == "pending"


async def test_status_of_missing_order(backend):
    with pytest.raises(StatusUpdateFailedError) as exc_info:
        await update_order_status(backend, 4040, "processing")
    assert exc_info.value.status_code == 404
    assert str(exc_info.value) == "Failed to update status: Order not found"


async def test_delete_removes_items_then_order(backend, order_with_items):
    order_id = order_with_items["id"]
    assert len((await backend.get_order(order_id))["items"]) == 3

    assert await delete_order(backend, order_id) == 3

    with pytest.raises(BackendError) as exc_info:
        await backend.get_order(order_id)
    assert exc_info.value.backend_status == 404


async def test_failed_item_deletion_leaves_order_intact(backend, order_with_items, monkeypatch):
    async def broken(order_id):
        raise BackendError(500, "permission denied for table order_items")

    monkeypatch.setattr(backend, "delete_order_items", broken)

    with pytest.raises(OrderDeleteFailedError, match="Failed to delete order: permission denied"):
        await delete_order(backend, order_with_items["id"])

    stored = await backend.get_order(order_with_items["id"])
    assert len(stored["items"]) == 3
