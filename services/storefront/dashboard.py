import asyncio

from services.order_service.models import OrderStatus

from .backend import BackendClient

RECENT_ORDERS = 5


def revenue(orders: list[dict]) -> int:
    # Cancelled orders never count towards revenue
    return sum(o["total_amount"] for o in orders if o["status"] != OrderStatus.CANCELLED.value)


async def build_dashboard(backend: BackendClient) -> dict:
    products, orders, profiles = await asyncio.gather(
        backend.list_products(),
        backend.list_orders(),
        backend.list_profiles(),
    )
    return {
        "total_products": len(products),
        "total_orders": len(orders),
        "total_revenue": revenue(orders),
        "total_users": len(profiles),
        "recent_orders": orders[:RECENT_ORDERS],
        "customers": profiles,
    }
