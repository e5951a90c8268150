"""
HTTP client for the backend services (products, orders, profiles).

Every method is exactly one request/response round-trip; callers sequence
them. Non-2xx answers and transport failures are raised as BackendError
carrying the backend's own error text.
"""
from typing import Any, Optional

import httpx

from shared.config.settings import AUTH_URL, BACKEND_TIMEOUT, ORDER_URL, PRODUCT_URL
from shared.security.api_key import internal_headers

from .errors import BackendError


class BackendClient:
    def __init__(
        self,
        client: httpx.AsyncClient,
        product_url: str = PRODUCT_URL,
        order_url: str = ORDER_URL,
        auth_url: str = AUTH_URL,
    ):
        self.client = client
        self.product_url = product_url.rstrip("/")
        self.order_url = order_url.rstrip("/")
        self.auth_url = auth_url.rstrip("/")

    async def _request(self, method: str, url: str, **kwargs) -> Any:
        try:
            resp = await self.client.request(method, url, headers=internal_headers(), **kwargs)
        except httpx.HTTPError as e:
            raise BackendError.from_transport(e) from e
        if resp.is_error:
            raise BackendError.from_response(resp)
        if resp.status_code == 204 or not resp.content:
            return None
        return resp.json()

    # --- products ---

    async def list_products(self) -> list[dict]:
        return await self._request("GET", f"{self.product_url}/")

    async def get_product(self, product_id: int) -> dict:
        return await self._request("GET", f"{self.product_url}/{product_id}")

    async def get_product_stock(self, product_id: int) -> int:
        product = await self.get_product(product_id)
        return int(product["stock"])

    async def create_product(self, data: dict) -> dict:
        return await self._request("POST", f"{self.product_url}/", json=data)

    async def update_product(self, product_id: int, data: dict) -> dict:
        return await self._request("PATCH", f"{self.product_url}/{product_id}", json=data)

    async def set_product_stock(self, product_id: int, stock: int) -> dict:
        return await self.update_product(product_id, {"stock": stock})

    async def delete_product(self, product_id: int) -> None:
        await self._request("DELETE", f"{self.product_url}/{product_id}")

    async def decrement_stock(self, product_id: int, amount: int) -> int:
        """Server-side conditional decrement; 409 when stock would go negative."""
        result = await self._request(
            "POST",
            f"{self.product_url}/rpc/decrement_stock",
            json={"row_id": product_id, "amount": amount},
        )
        return int(result["stock"])

    async def restore_stock(self, product_id: int, quantity: int) -> int:
        result = await self._request(
            "POST",
            f"{self.product_url}/{product_id}/restore_stock",
            json={"quantity": quantity},
        )
        return int(result["stock"])

    # --- orders ---

    async def insert_order(
        self,
        user_id: int,
        total_amount: int,
        phone: str,
        address: str,
        payment_method: str,
    ) -> dict:
        payload = {
            "user_id": user_id,
            "total_amount": total_amount,
            "phone": phone,
            "address": address,
            "payment_method": payment_method,
        }
        return await self._request("POST", f"{self.order_url}/", json=payload)

    async def insert_order_item(self, order_id: int, product_id: int, quantity: int, price_at_time: int) -> dict:
        payload = {"product_id": product_id, "quantity": quantity, "price_at_time": price_at_time}
        return await self._request("POST", f"{self.order_url}/{order_id}/items", json=payload)

    async def get_order(self, order_id: int) -> dict:
        return await self._request("GET", f"{self.order_url}/{order_id}")

    async def list_orders(self, user_id: Optional[int] = None, limit: Optional[int] = None) -> list[dict]:
        params = {}
        if user_id is not None:
            params["user_id"] = user_id
        if limit is not None:
            params["limit"] = limit
        return await self._request("GET", f"{self.order_url}/", params=params)

    async def update_order_status(self, order_id: int, status: str) -> dict:
        return await self._request("PATCH", f"{self.order_url}/{order_id}/status", json={"status": status})

    async def delete_order_items(self, order_id: int) -> int:
        result = await self._request("DELETE", f"{self.order_url}/{order_id}/items")
        return int(result["deleted"])

    async def delete_order(self, order_id: int) -> None:
        await self._request("DELETE", f"{self.order_url}/{order_id}")

    # --- profiles ---

    async def list_profiles(self) -> list[dict]:
        return await self._request("GET", f"{self.auth_url}/profiles/")


async def get_backend():
    """FastAPI dependency: one backend client per storefront request."""
    # timeout=None: a started checkout runs until it succeeds or fails
    async with httpx.AsyncClient(timeout=BACKEND_TIMEOUT) as client:
        yield BackendClient(client)
