"""
Client-held shopping cart.

A cart belongs to exactly one shopper session and is only ever touched by
that session, so it is a plain in-memory structure without locking. Each
line keeps the product snapshot taken when it was added; that price is the
one written to the order as ``price_at_time``.
"""
from dataclasses import dataclass, field
from typing import Iterator, Mapping


@dataclass
class CartItem:
    product_id: int
    name: str
    price: int
    quantity: int = 1
    category: str = ""
    image_url: str = ""
    stock: int | None = field(default=None, compare=False)

    @property
    def subtotal(self) -> int:
        return self.price * self.quantity

    @classmethod
    def from_product(cls, product: Mapping, quantity: int = 1) -> "CartItem":
        return cls(
            product_id=int(product["id"]),
            name=product["name"],
            price=int(product["price"]),
            quantity=quantity,
            category=product.get("category", ""),
            image_url=product.get("image_url", ""),
            stock=product.get("stock"),
        )


class Cart:
    def __init__(self, items: list[CartItem] | None = None):
        self._items: dict[int, CartItem] = {}
        for item in items or []:
            self._put(item)

    def _put(self, item: CartItem):
        if item.quantity < 1:
            raise ValueError("Invalid Quantity.")
        existing = self._items.get(item.product_id)
        if existing:
            existing.quantity += item.quantity
        else:
            self._items[item.product_id] = item

    def add(self, product: Mapping, quantity: int = 1) -> CartItem:
        """Adds a product snapshot, merging with an existing line for the same product."""
        self._put(CartItem.from_product(product, quantity))
        return self._items[int(product["id"])]

    def update_quantity(self, product_id: int, quantity: int):
        # Dropping below one unit removes the line
        if quantity < 1:
            self.remove(product_id)
            return
        if product_id not in self._items:
            raise KeyError(f"Product {product_id} is not in the cart")
        self._items[product_id].quantity = quantity

    def remove(self, product_id: int):
        self._items.pop(product_id, None)

    def clear(self):
        self._items.clear()

    @property
    def items(self) -> list[CartItem]:
        return list(self._items.values())

    @property
    def total_price(self) -> int:
        return sum(item.subtotal for item in self._items.values())

    @property
    def total_items(self) -> int:
        return sum(item.quantity for item in self._items.values())

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[CartItem]:
        return iter(self.items)
