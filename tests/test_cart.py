import pytest

from services.storefront.cart import Cart, CartItem

PAPER = {"id": 1, "name": "Kertas HVS A4", "price": 10000, "stock": 10, "category": "Kertas"}
PEN = {"id": 2, "name": "Pulpen Hitam", "price": 5000, "stock": 3, "category": "Pena & Pensil"}


def test_total_is_sum_of_line_subtotals():
    cart = Cart()
    cart.add(PAPER, 2)
    cart.add(PEN)
    assert cart.total_price == 25000
    assert cart.total_items == 3


def test_adding_same_product_merges_lines():
    cart = Cart()
    cart.add(PAPER)
    cart.add(PAPER, 2)
    assert len(cart) == 1
    assert cart.items[0].quantity == 3


def test_line_keeps_price_snapshot():
    product = dict(PAPER)
    cart = Cart()
    cart.add(product)
    product["price"] = 99999
    assert cart.items[0].price == 10000


def test_update_quantity_and_remove_below_one():
    cart = Cart()
    cart.add(PAPER)
    cart.add(PEN)
    cart.update_quantity(1, 4)
    assert cart.items[0].quantity == 4
    cart.update_quantity(2, 0)
    assert [i.product_id for i in cart] == [1]


def test_update_unknown_product_raises():
    with pytest.raises(KeyError):
        Cart().update_quantity(42, 1)


def test_rejects_non_positive_quantity():
    with pytest.raises(ValueError):
        Cart().add(PAPER, 0)


def test_clear_and_remove():
    cart = Cart([CartItem(product_id=1, name="A", price=1, quantity=1)])
    cart.remove(99)
    assert not cart.is_empty()
    cart.clear()
    assert cart.is_empty()
    assert cart.total_price == 0
