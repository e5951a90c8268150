from conftest import INTERNAL_HEADERS


async def test_requires_internal_api_key(http):
    resp = await http.get("/products/")
    assert resp.status_code == 403

    resp = await http.get("/products/health")
    assert resp.json() == {"service": "product", "status": "running"}


async def test_create_list_and_get(http):
    resp = await http.post(
        "/products/",
        json={"name": "Map Arsip", "price": 7500, "stock": 4, "category": "Arsip"},
        headers=INTERNAL_HEADERS,
    )
    assert resp.status_code == 201
    created = resp.json()
    assert created["category"] == "Arsip"
    assert created["description"] == ""

    listed = (await http.get("/products/", headers=INTERNAL_HEADERS)).json()
    assert [p["id"] for p in listed] == [created["id"]]

    resp = await http.get(f"/products/{created['id']}", headers=INTERNAL_HEADERS)
    assert resp.json()["stock"] == 4


async def test_unknown_category_is_rejected(http):
    resp = await http.post(
        "/products/",
        json={"name": "Gunting", "price": 8000, "category": "Perkakas"},
        headers=INTERNAL_HEADERS,
    )
    assert resp.status_code == 422


async def test_decrement_refuses_to_go_negative(http, make_product):
    product = await make_product(stock=2)

    resp = await http.post(
        "/products/rpc/decrement_stock",
        json={"row_id": product["id"], "amount": 2},
        headers=INTERNAL_HEADERS,
    )
    assert resp.json()["stock"] == 0

    resp = await http.post(
        "/products/rpc/decrement_stock",
        json={"row_id": product["id"], "amount": 1},
        headers=INTERNAL_HEADERS,
    )
    assert resp.status_code == 409
    assert "Insufficient stock" in resp.json()["detail"]


async def test_decrement_unknown_product(http):
    resp = await http.post(
        "/products/rpc/decrement_stock",
        json={"row_id": 404, "amount": 1},
        headers=INTERNAL_HEADERS,
    )
    assert resp.status_code == 404


async def test_restore_stock(backend, make_product):
    product = await make_product(stock=1)
    assert await backend.restore_stock(product["id"], 3) == 4


async def test_referenced_product_cannot_be_deleted(http, backend, make_product):
    used = await make_product(name="Buku Tulis", category="Buku")
    unused = await make_product(name="Pensil 2B", category="Pena & Pensil")
    order = await backend.insert_order(1, 10000, "0812", "Jl. Merdeka 1", "cod")
    await backend.insert_order_item(order["id"], used["id"], 1, 10000)

    resp = await http.delete(f"/products/{used['id']}", headers=INTERNAL_HEADERS)
    assert resp.status_code == 409

    resp = await http.delete(f"/products/{unused['id']}", headers=INTERNAL_HEADERS)
    assert resp.status_code == 204
    resp = await http.get(f"/products/{unused['id']}", headers=INTERNAL_HEADERS)
    assert resp.status_code == 404
