from conftest import INTERNAL_HEADERS
from shared.security import verify_access_token


async def test_register_login_me(http):
    resp = await http.post(
        "/auth/register",
        json={"email": "budi@tokoatk.id", "password": "rahasia123", "full_name": "Budi"},
    )
    assert resp.status_code == 201
    assert resp.json()["role"] == "buyer"

    resp = await http.post("/auth/login", json={"email": "budi@tokoatk.id", "password": "rahasia123"})
    token = resp.json()["access_token"]
    assert verify_access_token(token)["role"] == "buyer"

    resp = await http.get("/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert resp.json()["full_name"] == "Budi"


async def test_duplicate_email_and_bad_password(http):
    payload = {"email": "sari@tokoatk.id", "password": "rahasia123"}
    assert (await http.post("/auth/register", json=payload)).status_code == 201
    assert (await http.post("/auth/register", json=payload)).status_code == 409

    resp = await http.post("/auth/login", json={"email": "sari@tokoatk.id", "password": "salah"})
    assert resp.status_code == 401


async def test_admin_provisioning_is_internal(http):
    payload = {"email": "admin@tokoatk.id", "password": "rahasia123"}
    assert (await http.post("/auth/profiles/admins", json=payload)).status_code == 403

    resp = await http.post("/auth/profiles/admins", json=payload, headers=INTERNAL_HEADERS)
    assert resp.json()["role"] == "admin"

    resp = await http.post("/auth/login", json=payload)
    assert resp.json()["role"] == "admin"
