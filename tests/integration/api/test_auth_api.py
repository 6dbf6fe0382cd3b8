import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_register_and_login(client: AsyncClient):
    response = await client.post(
        "/api/auth/register",
        json={"email": "Owner@Acme.com", "password": "SecurePass123!", "full_name": "Olivia"},
    )
    assert response.status_code == 201
    data = response.json()
    assert data["email"] == "owner@acme.com"
    assert data["full_name"] == "Olivia"

    response = await client.post(
        "/api/auth/login", json={"email": "owner@acme.com", "password": "SecurePass123!"}
    )
    assert response.status_code == 200
    data = response.json()
    assert data["token_type"] == "bearer"
    assert data["access_token"]
    assert data["user"]["email"] == "owner@acme.com"


@pytest.mark.asyncio
async def test_register_duplicate_email(client: AsyncClient, register_and_login):
    await register_and_login("owner@acme.com")

    response = await client.post(
        "/api/auth/register", json={"email": "owner@acme.com", "password": "AnotherPass1!"}
    )

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "EMAIL_ALREADY_REGISTERED"


@pytest.mark.asyncio
async def test_register_rejects_short_password(client: AsyncClient):
    response = await client.post(
        "/api/auth/register", json={"email": "owner@acme.com", "password": "short"}
    )

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_login_wrong_password(client: AsyncClient, register_and_login):
    await register_and_login("owner@acme.com")

    response = await client.post(
        "/api/auth/login", json={"email": "owner@acme.com", "password": "WrongPass123!"}
    )

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "INVALID_CREDENTIALS"


@pytest.mark.asyncio
async def test_business_routes_require_token(client: AsyncClient):
    response = await client.get("/api/businesses")
    assert response.status_code in (401, 403)

    response = await client.get(
        "/api/businesses", headers={"Authorization": "Bearer not-a-token"}
    )
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_admin_routes_require_api_key(client: AsyncClient):
    response = await client.post("/api/admin/roles/provision")
    assert response.status_code == 401

    response = await client.post(
        "/api/admin/roles/provision", headers={"X-Admin-API-Key": "wrong"}
    )
    assert response.status_code == 401
    assert response.json()["error"]["code"] == "INVALID_API_KEY"


@pytest.mark.asyncio
async def test_health_check(client: AsyncClient):
    response = await client.get("/health")

    assert response.status_code == 200


@pytest.mark.asyncio
async def test_roles_catalog(client: AsyncClient, register_and_login):
    headers = await register_and_login("owner@acme.com")

    response = await client.get("/api/roles", headers=headers)

    assert response.status_code == 200
    roles = {r["name"]: r for r in response.json()["roles"]}
    assert set(roles) == {"Owner", "Admin", "Manager", "Editor", "Accountant"}
    assert "business:delete" in roles["Owner"]["permissions"]
    assert "business:delete" not in roles["Admin"]["permissions"]
