"""End-to-end journey against the application module uvicorn serves."""

import pytest
from fastapi.testclient import TestClient

ADDRESS = "123 Main St, Springfield, IL 62701"


@pytest.fixture()
def app_client():
    from app import app

    return TestClient(app)


class TestApplication:
    def test_health(self, app_client):
        response = app_client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok", "domain": "storefront"}

    def test_all_routers_are_mounted(self, app_client):
        paths = {route.path for route in app_client.app.routes}

        assert {
            "/auth/register",
            "/auth/login",
            "/auth/me",
            "/products",
            "/products/featured",
            "/categories",
            "/cart",
            "/orders",
        } <= paths

    def test_shopper_journey(self, app_client, make_product):
        mug = make_product("Mug", price=10.0)

        listing = app_client.get("/products")
        assert listing.status_code == 200
        assert [p["name"] for p in listing.json()] == ["Mug"]

        registered = app_client.post(
            "/auth/register",
            json={"email": "journey@example.com", "password": "secret123", "firstName": "Jo", "lastName": "Buyer"},
        )
        assert registered.status_code == 201
        headers = {"Authorization": f"Bearer {registered.json()['token']}"}

        added = app_client.post("/cart", json={"productId": str(mug.id), "quantity": 2}, headers=headers)
        assert added.status_code == 200

        placed = app_client.post("/orders", json={"shippingAddress": ADDRESS}, headers=headers)
        assert placed.status_code == 201
        assert placed.json()["total"] == "31.59"
        assert app_client.get("/cart", headers=headers).json() == []
