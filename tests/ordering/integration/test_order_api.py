"""Integration tests for checkout and order history via TestClient."""

from protean import current_domain
from storefront.catalogue.product.repricing import ChangeProductPrice
from storefront.ordering.order.order import Order

ADDRESS = "123 Main St, Springfield, IL 62701"


def _fill_cart(client, headers, *lines):
    for product, quantity in lines:
        response = client.post("/cart", json={"productId": str(product.id), "quantity": quantity}, headers=headers)
        assert response.status_code == 200


class TestPlaceOrder:
    def test_checkout(self, client, auth_headers, make_product):
        _fill_cart(client, auth_headers, (make_product("Mug", price=10.0), 2), (make_product("Coaster", price=5.0), 1))

        response = client.post(
            "/orders", json={"shippingAddress": ADDRESS, "paymentMethod": "credit_card"}, headers=auth_headers
        )

        assert response.status_code == 201
        order = response.json()
        assert order["status"] == "pending"
        assert (order["subtotal"], order["shipping"], order["tax"], order["total"]) == ("25.00", "9.99", "2.00", "36.99")
        assert order["shippingAddress"] == ADDRESS
        assert sorted((i["product"]["name"], i["quantity"], i["price"]) for i in order["orderItems"]) == [
            ("Coaster", 1, "5.00"),
            ("Mug", 2, "10.00"),
        ]
        assert client.get("/cart", headers=auth_headers).json() == []

    def test_empty_cart(self, client, auth_headers):
        response = client.post("/orders", json={"shippingAddress": ADDRESS}, headers=auth_headers)

        assert response.status_code == 400
        assert response.json() == {"error": "EmptyCartError", "message": "Cart is empty"}
        assert current_domain.repository_for(Order)._dao.query.all().items == []

    def test_missing_address(self, client, auth_headers, make_product):
        _fill_cart(client, auth_headers, (make_product(), 1))

        response = client.post("/orders", json={}, headers=auth_headers)

        assert response.status_code == 400
        assert len(client.get("/cart", headers=auth_headers).json()) == 1

    def test_requires_token(self, client):
        response = client.post("/orders", json={"shippingAddress": ADDRESS})
        assert response.status_code == 401


class TestOrderHistory:
    def test_list_and_get(self, client, auth_headers, make_product):
        _fill_cart(client, auth_headers, (make_product(), 1))
        placed = client.post("/orders", json={"shippingAddress": ADDRESS}, headers=auth_headers).json()

        orders = client.get("/orders", headers=auth_headers).json()
        assert [o["id"] for o in orders] == [placed["id"]]

        response = client.get(f"/orders/{placed['id']}", headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["total"] == placed["total"]

    def test_snapshot_survives_price_change(self, client, auth_headers, make_product):
        product = make_product("Lamp", price=20.0)
        _fill_cart(client, auth_headers, (product, 1))
        placed = client.post("/orders", json={"shippingAddress": ADDRESS}, headers=auth_headers).json()

        current_domain.process(ChangeProductPrice(product_id=product.id, price=35.0), asynchronous=False)

        order = client.get(f"/orders/{placed['id']}", headers=auth_headers).json()
        item = order["orderItems"][0]
        assert item["price"] == "20.00"
        assert item["product"]["price"] == "35.00"
        assert order["total"] == placed["total"]

    def test_other_users_order_is_not_found(self, client, auth_headers, make_product):
        _fill_cart(client, auth_headers, (make_product(), 1))
        placed = client.post("/orders", json={"shippingAddress": ADDRESS}, headers=auth_headers).json()

        other = client.post("/auth/register", json={"email": "other@example.com", "password": "secret123"})
        other_headers = {"Authorization": f"Bearer {other.json()['token']}"}

        assert client.get(f"/orders/{placed['id']}", headers=other_headers).status_code == 404
        assert client.get("/orders", headers=other_headers).json() == []
