"""
Component tests for the carts endpoints and the shared HTTP behaviour
(welcome route, fallback 404, error envelope).
"""
from fastapi.testclient import TestClient

from app.api import create_app

PRODUCT = {"title": "T", "description": "D", "code": "C1", "price": 10, "stock": 2, "category": "X"}


class TestCarts:
    def test_create_cart(self, test_client: TestClient):
        response = test_client.post("/api/carts")

        assert response.status_code == 201
        assert response.json() == {"status": "success", "payload": {"id": "1", "products": []}}

    def test_add_product_twice_merges_quantity(self, test_client: TestClient):
        # Arrange
        test_client.post("/api/products", json=PRODUCT)
        test_client.post("/api/carts")

        # Act
        first = test_client.post("/api/carts/1/product/1")
        second = test_client.post("/api/carts/1/product/1")

        # Assert
        assert first.status_code == 200
        assert first.json()["payload"]["products"] == [{"product": "1", "quantity": 1}]
        assert second.json()["payload"] == {"id": "1", "products": [{"product": "1", "quantity": 2}]}

    def test_add_unknown_product_returns_404(self, test_client: TestClient):
        test_client.post("/api/carts")

        response = test_client.post("/api/carts/1/product/999")

        assert response.status_code == 404
        assert response.json() == {"status": "error", "error": "Product with id 999 not found"}
        assert test_client.get("/api/carts/1").json()["payload"] == []

    def test_add_to_unknown_cart_returns_404(self, test_client: TestClient):
        test_client.post("/api/products", json=PRODUCT)

        response = test_client.post("/api/carts/5/product/1")

        assert response.status_code == 404
        assert response.json() == {"status": "error", "error": "Cart with id 5 not found"}

    def test_get_cart_returns_lines_and_total(self, test_client: TestClient):
        test_client.post("/api/products", json=PRODUCT)
        test_client.post("/api/products", json={**PRODUCT, "code": "C2"})
        test_client.post("/api/carts")
        test_client.post("/api/carts/1/product/2")
        test_client.post("/api/carts/1/product/1")

        body = test_client.get("/api/carts/1").json()

        assert body == {
            "status": "success",
            "payload": [{"product": "2", "quantity": 1}, {"product": "1", "quantity": 1}],
            "total": 2,
        }

    def test_get_unknown_cart_returns_404(self, test_client: TestClient):
        response = test_client.get("/api/carts/42")

        assert response.status_code == 404
        assert response.json() == {"status": "error", "error": "Cart with id 42 not found"}


class TestServiceSurface:
    def test_welcome(self, test_client: TestClient):
        response = test_client.get("/")

        assert response.status_code == 200
        assert response.json() == {
            "status": "success",
            "message": "Welcome to the Products & Carts API",
        }

    def test_health(self, test_client: TestClient):
        assert test_client.get("/health").json() == {"status": "ok"}

    def test_unknown_route_returns_404_envelope(self, test_client: TestClient):
        response = test_client.get("/api/nothing?x=1")

        assert response.status_code == 404
        assert response.json() == {"status": "error", "error": "Route /api/nothing?x=1 not found"}

    def test_unsupported_method_is_an_unknown_route(self, test_client: TestClient):
        response = test_client.patch("/api/products/1", json={})

        assert response.status_code == 404
        assert response.json()["error"] == "Route /api/products/1 not found"

    def test_corrupt_storage_returns_500(self, test_client: TestClient, data_dir):
        (data_dir / "products.json").write_text("{broken")

        response = test_client.get("/api/products")

        assert response.status_code == 500
        assert response.json()["status"] == "error"

    def test_data_survives_a_restart(self, data_dir):
        with TestClient(create_app(data_dir)) as client:
            client.post("/api/products", json=PRODUCT)
            client.post("/api/carts")
            client.post("/api/carts/1/product/1")

        with TestClient(create_app(data_dir)) as client:
            assert client.get("/api/products/1").json()["payload"]["code"] == "C1"
            assert client.get("/api/carts/1").json()["payload"] == [{"product": "1", "quantity": 1}]
