"""
Component tests for the cart endpoints

These tests drive the real router, service and repository layers against
an in-memory SQLite database:
- API endpoints (FastAPI routes + auth guard)
- Cart aggregation (cart rows joined with current product data)
- Repository upsert / remove semantics
"""
from decimal import Decimal

from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError
from sqlmodel import select

from easyshop.models.cart import ShoppingCartItem
from easyshop.models.product import Product
from easyshop.repositories.cart_repo import CartRepository


class TestEmptyCart:
    """
    Component Test 1: a user without cart rows gets an empty cart
    """

    def test_get_empty_cart(self, test_client: TestClient, alice_headers):
        """
        Validates:
        - 200 (not 404) for a user that never added anything
        - items is an empty mapping and total is zero
        """
        # Act
        response = test_client.get("/cart", headers=alice_headers)

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["items"] == {}
        assert Decimal(data["total"]) == Decimal("0")

    def test_cart_requires_authentication(self, test_client: TestClient):
        response = test_client.get("/cart")
        assert response.status_code == 401

    def test_invalid_token_rejected(self, test_client: TestClient):
        response = test_client.get(
            "/cart", headers={"Authorization": "Bearer not-a-jwt"}
        )
        assert response.status_code == 401

    def test_unknown_user_returns_404(self, test_client: TestClient, make_headers):
        """
        A valid token whose subject has no users row is a missing user.
        """
        response = test_client.get("/cart", headers=make_headers("ghost"))
        assert response.status_code == 404
        assert response.json()["detail"] == "User not found"


class TestAddProduct:
    """
    Component Test 2: adding products accumulates quantity on one line
    """

    def test_add_product_creates_line(self, test_client: TestClient, alice_headers):
        # Act
        response = test_client.post("/cart/products/1", headers=alice_headers)

        # Assert
        assert response.status_code == 201
        data = response.json()
        assert list(data["items"].keys()) == ["1"]
        line = data["items"]["1"]
        assert line["quantity"] == 1
        assert line["product"]["name"] == "Headphones"
        assert Decimal(line["product"]["price"]) == Decimal("49.99")
        assert Decimal(line["line_total"]) == Decimal("49.99")
        assert Decimal(data["total"]) == Decimal("49.99")

    def test_adding_same_product_twice_accumulates(
        self, test_client: TestClient, alice_headers, session
    ):
        """
        Validates:
        - second add increments instead of inserting a second row
        - stored quantity is the sum of both adds
        """
        # Act
        test_client.post("/cart/products/1?quantity=2", headers=alice_headers)
        response = test_client.post("/cart/products/1?quantity=3", headers=alice_headers)

        # Assert
        assert response.status_code == 201
        assert response.json()["items"]["1"]["quantity"] == 5
        assert Decimal(response.json()["total"]) == Decimal("249.95")

        rows = session.exec(
            select(ShoppingCartItem).where(ShoppingCartItem.user_id == 1)
        ).all()
        assert len(rows) == 1
        assert rows[0].quantity == 5

    def test_total_over_multiple_products(self, test_client: TestClient, alice_headers):
        # Arrange
        test_client.post("/cart/products/1?quantity=2", headers=alice_headers)
        test_client.post("/cart/products/4?quantity=3", headers=alice_headers)

        # Act
        response = test_client.get("/cart", headers=alice_headers)

        # Assert
        data = response.json()
        assert set(data["items"].keys()) == {"1", "4"}
        # 49.99 * 2 + 9.99 * 3 = 99.98 + 29.97
        assert Decimal(data["total"]) == Decimal("129.95")

    def test_add_unknown_product_returns_404(self, test_client: TestClient, alice_headers):
        response = test_client.post("/cart/products/999", headers=alice_headers)

        assert response.status_code == 404
        assert response.json()["detail"] == "Product not found"
        assert test_client.get("/cart", headers=alice_headers).json()["items"] == {}

    def test_add_rejects_non_positive_quantity(self, test_client: TestClient, alice_headers):
        response = test_client.post("/cart/products/1?quantity=0", headers=alice_headers)
        assert response.status_code == 422


class TestUpdateQuantity:
    """
    Component Test 3: PUT sets an absolute quantity; <= 0 removes the line
    """

    def test_update_overwrites_quantity(self, test_client: TestClient, alice_headers):
        # Arrange
        test_client.post("/cart/products/2?quantity=4", headers=alice_headers)

        # Act
        response = test_client.put(
            "/cart/products/2", json={"quantity": 1}, headers=alice_headers
        )

        # Assert
        assert response.status_code == 200
        assert response.json()["items"]["2"]["quantity"] == 1

    def test_update_to_zero_removes_line(self, test_client: TestClient, alice_headers):
        test_client.post("/cart/products/2", headers=alice_headers)

        response = test_client.put(
            "/cart/products/2", json={"quantity": 0}, headers=alice_headers
        )

        assert response.status_code == 200
        assert response.json()["items"] == {}

    def test_update_to_negative_removes_line(
        self, test_client: TestClient, alice_headers, session
    ):
        test_client.post("/cart/products/2", headers=alice_headers)

        response = test_client.put(
            "/cart/products/2", json={"quantity": -5}, headers=alice_headers
        )

        assert response.status_code == 200
        assert response.json()["items"] == {}
        assert session.get(ShoppingCartItem, (1, 2)) is None

    def test_update_line_not_in_cart_is_noop(self, test_client: TestClient, alice_headers):
        response = test_client.put(
            "/cart/products/3", json={"quantity": 7}, headers=alice_headers
        )

        assert response.status_code == 200
        assert response.json()["items"] == {}


class TestRemoveAndClear:
    """
    Component Test 4: removing lines and clearing the cart
    """

    def test_remove_line(self, test_client: TestClient, alice_headers):
        test_client.post("/cart/products/1", headers=alice_headers)
        test_client.post("/cart/products/4", headers=alice_headers)

        response = test_client.delete("/cart/products/1", headers=alice_headers)

        assert response.status_code == 204
        assert response.text == ""
        items = test_client.get("/cart", headers=alice_headers).json()["items"]
        assert set(items.keys()) == {"4"}

    def test_remove_absent_line_is_noop(self, test_client: TestClient, alice_headers):
        response = test_client.delete("/cart/products/3", headers=alice_headers)
        assert response.status_code == 204

    def test_clear_cart(self, test_client: TestClient, alice_headers):
        test_client.post("/cart/products/1", headers=alice_headers)
        test_client.post("/cart/products/2", headers=alice_headers)

        response = test_client.delete("/cart", headers=alice_headers)

        assert response.status_code == 204
        assert test_client.get("/cart", headers=alice_headers).json()["items"] == {}

    def test_clear_empty_cart_is_noop(self, test_client: TestClient, alice_headers):
        response = test_client.delete("/cart", headers=alice_headers)
        assert response.status_code == 204


class TestCartIsolation:
    """
    Component Test 5: every cart operation targets the caller's own cart
    """

    def test_users_have_independent_carts(
        self, test_client: TestClient, alice_headers, bob_headers
    ):
        # Arrange
        test_client.post("/cart/products/1", headers=alice_headers)
        test_client.post("/cart/products/3", headers=bob_headers)

        # Act
        test_client.delete("/cart", headers=bob_headers)

        # Assert
        alice_cart = test_client.get("/cart", headers=alice_headers).json()
        bob_cart = test_client.get("/cart", headers=bob_headers).json()
        assert set(alice_cart["items"].keys()) == {"1"}
        assert bob_cart["items"] == {}

    def test_client_supplied_user_id_is_ignored(
        self, test_client: TestClient, alice_headers, session
    ):
        """
        Validates:
        - a user_id in the query string or body has no effect
        - the row is written for the token's user only
        """
        # Act
        test_client.post("/cart/products/1?user_id=2", headers=alice_headers)
        test_client.put(
            "/cart/products/1?user_id=2",
            json={"quantity": 6, "user_id": 2},
            headers=alice_headers,
        )

        # Assert
        rows = session.exec(select(ShoppingCartItem)).all()
        assert [(r.user_id, r.product_id, r.quantity) for r in rows] == [(1, 1, 6)]


class TestCartReflectsCatalog:
    """
    Component Test 6: the cart view is rebuilt from current product data
    """

    def test_price_change_is_reflected(
        self, test_client: TestClient, alice_headers, admin_headers
    ):
        # Arrange
        test_client.post("/cart/products/4?quantity=2", headers=alice_headers)

        # Act
        test_client.put(
            "/products/4",
            json={
                "name": "T-Shirt",
                "price": "12.00",
                "category_id": 2,
                "color": "Red",
                "stock": 50,
            },
            headers=admin_headers,
        )

        # Assert
        data = test_client.get("/cart", headers=alice_headers).json()
        assert Decimal(data["items"]["4"]["product"]["price"]) == Decimal("12.00")
        assert Decimal(data["total"]) == Decimal("24.00")

    def test_deleted_product_is_dropped_from_view(
        self, test_client: TestClient, alice_headers, admin_headers, session
    ):
        """
        A cart line pointing at a product that no longer exists is
        silently left out of the cart view.
        """
        # Arrange
        test_client.post("/cart/products/1", headers=alice_headers)
        test_client.post("/cart/products/2", headers=alice_headers)
        session.delete(session.get(Product, 2))
        session.commit()

        # Act
        response = test_client.get("/cart", headers=alice_headers)

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert set(data["items"].keys()) == {"1"}
        assert Decimal(data["total"]) == Decimal("49.99")


class TestStorageFaults:
    """
    Component Test 7: storage faults surface as an opaque 500
    """

    def test_storage_error_is_not_leaked(
        self, test_client: TestClient, alice_headers, monkeypatch
    ):
        def boom(self, session, user_id):
            raise OperationalError(
                "SELECT quantity FROM shopping_cart WHERE user_id = ?",
                (user_id,),
                Exception("disk I/O error"),
            )

        monkeypatch.setattr(CartRepository, "list_for_user", boom)

        response = test_client.get("/cart", headers=alice_headers)

        assert response.status_code == 500
        assert response.json() == {"detail": "Oops... our bad."}
        assert "shopping_cart" not in response.text
        assert "disk" not in response.text

    def test_unexpected_error_is_not_leaked(
        self, test_client: TestClient, alice_headers, monkeypatch
    ):
        """
        Validates:
        - a non-database exception hits the catch-all handler
        - the client sees the generic 500 body, not the exception text
        """
        # Arrange
        def boom(self, session, user_id):
            raise RuntimeError("SELECT * FROM shopping_cart WHERE user_id = 1")

        monkeypatch.setattr(CartRepository, "list_for_user", boom)
        # Starlette re-raises unhandled exceptions into the test client by default
        client = TestClient(test_client.app, raise_server_exceptions=False)

        # Act
        response = client.get("/cart", headers=alice_headers)

        # Assert
        assert response.status_code == 500
        assert response.json() == {"detail": "Oops... our bad."}
        assert "shopping_cart" not in response.text
        assert "SELECT" not in response.text
