"""
Order placement across all three services, each running in process.
"""

import pytest


@pytest.fixture
def phone_id(product_api):
    response = product_api.post("/products", json={
        "name": "Phone",
        "description": "Six inch screen",
        "category": "Electronics",
        "price": 10.0,
        "quantity": 5,
    })
    return response.json()["id"]


@pytest.fixture
def user_id(user_api):
    return user_api.post("/users", json={"name": "Test User"}).json()["id"]


def test_place_order(order_api, product_api, user_api, phone_id, user_id):
    response = order_api.post("/orders", json={"user_id": user_id, "order_items": {str(phone_id): 2}})

    assert response.status_code == 201
    order = response.json()
    assert order["total_price"] == 20.0
    assert order["status"] == "PLACED"
    assert order["order_items"] == {str(phone_id): 2}

    assert product_api.get(f"/products/{phone_id}").json()["quantity"] == 3
    assert user_api.get(f"/users/{user_id}").json()["orders_list"] == [order["id"]]

    assert order_api.get(f"/orders/{order['id']}").json()["id"] == order["id"]
    assert [o["id"] for o in order_api.get(f"/orders/user/{user_id}").json()] == [order["id"]]
    assert [o["id"] for o in order_api.get("/orders").json()] == [order["id"]]


def test_insufficient_quantity(order_api, product_api, phone_id, user_id):
    response = order_api.post("/orders", json={"user_id": user_id, "order_items": {str(phone_id): 6}})

    assert response.status_code == 400
    error = response.json()["error"]
    assert error["code"] == "insufficient_quantity"
    assert error["message"] == f"Insufficient quantity for product: {phone_id}"

    assert product_api.get(f"/products/{phone_id}").json()["quantity"] == 5
    assert order_api.get("/orders").json() == []


def test_unknown_user(order_api, product_api, phone_id):
    response = order_api.post("/orders", json={"user_id": 999, "order_items": {str(phone_id): 1}})

    assert response.status_code == 404
    assert response.json()["error"]["message"] == "User not found with id: 999"
    assert product_api.get(f"/products/{phone_id}").json()["quantity"] == 5


def test_unknown_product(order_api, user_api, user_id):
    response = order_api.post("/orders", json={"user_id": user_id, "order_items": {"404": 1}})

    assert response.status_code == 404
    assert response.json()["error"]["message"] == "Product not found with id: 404"
    assert user_api.get(f"/users/{user_id}").json()["orders_list"] == []


def test_missing_order(order_api):
    response = order_api.get("/orders/12345")

    assert response.status_code == 404
    assert response.json()["error"]["message"] == "Order not found with id: 12345"


def test_empty_order_is_rejected(order_api, user_id):
    response = order_api.post("/orders", json={"user_id": user_id, "order_items": {}})

    assert response.status_code == 422


def test_health(order_api):
    response = order_api.get("/health")

    assert response.status_code == 200
    assert response.json()["service"] == "order-service"
