def test_user_lifecycle(user_api):
    response = user_api.post("/users", json={"name": "Test User"})
    assert response.status_code == 201
    created = response.json()
    assert created["role"] == "CUSTOMER"
    assert created["orders_list"] == []

    user_id = created["id"]

    response = user_api.put(f"/users/{user_id}", json={"name": "Admin User", "role": "ADMIN"})
    assert response.status_code == 200
    assert response.json()["role"] == "ADMIN"

    response = user_api.get("/users")
    assert [u["name"] for u in response.json()] == ["Admin User"]

    response = user_api.delete(f"/users/{user_id}")
    assert response.status_code == 204

    response = user_api.get(f"/users/{user_id}")
    assert response.status_code == 404
    assert response.json()["error"]["message"] == f"User not found with id: {user_id}"


def test_record_order_on_user(user_api):
    user_id = user_api.post("/users", json={"name": "Test User"}).json()["id"]

    response = user_api.post(f"/users/{user_id}/orders/9")
    assert response.status_code == 200
    assert response.json()["orders_list"] == [9]

    response = user_api.get(f"/users/{user_id}")
    assert response.json()["orders_list"] == [9]


def test_record_order_on_missing_user(user_api):
    response = user_api.post("/users/5/orders/9")

    assert response.status_code == 404


def test_record_order_route_is_not_published(user_api):
    paths = user_api.get("/openapi.json").json()["paths"]

    assert "/users/{user_id}" in paths
    assert "/users/{user_id}/orders/{order_id}" not in paths


def test_blank_name_is_rejected(user_api):
    response = user_api.post("/users", json={"name": " "})

    assert response.status_code == 400
    error = response.json()["error"]
    assert error["code"] == "empty_name"
    assert error["message"] == "User name cannot be empty"


def test_unknown_role_is_rejected(user_api):
    response = user_api.post("/users", json={"name": "Test User", "role": "OWNER"})

    assert response.status_code == 422


def test_name_rule_is_documented(user_api):
    schema = user_api.get("/openapi.json").json()["components"]["schemas"]["UserCreate"]

    assert "must not be blank" in schema["properties"]["name"]["description"]
