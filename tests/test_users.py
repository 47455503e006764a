"""
Tests for user registration, lookup and the pro plan upgrade
"""
from utils.validators import is_valid_id


def test_register_user(client, store):
    """
    Registration returns 201 with a fresh free-plan user.
    """
    response = client.post("/users", json={"name": "Alice", "username": "alice"})

    assert response.status_code == 201
    data = response.json()
    assert is_valid_id(data["id"])
    assert data["name"] == "Alice"
    assert data["username"] == "alice"
    assert data["pro"] is False
    assert data["todos"] == []
    assert len(store.users) == 1


def test_duplicate_username_rejected(client, store, register):
    """
    A second registration with the same username is rejected and the
    store keeps its length.
    """
    register("alice")

    response = client.post("/users", json={"name": "Other Alice", "username": "alice"})

    assert response.status_code == 400
    assert response.json() == {"error": "Username already exists"}
    assert len(store.users) == 1


def test_username_match_is_case_sensitive(client, store, register):
    register("alice")

    response = client.post("/users", json={"name": "Alice", "username": "Alice"})

    assert response.status_code == 201
    assert len(store.users) == 2


def test_register_requires_name_and_username(client, store):
    response = client.post("/users", json={"name": "Alice"})

    assert response.status_code == 422
    assert response.json() == {"error": "username: Field required"}
    assert len(store.users) == 0


def test_get_user_by_id(client, register):
    user = register("alice")

    response = client.get(f"/users/{user['id']}")

    assert response.status_code == 200
    assert response.json() == user


def test_get_user_invalid_id(client):
    response = client.get("/users/not-a-uuid")

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid id"}


def test_get_user_not_found(client):
    response = client.get("/users/3fa85f64-5717-4562-b3fc-2c963f66afa6")

    assert response.status_code == 404
    assert response.json() == {"error": "User not found"}


def test_upgrade_to_pro_twice(client, register):
    """
    First upgrade flips pro to true; the second is rejected with AlreadyPro.
    """
    user = register("alice")

    first = client.patch(f"/users/{user['id']}/pro")
    assert first.status_code == 200
    assert first.json()["pro"] is True

    second = client.patch(f"/users/{user['id']}/pro")
    assert second.status_code == 400
    assert second.json() == {"error": "Pro plan is already activated."}

    # Still pro after the rejected call
    assert client.get(f"/users/{user['id']}").json()["pro"] is True


def test_upgrade_invalid_id(client):
    response = client.patch("/users/not-a-uuid/pro")

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid id"}


def test_upgrade_unknown_user(client):
    response = client.patch("/users/3fa85f64-5717-4562-b3fc-2c963f66afa6/pro")

    assert response.status_code == 404
    assert response.json() == {"error": "User not found"}


def test_user_body_includes_todos(client, register):
    user = register("alice")
    client.post("/todos", headers={"username": "alice"}, json={"title": "buy milk", "deadline": "2024-01-01"})

    data = client.get(f"/users/{user['id']}").json()

    assert len(data["todos"]) == 1
    assert data["todos"][0]["title"] == "buy milk"


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["ok"] is True
