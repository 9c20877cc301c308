"""Tests for sign-up, login, token refresh and role lookups."""
from unittest.mock import patch

NEW_USER = {"email": "alice@x.com", "name": "Alice", "password": "s3cret-pass"}


def test_create_user_defaults(client, db, run):
    response = client.post("/users", json=NEW_USER)

    assert response.status_code == 200
    assert response.json()["insertedId"]
    stored = run(db["users"].find_one({"email": "alice@x.com"}))
    assert stored["role"] == "user"
    assert stored["isPremium"] is False
    assert stored["password"].startswith("$argon2")


def test_create_existing_user_is_noop(client, db, run):
    client.post("/users", json=NEW_USER)
    response = client.post("/users", json={**NEW_USER, "name": "Someone Else"})

    assert response.json() == {"message": "User already exists", "insertedId": None}
    assert run(db["users"].count_documents({})) == 1
    assert run(db["users"].find_one({}))["name"] == "Alice"


def test_repeat_sign_in_without_password_is_noop(client, db, run):
    client.post("/users", json=NEW_USER)
    response = client.post("/users", json={"email": "alice@x.com", "name": "Alice"})

    assert response.status_code == 200
    assert response.json() == {"message": "User already exists", "insertedId": None}
    assert run(db["users"].count_documents({})) == 1


def test_new_user_without_password_is_rejected(client, db, run):
    response = client.post("/users", json={"email": "alice@x.com", "name": "Alice"})

    assert response.status_code == 422
    assert run(db["users"].count_documents({})) == 0


def test_admin_email_bootstraps_admin(client, db, run):
    with patch("app.routes.users.settings.ADMIN_EMAIL", "boss@x.com"):
        client.post("/users", json={**NEW_USER, "email": "boss@x.com"})
    assert run(db["users"].find_one({"email": "boss@x.com"}))["role"] == "admin"


def test_create_user_validates_body(client):
    response = client.post("/users", json={"email": "not-an-email", "password": "s3cret-pass"})
    assert response.status_code == 422
    assert response.json()["details"]


def test_login_refresh_and_me(client):
    client.post("/users", json=NEW_USER)

    login = client.post("/auth/login", json={"email": "alice@x.com", "password": "s3cret-pass"})
    assert login.status_code == 200
    tokens = login.json()
    assert tokens["role"] == "user"
    assert tokens["isPremium"] is False

    me = client.get("/auth/me", headers={"Authorization": f"Bearer {tokens['access_token']}"})
    assert me.json()["email"] == "alice@x.com"
    assert "password" not in me.json()

    refreshed = client.post("/auth/refresh", json={"refresh_token": tokens["refresh_token"]})
    assert refreshed.status_code == 200
    assert refreshed.json()["access_token"]


def test_login_with_wrong_password(client):
    client.post("/users", json=NEW_USER)
    response = client.post("/auth/login", json={"email": "alice@x.com", "password": "nope-nope"})
    assert response.status_code == 401


def test_refresh_rejects_access_token(client):
    client.post("/users", json=NEW_USER)
    tokens = client.post("/auth/login", json={"email": "alice@x.com", "password": "s3cret-pass"}).json()
    response = client.post("/auth/refresh", json={"refresh_token": tokens["access_token"]})
    assert response.status_code == 403


def test_role_lookup(client, add_user, auth_headers):
    add_user("alice@x.com", is_premium=True)
    response = client.get("/users/role/alice@x.com", headers=auth_headers("alice@x.com"))
    assert response.json() == {"role": "user", "isPremium": True}


def test_admin_check(client, add_user, auth_headers):
    add_user("alice@x.com")
    add_user("root@x.com", role="admin")
    assert client.get("/users/admin/alice@x.com", headers=auth_headers("alice@x.com")).json() == {"admin": False}
    assert client.get("/users/admin/root@x.com", headers=auth_headers("root@x.com")).json() == {"admin": True}
