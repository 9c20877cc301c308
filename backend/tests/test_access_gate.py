"""Tests for token checks, same-user checks and admin-only routes."""
from datetime import timedelta

import pytest
from bson import ObjectId

from app.utils.auth_utils import create_access_token, create_refresh_token

ADMIN_ROUTES = [
    ("get", "/users"),
    ("get", "/reports"),
    ("get", "/admin-stats"),
    ("patch", f"/users/admin/{ObjectId()}"),
    ("delete", f"/reports/{ObjectId()}"),
]


def test_missing_token_is_unauthenticated(client):
    response = client.get("/favorites/alice@x.com")
    assert response.status_code == 401
    assert response.json() == {"success": False, "message": "Unauthorized access", "error": "Unauthenticated"}


def test_non_bearer_header_is_unauthenticated(client):
    response = client.get("/favorites/alice@x.com", headers={"Authorization": "Basic abc"})
    assert response.status_code == 401


def test_garbage_token_is_forbidden(client):
    response = client.get("/favorites/alice@x.com", headers={"Authorization": "Bearer not.a.jwt"})
    assert response.status_code == 403
    assert response.json()["error"] == "Forbidden"


def test_expired_token_is_forbidden(client):
    token = create_access_token({"email": "alice@x.com"}, expires_delta=timedelta(seconds=-5))
    response = client.get("/favorites/alice@x.com", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 403
    assert response.json()["message"] == "Token has expired"


def test_refresh_token_cannot_be_used_as_access_token(client):
    token = create_refresh_token({"email": "alice@x.com"})
    response = client.get("/favorites/alice@x.com", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 403


def test_other_users_favorites_are_forbidden(client, auth_headers):
    response = client.get("/favorites/alice@x.com", headers=auth_headers("bob@x.com"))
    assert response.status_code == 403


@pytest.mark.parametrize("path", ["/users/role/alice@x.com", "/users/admin/alice@x.com", "/my-lessons/alice@x.com"])
def test_same_user_routes_reject_other_callers(client, auth_headers, path):
    assert client.get(path, headers=auth_headers("bob@x.com")).status_code == 403


@pytest.mark.parametrize("method,path", ADMIN_ROUTES)
def test_admin_routes_forbid_plain_users(client, add_user, auth_headers, method, path):
    add_user("bob@x.com")
    response = getattr(client, method)(path, headers=auth_headers("bob@x.com"))
    assert response.status_code == 403
    assert response.json()["message"] == "Admin access only"


def test_admin_role_in_token_is_not_trusted(client, add_user, auth_headers):
    add_user("bob@x.com", role="user")
    response = client.get("/users", headers=auth_headers("bob@x.com", role="admin"))
    assert response.status_code == 403


def test_unknown_caller_is_forbidden_on_admin_routes(client, auth_headers):
    assert client.get("/admin-stats", headers=auth_headers("ghost@x.com")).status_code == 403


@pytest.mark.parametrize("method,path", ADMIN_ROUTES)
def test_admin_routes_require_token(client, method, path):
    assert getattr(client, method)(path).status_code == 401
