from __future__ import annotations

from datetime import timedelta

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

import hotel_pms.api.routes.auth as auth_routes
from hotel_pms.core.security import create_access_token, decode_access_token
from hotel_pms.db.store import JsonStore, bootstrap_admin, get_store

auth_test_app = FastAPI()
auth_test_app.include_router(auth_routes.router)

ADMIN_PASSWORD = "front-desk-password"


@pytest.fixture
def user_store() -> JsonStore:
    store = JsonStore()
    bootstrap_admin(store, "admin", ADMIN_PASSWORD)
    return store


def _client(store) -> TestClient:
    auth_test_app.dependency_overrides[get_store] = lambda: store
    return TestClient(auth_test_app)


def test_login_issues_a_session_token(user_store):
    try:
        client = _client(user_store)

        response = client.post(
            "/auth/login",
            json={"username": "Admin", "password": ADMIN_PASSWORD, "language": "ar"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["token_type"] == "bearer"
        assert body["language"] == "ar"
        assert body["expires_in"] == 30 * 60
        claims = decode_access_token(body["access_token"])
        assert claims["sub"] == "admin"
        assert claims["lang"] == "ar"
    finally:
        auth_test_app.dependency_overrides = {}


def test_remember_me_extends_the_session(user_store):
    try:
        client = _client(user_store)

        response = client.post(
            "/auth/login",
            json={"username": "admin", "password": ADMIN_PASSWORD, "remember_me": True},
        )

        assert response.status_code == 200
        assert response.json()["expires_in"] == 14 * 24 * 60 * 60
    finally:
        auth_test_app.dependency_overrides = {}


@pytest.mark.parametrize(
    "username,password",
    [("admin", "wrong-password"), ("nobody", ADMIN_PASSWORD)],
)
def test_login_rejects_bad_credentials(user_store, username, password):
    try:
        client = _client(user_store)

        response = client.post("/auth/login", json={"username": username, "password": password})

        assert response.status_code == 401
        assert response.json()["detail"] == "Incorrect username or password"
    finally:
        auth_test_app.dependency_overrides = {}


def test_login_rejects_inactive_user(user_store):
    user = user_store.all("users")[0]
    user_store.update("users", user["id"], {"is_active": False})
    try:
        client = _client(user_store)
        response = client.post(
            "/auth/login", json={"username": "admin", "password": ADMIN_PASSWORD}
        )
        assert response.status_code == 401
    finally:
        auth_test_app.dependency_overrides = {}


def test_login_requires_both_fields(user_store):
    try:
        client = _client(user_store)
        assert client.post("/auth/login", json={"username": "admin"}).status_code == 422
        assert (
            client.post("/auth/login", json={"username": "", "password": "x"}).status_code == 422
        )
    finally:
        auth_test_app.dependency_overrides = {}


def test_token_endpoint_accepts_form_login(user_store):
    try:
        client = _client(user_store)

        response = client.post(
            "/auth/token", data={"username": "admin", "password": ADMIN_PASSWORD}
        )

        assert response.status_code == 200
        assert decode_access_token(response.json()["access_token"])["sub"] == "admin"
    finally:
        auth_test_app.dependency_overrides = {}


def test_me_returns_the_signed_in_user(user_store):
    try:
        client = _client(user_store)
        token = client.post(
            "/auth/login",
            json={"username": "admin", "password": ADMIN_PASSWORD, "language": "ar"},
        ).json()["access_token"]

        response = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 200
        body = response.json()
        assert body["username"] == "admin"
        assert body["language"] == "ar"
        assert "password_hash" not in body
    finally:
        auth_test_app.dependency_overrides = {}


@pytest.mark.parametrize(
    "token",
    [
        "not-a-jwt",
        create_access_token("admin", expires_delta=timedelta(minutes=-5)),
        create_access_token("ghost"),
    ],
)
def test_me_rejects_invalid_tokens(user_store, token):
    try:
        client = _client(user_store)

        response = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401
        assert response.json()["detail"] == "Could not validate credentials"
    finally:
        auth_test_app.dependency_overrides = {}


def test_me_requires_a_bearer_token(user_store):
    try:
        client = _client(user_store)
        assert client.get("/auth/me").status_code == 401
    finally:
        auth_test_app.dependency_overrides = {}
