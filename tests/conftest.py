"""Shared test fixtures."""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SEED_DEMO_DATA", "false")

import pytest
from fastapi.testclient import TestClient

from canteen_api import config
from canteen_api.main import create_app


def auth_header(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


def register(client: TestClient, email: str = "asha@example.com", name: str = "Asha") -> str:
    response = client.post(
        "/auth/register", json={"email": email, "password": "secret123", "name": name}
    )
    assert response.status_code == 201, response.text
    return response.json()["token"]


def add_food(client: TestClient, admin_token: str, **fields) -> dict:
    payload = {"name": "Dal Rice", "calories": 320, "protein": 12, "carbs": 50, "fats": 8, "isVeg": True}
    payload.update(fields)
    response = client.post("/food", json=payload, headers=auth_header(admin_token))
    assert response.status_code == 201, response.text
    return response.json()["food"]


@pytest.fixture
def app():
    return create_app("sqlite://", seed_demo=False)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def admin_token(client) -> str:
    response = client.post(
        "/auth/login", json={"email": config.ADMIN_EMAIL, "password": config.ADMIN_PASSWORD}
    )
    assert response.status_code == 200, response.text
    return response.json()["token"]


@pytest.fixture
def user_token(client) -> str:
    return register(client)
