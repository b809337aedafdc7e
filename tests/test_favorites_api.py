"""Tests for the per-user favorites list."""

import pytest

from tests.conftest import add_food, auth_header, register


@pytest.fixture
def foods(client, admin_token) -> dict:
    return {
        "poha": add_food(client, admin_token, name="Poha", calories=180, protein=4, carbs=32, fats=4),
        "dosa": add_food(client, admin_token, name="Masala Dosa", calories=300, protein=6, carbs=45, fats=10),
    }


def test_add_and_list_favorites(client, user_token, foods) -> None:
    headers = auth_header(user_token)

    poha = client.post("/favorites", json={"foodId": foods["poha"]["id"]}, headers=headers)
    dosa = client.post("/favorites", json={"foodId": foods["dosa"]["id"]}, headers=headers)

    assert poha.status_code == dosa.status_code == 201
    assert poha.json()["food"]["name"] == "Poha"
    listed = client.get("/favorites", headers=headers).json()
    assert [f["name"] for f in listed] == ["Masala Dosa", "Poha"]
    assert listed[1]["favoriteId"] == poha.json()["favoriteId"]
    assert listed[1]["calories"] == 180


def test_duplicate_favorite_is_rejected(client, user_token, foods) -> None:
    headers = auth_header(user_token)
    client.post("/favorites", json={"foodId": foods["poha"]["id"]}, headers=headers)

    response = client.post("/favorites", json={"foodId": foods["poha"]["id"]}, headers=headers)

    assert response.status_code == 400
    assert response.json() == {"error": "Already in favorites"}
    assert len(client.get("/favorites", headers=headers).json()) == 1


def test_favorite_unknown_food(client, user_token) -> None:
    response = client.post("/favorites", json={"foodId": 4242}, headers=auth_header(user_token))

    assert response.status_code == 404


def test_check_and_remove_favorite(client, user_token, foods) -> None:
    headers = auth_header(user_token)
    food_id = foods["dosa"]["id"]
    client.post("/favorites", json={"foodId": food_id}, headers=headers)

    assert client.get(f"/favorites/check/{food_id}", headers=headers).json() == {"isFavorite": True}

    response = client.delete(f"/favorites/{food_id}", headers=headers)

    assert response.status_code == 200
    assert client.get(f"/favorites/check/{food_id}", headers=headers).json() == {"isFavorite": False}
    assert client.get("/favorites", headers=headers).json() == []


def test_remove_missing_favorite(client, user_token, foods) -> None:
    response = client.delete(f"/favorites/{foods['poha']['id']}", headers=auth_header(user_token))

    assert response.status_code == 404
    assert response.json() == {"error": "Favorite not found"}


def test_favorites_are_per_user(client, user_token, foods) -> None:
    other = register(client, "other@example.com", "Other")
    client.post("/favorites", json={"foodId": foods["poha"]["id"]}, headers=auth_header(other))

    assert client.get("/favorites", headers=auth_header(user_token)).json() == []
    mine = client.post("/favorites", json={"foodId": foods["poha"]["id"]}, headers=auth_header(user_token))
    assert mine.status_code == 201


def test_favorites_require_auth(client) -> None:
    assert client.get("/favorites").status_code == 401
