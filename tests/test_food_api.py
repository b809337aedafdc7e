"""Tests for the menu query and admin catalog endpoints."""

from datetime import date

import pytest

from tests.conftest import add_food, auth_header


@pytest.fixture
def menu(client, admin_token) -> dict:
    foods = [
        dict(name="Veg Thali", calories=450, protein=15, carbs=60, fats=18, isVeg=True),
        dict(name="Poha", calories=180, protein=4, carbs=32, fats=4, isVeg=True),
        dict(name="Masala Chai", calories=90, protein=2, carbs=14, fats=3, isVeg=True),
        dict(name="Chicken Roll", calories=420, protein=22, carbs=38, fats=20, isVeg=False),
        dict(name="Egg Sandwich", calories=240, protein=16, carbs=30, fats=9, isVeg=False),
        dict(name="Upma", calories=200, protein=5, carbs=35, fats=5, isVeg=True, isAvailable=False),
    ]
    return {f["name"]: add_food(client, admin_token, **f) for f in foods}


def _names(response) -> list:
    assert response.status_code == 200, response.text
    return [f["name"] for f in response.json()]


def test_menu_defaults_to_available_items_by_name(client, menu) -> None:
    names = _names(client.get("/food"))

    assert names == ["Chicken Roll", "Egg Sandwich", "Masala Chai", "Poha", "Veg Thali"]


def test_menu_veg_and_max_calories(client, menu) -> None:
    response = client.get("/food", params={"isVeg": "true", "maxCalories": 250})

    foods = response.json()
    assert [f["name"] for f in foods] == ["Masala Chai", "Poha"]
    assert all(f["isVeg"] is True and f["isAvailable"] is True and f["calories"] <= 250 for f in foods)


def test_menu_non_veg(client, menu) -> None:
    assert _names(client.get("/food", params={"isVeg": "false"})) == ["Chicken Roll", "Egg Sandwich"]


def test_menu_ignores_unknown_veg_value(client, menu) -> None:
    assert len(_names(client.get("/food", params={"isVeg": "maybe"}))) == 5


def test_menu_search_is_case_insensitive_substring(client, menu) -> None:
    assert _names(client.get("/food", params={"search": "CHAI"})) == ["Masala Chai"]
    assert _names(client.get("/food", params={"search": "a"})) == [
        "Egg Sandwich",
        "Masala Chai",
        "Poha",
        "Veg Thali",
    ]


def test_menu_search_treats_wildcards_literally(client, menu) -> None:
    assert _names(client.get("/food", params={"search": "%"})) == []


def test_menu_high_protein(client, menu) -> None:
    names = _names(client.get("/food", params={"highProtein": "true", "sortBy": "protein_desc"}))

    assert names == ["Chicken Roll", "Egg Sandwich", "Veg Thali"]


def test_menu_calorie_range_is_inclusive(client, menu) -> None:
    names = _names(client.get("/food", params={"minCalories": 180, "maxCalories": 420, "sortBy": "calories_asc"}))

    assert names == ["Poha", "Egg Sandwich", "Chicken Roll"]


def test_menu_sort_calories_desc(client, menu) -> None:
    assert _names(client.get("/food", params={"sortBy": "calories_desc"})) == [
        "Veg Thali",
        "Chicken Roll",
        "Egg Sandwich",
        "Poha",
        "Masala Chai",
    ]


def test_menu_unknown_sort_falls_back_to_name(client, menu) -> None:
    assert _names(client.get("/food", params={"sortBy": "random"}))[0] == "Chicken Roll"


def test_menu_filters_compose(client, menu) -> None:
    names = _names(
        client.get("/food", params={"isVeg": "false", "highProtein": "true", "maxCalories": 300})
    )

    assert names == ["Egg Sandwich"]


def test_menu_rejects_non_numeric_bounds(client, menu) -> None:
    response = client.get("/food", params={"minCalories": "lots"})

    assert response.status_code == 400
    assert "error" in response.json()


def test_get_single_food(client, menu) -> None:
    food_id = menu["Poha"]["id"]

    response = client.get(f"/food/{food_id}")

    assert response.status_code == 200
    assert response.json()["name"] == "Poha"


def test_get_missing_food(client) -> None:
    response = client.get("/food/9999")

    assert response.status_code == 404
    assert response.json() == {"error": "Food item not found"}


def test_admin_list_includes_unavailable(client, admin_token, menu) -> None:
    response = client.get("/food/admin/all", headers=auth_header(admin_token))

    assert "Upma" in _names(response)
    assert len(response.json()) == 6


def test_admin_list_forbidden_for_users(client, user_token) -> None:
    response = client.get("/food/admin/all", headers=auth_header(user_token))

    assert response.status_code == 403


@pytest.mark.parametrize(
    ("method", "path", "body"),
    [
        ("post", "/food", {"name": "Idli", "calories": 210, "protein": 6, "carbs": 38, "fats": 4}),
        ("post", "/food", {"calories": -1}),
        ("put", "/food/1", {"calories": 100}),
        ("put", "/food/1", {"calories": "many"}),
        ("delete", "/food/1", None),
    ],
)
def test_food_mutations_forbidden_for_non_admin(client, user_token, method, path, body) -> None:
    kwargs = {"headers": auth_header(user_token)}
    if body is not None:
        kwargs["json"] = body

    response = getattr(client, method)(path, **kwargs)

    assert response.status_code == 403
    assert response.json() == {"error": "Admin access required"}


def test_food_mutations_require_token(client) -> None:
    response = client.post("/food", json={"name": "Idli"})

    assert response.status_code == 401


def test_create_food_validates(client, admin_token) -> None:
    response = client.post(
        "/food",
        json={"name": "Bad", "calories": 100, "protein": -1, "carbs": 1, "fats": 1},
        headers=auth_header(admin_token),
    )

    assert response.status_code == 400


def test_create_food_missing_fields(client, admin_token) -> None:
    response = client.post("/food", json={"name": "Idli"}, headers=auth_header(admin_token))

    assert response.status_code == 400


def test_update_food_is_partial(client, admin_token, menu) -> None:
    food = menu["Poha"]

    response = client.put(
        f"/food/{food['id']}",
        json={"calories": 190, "isAvailable": False},
        headers=auth_header(admin_token),
    )

    assert response.status_code == 200
    updated = response.json()["food"]
    assert updated["calories"] == 190
    assert updated["isAvailable"] is False
    assert updated["name"] == "Poha"
    assert updated["protein"] == 4
    assert "Poha" not in _names(client.get("/food"))


def test_update_missing_food(client, admin_token) -> None:
    response = client.put("/food/9999", json={"calories": 1}, headers=auth_header(admin_token))

    assert response.status_code == 404


def test_delete_food_cascades(client, admin_token, user_token, menu) -> None:
    food_id = menu["Poha"]["id"]
    headers = auth_header(user_token)
    client.post("/intake", json={"foodId": food_id, "quantity": 2}, headers=headers)
    client.post("/favorites", json={"foodId": food_id}, headers=headers)

    response = client.delete(f"/food/{food_id}", headers=auth_header(admin_token))

    assert response.status_code == 200
    assert client.get(f"/food/{food_id}").status_code == 404
    daily = client.get("/intake/daily", params={"date": date.today().isoformat()}, headers=headers).json()
    assert daily["intakes"] == []
    assert daily["totals"]["calories"] == 0
    assert client.get("/favorites", headers=headers).json() == []


def test_delete_missing_food(client, admin_token) -> None:
    response = client.delete("/food/9999", headers=auth_header(admin_token))

    assert response.status_code == 404
