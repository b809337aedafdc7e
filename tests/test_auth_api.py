"""Tests for registration, login, profile and token handling."""

from datetime import datetime, timedelta, timezone

from jose import jwt

from canteen_api import config
from canteen_api.utils.security import create_access_token, verify_token
from tests.conftest import auth_header, register


def test_register_returns_token_and_user(client) -> None:
    response = client.post(
        "/auth/register",
        json={"email": "ravi@example.com", "password": "secret123", "name": "Ravi"},
    )

    assert response.status_code == 201
    data = response.json()
    assert data["token"]
    assert data["user"]["email"] == "ravi@example.com"
    assert data["user"]["dailyCalorieGoal"] == 2000
    assert data["user"]["isAdmin"] is False
    assert "password" not in data["user"]


def test_register_duplicate_email_is_rejected(client) -> None:
    register(client, "dup@example.com")

    response = client.post(
        "/auth/register",
        json={"email": "dup@example.com", "password": "secret123", "name": "Again"},
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Email already registered"}


def test_register_requires_fields(client) -> None:
    response = client.post("/auth/register", json={"email": "x@example.com", "password": "secret123"})

    assert response.status_code == 400
    assert "error" in response.json()


def test_register_short_password(client) -> None:
    response = client.post(
        "/auth/register", json={"email": "x@example.com", "password": "abc", "name": "X"}
    )

    assert response.status_code == 400


def test_login_success(client) -> None:
    register(client, "meera@example.com", "Meera")

    response = client.post("/auth/login", json={"email": "meera@example.com", "password": "secret123"})

    assert response.status_code == 200
    assert response.json()["user"]["name"] == "Meera"


def test_login_failures_look_identical(client) -> None:
    register(client, "meera@example.com", "Meera")

    wrong_password = client.post("/auth/login", json={"email": "meera@example.com", "password": "nope123"})
    unknown_email = client.post("/auth/login", json={"email": "ghost@example.com", "password": "secret123"})

    assert wrong_password.status_code == unknown_email.status_code == 401
    assert wrong_password.json() == unknown_email.json() == {"error": "Invalid email or password"}


def test_profile_requires_token(client) -> None:
    response = client.get("/auth/profile")

    assert response.status_code == 401
    assert response.json()["error"]


def test_profile_rejects_garbage_token(client) -> None:
    response = client.get("/auth/profile", headers=auth_header("not-a-jwt"))

    assert response.status_code == 401


def test_profile_rejects_expired_token(client, user_token) -> None:
    claims = verify_token(user_token)
    expired = jwt.encode(
        {"sub": str(claims.user_id), "is_admin": False, "exp": datetime.now(timezone.utc) - timedelta(seconds=5)},
        config.JWT_SECRET,
        algorithm=config.JWT_ALG,
    )

    response = client.get("/auth/profile", headers=auth_header(expired))

    assert response.status_code == 401


def test_profile_rejects_token_signed_with_other_key(client, user_token) -> None:
    claims = verify_token(user_token)
    forged = jwt.encode(
        {"sub": str(claims.user_id), "is_admin": True, "exp": datetime.now(timezone.utc) + timedelta(days=1)},
        "some-other-secret",
        algorithm=config.JWT_ALG,
    )

    response = client.get("/food/admin/all", headers=auth_header(forged))

    assert response.status_code == 401


def test_token_expires_after_seven_days() -> None:
    token = create_access_token(1, "a@example.com", False)

    payload = jwt.decode(token, config.JWT_SECRET, algorithms=[config.JWT_ALG])

    remaining = payload["exp"] - datetime.now(timezone.utc).timestamp()
    assert timedelta(days=6, hours=23) < timedelta(seconds=remaining) <= timedelta(days=7)


def test_profile_partial_update(client, user_token) -> None:
    response = client.put(
        "/auth/profile",
        json={"weight": 64.5, "activityLevel": "high", "dailyCalorieGoal": 2400},
        headers=auth_header(user_token),
    )

    assert response.status_code == 200
    user = response.json()["user"]
    assert user["weight"] == 64.5
    assert user["activityLevel"] == "high"
    assert user["dailyCalorieGoal"] == 2400
    # untouched fields keep their values
    assert user["name"] == "Asha"
    assert user["height"] == 170
    assert user["gender"] == "male"

    profile = client.get("/auth/profile", headers=auth_header(user_token)).json()
    assert profile == user


def test_profile_update_validates_enums(client, user_token) -> None:
    response = client.put(
        "/auth/profile", json={"gender": "robot"}, headers=auth_header(user_token)
    )

    assert response.status_code == 400


def test_goal_estimate_endpoint(client) -> None:
    response = client.post(
        "/auth/goal-estimate",
        json={"weight": 70, "height": 175, "age": 25, "gender": "male", "activityLevel": "medium"},
    )

    assert response.status_code == 200
    assert response.json() == {"bmr": 1674, "tdee": 2595}


def test_goal_estimate_from_stored_profile(client, user_token) -> None:
    client.put(
        "/auth/profile",
        json={"weight": 70, "height": 175, "age": 25, "gender": "male", "activityLevel": "low"},
        headers=auth_header(user_token),
    )

    response = client.get("/auth/profile/goal-estimate", headers=auth_header(user_token))

    assert response.json() == {"bmr": 1674, "tdee": 2009}


def test_register_accepts_long_password(client) -> None:
    password = "x" * 80

    response = client.post(
        "/auth/register", json={"email": "long@example.com", "password": password, "name": "Long"}
    )
    login = client.post("/auth/login", json={"email": "long@example.com", "password": password})

    assert response.status_code == 201
    assert login.status_code == 200


def test_register_race_on_same_email_is_a_bad_request(client, monkeypatch) -> None:
    register(client, "race@example.com", "First")
    # simulate a second request that passed the lookup before the first one committed
    monkeypatch.setattr("canteen_api.routes.auth._email_taken", lambda db, email: False)

    response = client.post(
        "/auth/register", json={"email": "race@example.com", "password": "secret123", "name": "Second"}
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Email already registered"}
