
import os
import requests
from dotenv import load_dotenv
from typing import Optional

load_dotenv()


BASE_URL = os.getenv("API_BASE_URL", "http://127.0.0.1:8000").rstrip("/")
TIMEOUT = 30


def _auth(token: Optional[str]):
    return {"Authorization": f"Bearer {token}"} if token else {}


def _json_or_error(res: requests.Response):
    """
    Parse the response as JSON.
    Failures are normalised to {"error": "..."} (the API's own error shape).
    """
    try:
        res.raise_for_status()
        try:
            return res.json()
        except ValueError:
            return {"error": f"Unexpected response (non-JSON): {res.text[:500]}"}
    except requests.exceptions.HTTPError:
        try:
            j = res.json()
            return {"error": j.get("error") or j.get("detail") or str(j), "status": res.status_code}
        except ValueError:
            return {"error": f"HTTP {res.status_code}: {res.text[:500]}", "status": res.status_code}


def _request(method: str, path: str, token: Optional[str] = None, **kwargs):
    try:
        res = requests.request(
            method, f"{BASE_URL}{path}", headers=_auth(token), timeout=TIMEOUT, **kwargs
        )
    except requests.exceptions.RequestException as e:
        return {"error": f"Network error: {e}"}
    return _json_or_error(res)


# ── auth ──────────────────────────────────────
def register(email, password, name):
    """POST /auth/register → {"token", "user"} or {"error"}"""
    return _request("POST", "/auth/register", json={"email": email, "password": password, "name": name})


def login(email, password):
    """POST /auth/login → {"token", "user"} or {"error"}"""
    return _request("POST", "/auth/login", json={"email": email, "password": password})


def get_profile(token):
    return _request("GET", "/auth/profile", token)


def update_profile(token, **fields):
    """PUT /auth/profile; only the keys passed are changed."""
    return _request("PUT", "/auth/profile", token, json=fields)


def estimate_goal(weight, height, age, gender, activity_level):
    return _request(
        "POST",
        "/auth/goal-estimate",
        json={
            "weight": weight,
            "height": height,
            "age": age,
            "gender": gender,
            "activityLevel": activity_level,
        },
    )


# ── food ──────────────────────────────────────
def get_menu(search=None, is_veg=None, min_calories=None, max_calories=None,
             high_protein=False, sort_by="name"):
    params = {"sortBy": sort_by}
    if search:
        params["search"] = search
    if is_veg is not None:
        params["isVeg"] = "true" if is_veg else "false"
    if min_calories is not None:
        params["minCalories"] = int(min_calories)
    if max_calories is not None:
        params["maxCalories"] = int(max_calories)
    if high_protein:
        params["highProtein"] = "true"
    return _request("GET", "/food", params=params)


def get_all_foods_admin(token):
    return _request("GET", "/food/admin/all", token)


def create_food(token, data: dict):
    return _request("POST", "/food", token, json=data)


def update_food(token, food_id: int, data: dict):
    return _request("PUT", f"/food/{food_id}", token, json=data)


def delete_food(token, food_id: int):
    return _request("DELETE", f"/food/{food_id}", token)


# ── intake ────────────────────────────────────
def add_intake(token, food_id: int, quantity: int = 1, date: Optional[str] = None):
    payload = {"foodId": food_id, "quantity": quantity}
    if date:
        payload["date"] = date
    return _request("POST", "/intake", token, json=payload)


def get_daily(token, date: Optional[str] = None):
    return _request("GET", "/intake/daily", token, params={"date": date} if date else None)


def get_today(token):
    return _request("GET", "/intake/today", token)


def get_history(token, days: int = 30):
    return _request("GET", "/intake/history", token, params={"days": int(days)})


def update_intake(token, intake_id: int, quantity: int):
    return _request("PUT", f"/intake/{intake_id}", token, json={"quantity": quantity})


def delete_intake(token, intake_id: int):
    return _request("DELETE", f"/intake/{intake_id}", token)


# ── favorites ─────────────────────────────────
def get_favorites(token):
    return _request("GET", "/favorites", token)


def add_favorite(token, food_id: int):
    return _request("POST", "/favorites", token, json={"foodId": food_id})


def remove_favorite(token, food_id: int):
    return _request("DELETE", f"/favorites/{food_id}", token)


__all__ = [
    "register", "login", "get_profile", "update_profile", "estimate_goal",
    "get_menu", "get_all_foods_admin", "create_food", "update_food", "delete_food",
    "add_intake", "get_daily", "get_today", "get_history", "update_intake", "delete_intake",
    "get_favorites", "add_favorite", "remove_favorite",
]
