from typing import Literal, Optional
from pydantic import constr, confloat, conint

from canteen_api.schemas.base import CamelModel

Gender = Literal["male", "female"]
ActivityLevel = Literal["low", "medium", "high"]


class UserCreate(CamelModel):
    email: constr(strip_whitespace=True, min_length=3, max_length=255)
    password: constr(min_length=6)
    name: constr(strip_whitespace=True, min_length=1, max_length=100)


class UserLogin(CamelModel):
    email: constr(strip_whitespace=True, min_length=1)
    password: constr(min_length=1)


class UserOut(CamelModel):
    id: int
    email: str
    name: str
    height: float
    weight: float
    age: int
    gender: Gender
    activity_level: ActivityLevel
    daily_calorie_goal: int
    is_admin: bool


class ProfileUpdate(CamelModel):
    """Fields left out (or null) keep their stored value."""

    name: Optional[constr(strip_whitespace=True, min_length=1, max_length=100)] = None
    height: Optional[confloat(gt=0, le=300)] = None
    weight: Optional[confloat(gt=0, le=500)] = None
    age: Optional[conint(ge=1, le=150)] = None
    gender: Optional[Gender] = None
    activity_level: Optional[ActivityLevel] = None
    daily_calorie_goal: Optional[conint(ge=0)] = None


class AuthResponse(CamelModel):
    message: str
    token: str
    user: UserOut


class ProfileUpdateResponse(CamelModel):
    message: str
    user: UserOut


class GoalEstimateRequest(CamelModel):
    weight: confloat(gt=0, le=500)
    height: confloat(gt=0, le=300)
    age: conint(ge=1, le=150)
    gender: Gender
    activity_level: ActivityLevel = "medium"


class GoalEstimate(CamelModel):
    bmr: int
    tdee: int
