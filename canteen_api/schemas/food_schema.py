from typing import Optional
from pydantic import confloat, conint, constr

from canteen_api.schemas.base import CamelModel


class FoodOut(CamelModel):
    id: int
    name: str
    calories: int
    protein: float
    carbs: float
    fats: float
    is_veg: bool
    is_available: bool


class FoodCreate(CamelModel):
    name: constr(strip_whitespace=True, min_length=1, max_length=255)
    calories: conint(ge=0)
    protein: confloat(ge=0)
    carbs: confloat(ge=0)
    fats: confloat(ge=0)
    is_veg: bool = False
    is_available: bool = True


class FoodPatch(CamelModel):
    name: Optional[constr(strip_whitespace=True, min_length=1, max_length=255)] = None
    calories: Optional[conint(ge=0)] = None
    protein: Optional[confloat(ge=0)] = None
    carbs: Optional[confloat(ge=0)] = None
    fats: Optional[confloat(ge=0)] = None
    is_veg: Optional[bool] = None
    is_available: Optional[bool] = None


class FoodMutationResponse(CamelModel):
    message: str
    food: FoodOut


class FavoriteFood(FoodOut):
    favorite_id: int


class FavoriteCreate(CamelModel):
    food_id: int


class FavoriteCreateResponse(CamelModel):
    message: str
    favorite_id: int
    food: FoodOut


class FavoriteCheck(CamelModel):
    is_favorite: bool
