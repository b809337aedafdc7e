"""Menu queries and admin catalog edits."""

import logging
from dataclasses import dataclass
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from canteen_api.errors import NotFoundError
from canteen_api.models.food import HIGH_PROTEIN_GRAMS, FoodItem
from canteen_api.schemas.food_schema import FoodCreate, FoodPatch

logger = logging.getLogger(__name__)

SORT_KEYS = {
    "name": (FoodItem.name.asc(),),
    "calories_asc": (FoodItem.calories.asc(), FoodItem.name.asc()),
    "calories_desc": (FoodItem.calories.desc(), FoodItem.name.asc()),
    "protein_desc": (FoodItem.protein.desc(), FoodItem.name.asc()),
}
DEFAULT_SORT = "name"


@dataclass
class MenuFilters:
    search: Optional[str] = None
    is_veg: Optional[bool] = None
    high_protein: bool = False
    min_calories: Optional[int] = None
    max_calories: Optional[int] = None
    sort_by: str = DEFAULT_SORT


def parse_flag(raw: Optional[str]) -> Optional[bool]:
    """'true' / 'false' (any case); anything else means "no filter"."""
    if raw is None:
        return None
    value = raw.strip().lower()
    if value == "true":
        return True
    if value == "false":
        return False
    return None


def search_menu(db: Session, filters: MenuFilters) -> List[FoodItem]:
    q = db.query(FoodItem).filter(FoodItem.is_available.is_(True))

    search = (filters.search or "").strip()
    if search:
        q = q.filter(func.lower(FoodItem.name).contains(search.lower(), autoescape=True))
    if filters.is_veg is not None:
        q = q.filter(FoodItem.is_veg.is_(filters.is_veg))
    if filters.min_calories is not None:
        q = q.filter(FoodItem.calories >= filters.min_calories)
    if filters.max_calories is not None:
        q = q.filter(FoodItem.calories <= filters.max_calories)
    if filters.high_protein:
        q = q.filter(FoodItem.protein >= HIGH_PROTEIN_GRAMS)

    order = SORT_KEYS.get(filters.sort_by or DEFAULT_SORT, SORT_KEYS[DEFAULT_SORT])
    return q.order_by(*order, FoodItem.id.asc()).all()


def list_all(db: Session) -> List[FoodItem]:
    return db.query(FoodItem).order_by(FoodItem.name.asc(), FoodItem.id.asc()).all()


def get_food(db: Session, food_id: int) -> FoodItem:
    food = db.get(FoodItem, food_id)
    if food is None:
        raise NotFoundError("Food item not found")
    return food


def create_food(db: Session, payload: FoodCreate) -> FoodItem:
    food = FoodItem(
        name=payload.name,
        calories=payload.calories,
        protein=payload.protein,
        carbs=payload.carbs,
        fats=payload.fats,
        is_veg=payload.is_veg,
        is_available=payload.is_available,
    )
    db.add(food)
    db.commit()
    db.refresh(food)
    logger.info("Food item %s created (%s)", food.id, food.name)
    return food


def update_food(db: Session, food_id: int, patch: FoodPatch) -> FoodItem:
    food = get_food(db, food_id)
    if patch.name is not None:
        food.name = patch.name
    if patch.calories is not None:
        food.calories = patch.calories
    if patch.protein is not None:
        food.protein = patch.protein
    if patch.carbs is not None:
        food.carbs = patch.carbs
    if patch.fats is not None:
        food.fats = patch.fats
    if patch.is_veg is not None:
        food.is_veg = patch.is_veg
    if patch.is_available is not None:
        food.is_available = patch.is_available
    db.commit()
    db.refresh(food)
    logger.info("Food item %s updated", food.id)
    return food


def delete_food(db: Session, food_id: int) -> None:
    food = get_food(db, food_id)
    db.delete(food)
    db.commit()
    logger.info("Food item %s deleted", food_id)
