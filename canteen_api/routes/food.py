
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from canteen_api.database import get_db
from canteen_api.schemas.base import MessageResponse
from canteen_api.schemas.food_schema import FoodCreate, FoodMutationResponse, FoodOut, FoodPatch
from canteen_api.services import catalog_service
from canteen_api.services.catalog_service import MenuFilters, parse_flag
from canteen_api.utils.security import require_admin

router = APIRouter(prefix="/food", tags=["Food"])


@router.get("", response_model=List[FoodOut])
def list_menu(
    search: Optional[str] = Query(None, description="case-insensitive name match"),
    is_veg: Optional[str] = Query(None, alias="isVeg", description="true | false"),
    min_calories: Optional[int] = Query(None, alias="minCalories", ge=0),
    max_calories: Optional[int] = Query(None, alias="maxCalories", ge=0),
    high_protein: Optional[str] = Query(None, alias="highProtein", description="true: protein >= 15g"),
    sort_by: Optional[str] = Query(
        None, alias="sortBy", description="name | calories_asc | calories_desc | protein_desc"
    ),
    db: Session = Depends(get_db),
):
    filters = MenuFilters(
        search=search,
        is_veg=parse_flag(is_veg),
        high_protein=parse_flag(high_protein) is True,
        min_calories=min_calories,
        max_calories=max_calories,
        sort_by=sort_by or catalog_service.DEFAULT_SORT,
    )
    return catalog_service.search_menu(db, filters)


@router.get("/admin/all", response_model=List[FoodOut], dependencies=[Depends(require_admin)])
def list_all_foods(db: Session = Depends(get_db)):
    return catalog_service.list_all(db)


@router.get("/{food_id}", response_model=FoodOut)
def get_food(food_id: int, db: Session = Depends(get_db)):
    return catalog_service.get_food(db, food_id)


@router.post(
    "",
    response_model=FoodMutationResponse,
    status_code=201,
    dependencies=[Depends(require_admin)],
)
def create_food(payload: FoodCreate, db: Session = Depends(get_db)):
    food = catalog_service.create_food(db, payload)
    return FoodMutationResponse(message="Food item added", food=food)


@router.put("/{food_id}", response_model=FoodMutationResponse, dependencies=[Depends(require_admin)])
def update_food(food_id: int, patch: FoodPatch, db: Session = Depends(get_db)):
    food = catalog_service.update_food(db, food_id, patch)
    return FoodMutationResponse(message="Food item updated", food=food)


@router.delete("/{food_id}", response_model=MessageResponse, dependencies=[Depends(require_admin)])
def delete_food(food_id: int, db: Session = Depends(get_db)):
    catalog_service.delete_food(db, food_id)
    return MessageResponse(message="Food item deleted")
