
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from canteen_api.database import get_db
from canteen_api.errors import NotFoundError, ValidationError
from canteen_api.models.favorite import FavoriteRecord
from canteen_api.models.food import FoodItem
from canteen_api.schemas.base import MessageResponse
from canteen_api.schemas.food_schema import (
    FavoriteCheck,
    FavoriteCreate,
    FavoriteCreateResponse,
    FavoriteFood,
    FoodOut,
)
from canteen_api.services import catalog_service
from canteen_api.utils.security import TokenClaims, current_claims

router = APIRouter(prefix="/favorites", tags=["Favorites"])


def _find(db: Session, user_id: int, food_id: int):
    return (
        db.query(FavoriteRecord)
        .filter(FavoriteRecord.user_id == user_id, FavoriteRecord.food_id == food_id)
        .first()
    )


@router.get("", response_model=List[FavoriteFood])
def list_favorites(claims: TokenClaims = Depends(current_claims), db: Session = Depends(get_db)):
    rows = (
        db.query(FavoriteRecord, FoodItem)
        .join(FoodItem, FoodItem.id == FavoriteRecord.food_id)
        .filter(FavoriteRecord.user_id == claims.user_id)
        .order_by(FoodItem.name.asc(), FoodItem.id.asc())
        .all()
    )
    return [
        FavoriteFood(**FoodOut.model_validate(food).model_dump(), favorite_id=fav.id)
        for fav, food in rows
    ]


@router.post("", response_model=FavoriteCreateResponse, status_code=201)
def add_favorite(
    payload: FavoriteCreate,
    claims: TokenClaims = Depends(current_claims),
    db: Session = Depends(get_db),
):
    food = catalog_service.get_food(db, payload.food_id)
    if _find(db, claims.user_id, food.id):
        raise ValidationError("Already in favorites")

    fav = FavoriteRecord(user_id=claims.user_id, food_id=food.id)
    db.add(fav)
    try:
        db.commit()
    except IntegrityError:
        # concurrent insert of the same pair
        db.rollback()
        raise ValidationError("Already in favorites")
    db.refresh(fav)
    return FavoriteCreateResponse(message="Added to favorites", favorite_id=fav.id, food=food)


@router.delete("/{food_id}", response_model=MessageResponse)
def remove_favorite(
    food_id: int,
    claims: TokenClaims = Depends(current_claims),
    db: Session = Depends(get_db),
):
    fav = _find(db, claims.user_id, food_id)
    if fav is None:
        raise NotFoundError("Favorite not found")
    db.delete(fav)
    db.commit()
    return MessageResponse(message="Removed from favorites")


@router.get("/check/{food_id}", response_model=FavoriteCheck)
def check_favorite(
    food_id: int,
    claims: TokenClaims = Depends(current_claims),
    db: Session = Depends(get_db),
):
    return FavoriteCheck(is_favorite=_find(db, claims.user_id, food_id) is not None)
