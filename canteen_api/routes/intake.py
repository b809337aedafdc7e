
import datetime as dt
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from canteen_api.database import get_db
from canteen_api.errors import NotFoundError
from canteen_api.models.intake import IntakeRecord
from canteen_api.models.user import User
from canteen_api.routes.auth import current_user
from canteen_api.schemas.base import MessageResponse
from canteen_api.schemas.responses import (
    DailyIntakeResponse,
    HistoryResponse,
    IntakeCreate,
    IntakeCreateResponse,
    IntakeOut,
    IntakeQuantityUpdate,
    QuantityUpdateResponse,
    TodaySummary,
)
from canteen_api.services import catalog_service
from canteen_api.services.dashboard_service import get_daily, get_history, get_today_summary
from canteen_api.utils.security import TokenClaims, current_claims

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/intake", tags=["Intake"])


def _owned_intake(db: Session, intake_id: int, user_id: int) -> IntakeRecord:
    # another user's record is reported exactly like a missing one
    intake = (
        db.query(IntakeRecord)
        .filter(IntakeRecord.id == intake_id, IntakeRecord.user_id == user_id)
        .first()
    )
    if intake is None:
        raise NotFoundError("Intake record not found")
    return intake


@router.post("", response_model=IntakeCreateResponse, status_code=201)
def add_intake(
    payload: IntakeCreate,
    claims: TokenClaims = Depends(current_claims),
    db: Session = Depends(get_db),
):
    food = catalog_service.get_food(db, payload.food_id)
    intake = IntakeRecord(
        user_id=claims.user_id,
        food_id=food.id,
        quantity=payload.quantity,
        date=payload.date or dt.date.today(),
    )
    db.add(intake)
    db.commit()
    db.refresh(intake)
    return IntakeCreateResponse(
        message="Added to daily intake",
        intake=IntakeOut(
            id=intake.id,
            food_id=food.id,
            quantity=intake.quantity,
            date=intake.date,
            food=food,
        ),
    )


@router.get("/daily", response_model=DailyIntakeResponse)
def daily_intake(
    date: Optional[dt.date] = Query(None, description="YYYY-MM-DD, defaults to today"),
    claims: TokenClaims = Depends(current_claims),
    db: Session = Depends(get_db),
):
    return get_daily(db, claims.user_id, date)


@router.get("/today", response_model=TodaySummary)
def today_summary(user: User = Depends(current_user), db: Session = Depends(get_db)):
    return get_today_summary(db, user)


@router.get("/history", response_model=HistoryResponse)
def history(
    days: int = Query(30, ge=1, le=365),
    user: User = Depends(current_user),
    db: Session = Depends(get_db),
):
    return get_history(db, user, days)


@router.put("/{intake_id}", response_model=QuantityUpdateResponse)
def update_intake(
    intake_id: int,
    payload: IntakeQuantityUpdate,
    claims: TokenClaims = Depends(current_claims),
    db: Session = Depends(get_db),
):
    intake = _owned_intake(db, intake_id, claims.user_id)
    intake.quantity = payload.quantity
    db.commit()
    return QuantityUpdateResponse(message="Intake updated", quantity=intake.quantity)


@router.delete("/{intake_id}", response_model=MessageResponse)
def delete_intake(
    intake_id: int,
    claims: TokenClaims = Depends(current_claims),
    db: Session = Depends(get_db),
):
    intake = _owned_intake(db, intake_id, claims.user_id)
    db.delete(intake)
    db.commit()
    logger.info("Intake %s deleted by user %s", intake_id, claims.user_id)
    return MessageResponse(message="Intake deleted")
