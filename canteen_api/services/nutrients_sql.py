
from datetime import date, timedelta
from typing import Dict, List, Optional

from sqlalchemy import Boolean, Date, DateTime, Float, Integer, bindparam, text
from sqlalchemy.orm import Session

_DAILY_SQL = (
    text(
        """
        SELECT
          di.id, di.user_id, di.food_id, di.quantity, di.date, di.created_at,
          f.name, f.calories, f.protein, f.carbs, f.fats, f.is_veg
        FROM daily_intake di
        JOIN food_items f ON f.id = di.food_id
        WHERE di.user_id = :uid
          AND di.date = :day
        ORDER BY di.created_at DESC, di.id DESC
        """
    )
    .bindparams(bindparam("day", type_=Date))
    .columns(
        date=Date,
        created_at=DateTime,
        protein=Float,
        carbs=Float,
        fats=Float,
        is_veg=Boolean,
    )
)

_HISTORY_SQL = (
    text(
        """
        SELECT
          di.date                                        AS date,
          COALESCE(SUM(f.calories * di.quantity), 0)     AS total_calories,
          COALESCE(SUM(f.protein  * di.quantity), 0)     AS total_protein,
          COALESCE(SUM(f.carbs    * di.quantity), 0)     AS total_carbs,
          COALESCE(SUM(f.fats     * di.quantity), 0)     AS total_fats
        FROM daily_intake di
        JOIN food_items f ON f.id = di.food_id
        WHERE di.user_id = :uid
          AND di.date BETWEEN :start AND :end
        GROUP BY di.date
        ORDER BY di.date DESC
        """
    )
    .bindparams(bindparam("start", type_=Date), bindparam("end", type_=Date))
    .columns(
        date=Date,
        total_calories=Integer,
        total_protein=Float,
        total_carbs=Float,
        total_fats=Float,
    )
)


def history_window(days: int, today: Optional[date] = None) -> tuple:
    """Trailing ``days`` calendar days ending today, both ends inclusive."""
    end = today or date.today()
    return end - timedelta(days=days - 1), end


def daily_rows(db: Session, user_id: int, day: date) -> List[Dict]:
    rows = db.execute(_DAILY_SQL, {"uid": user_id, "day": day}).mappings().all()
    return [dict(r) for r in rows]


def history_rows(db: Session, user_id: int, days: int, today: Optional[date] = None) -> List[Dict]:
    start, end = history_window(days, today)
    rows = db.execute(
        _HISTORY_SQL, {"uid": user_id, "start": start, "end": end}
    ).mappings().all()
    return [
        {
            "date": r["date"],
            "total_calories": int(r["total_calories"] or 0),
            "total_protein": float(r["total_protein"] or 0),
            "total_carbs": float(r["total_carbs"] or 0),
            "total_fats": float(r["total_fats"] or 0),
        }
        for r in rows
    ]
