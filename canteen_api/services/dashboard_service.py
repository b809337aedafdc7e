
from __future__ import annotations
from datetime import date
from sqlalchemy.orm import Session

from canteen_api.models.user import User
from canteen_api.schemas.responses import (
    DailyIntakeResponse,
    HistoryDay,
    HistoryResponse,
    IntakeEntry,
    TodaySummary,
)
from canteen_api.services.nutrients_sql import daily_rows, history_rows
from canteen_api.services.nutrition import sum_totals, summarize_day


def get_daily(db: Session, user_id: int, day: date | None = None) -> DailyIntakeResponse:
    day = day or date.today()
    rows = daily_rows(db, user_id, day)
    return DailyIntakeResponse(
        date=day,
        intakes=[IntakeEntry(**r) for r in rows],
        totals=sum_totals(rows),
    )


def get_today_summary(db: Session, user: User, today: date | None = None) -> TodaySummary:
    today = today or date.today()
    totals = sum_totals(daily_rows(db, user.id, today))
    return summarize_day(today, totals, user.daily_calorie_goal)


def get_history(db: Session, user: User, days: int = 30, today: date | None = None) -> HistoryResponse:
    goal = int(user.daily_calorie_goal or 0)
    history = [
        HistoryDay(goal=goal, exceeded=r["total_calories"] > goal, **r)
        for r in history_rows(db, user.id, days, today)
    ]
    return HistoryResponse(history=history, goal=goal)
