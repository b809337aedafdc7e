
from __future__ import annotations

import math
from datetime import date
from typing import Iterable, Mapping, Optional

from canteen_api.schemas.responses import MacroNutrients, NutrientTotals, TodaySummary
from canteen_api.services.goal_estimator import round_half_up

NUTRIENT_FIELDS = ("calories", "protein", "carbs", "fats")


def round1(value: float) -> float:
    return math.floor(value * 10 + 0.5) / 10


def sum_totals(rows: Iterable[Mapping]) -> NutrientTotals:
    """rows: mappings carrying ``quantity`` and the food's per-unit nutrients."""
    acc = {k: 0 for k in NUTRIENT_FIELDS}
    for r in rows:
        qty = int(r["quantity"])
        acc["calories"] += int(r["calories"]) * qty
        acc["protein"] += float(r["protein"]) * qty
        acc["carbs"] += float(r["carbs"]) * qty
        acc["fats"] += float(r["fats"]) * qty
    return NutrientTotals(**acc)


def goal_progress(consumed: int, goal: Optional[int]) -> dict:
    """remaining / percentage / exceeded for ``consumed`` against ``goal``.

    A zero or missing goal never divides: percentage and remaining are 0 and
    any intake at all counts as exceeded.
    """
    goal = int(goal or 0)
    if goal <= 0:
        return {"goal": 0, "remaining": 0, "percentage": 0, "exceeded": consumed > 0}
    return {
        "goal": goal,
        "remaining": max(0, goal - consumed),
        "percentage": min(100, round_half_up(consumed * 100 / goal)),
        "exceeded": consumed > goal,
    }


def summarize_day(day: date, totals: NutrientTotals, goal: Optional[int]) -> TodaySummary:
    consumed = int(totals.calories)
    return TodaySummary(
        date=day,
        consumed=consumed,
        nutrients=MacroNutrients(
            protein=round1(totals.protein),
            carbs=round1(totals.carbs),
            fats=round1(totals.fats),
        ),
        **goal_progress(consumed, goal),
    )
