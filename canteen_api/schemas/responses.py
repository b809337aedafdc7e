
import datetime as dt
from typing import List, Optional
from pydantic import conint

from canteen_api.schemas.base import CamelModel
from canteen_api.schemas.food_schema import FoodOut


class NutrientTotals(CamelModel):
    calories: int = 0
    protein: float = 0
    carbs: float = 0
    fats: float = 0


class MacroNutrients(CamelModel):
    protein: float
    carbs: float
    fats: float


class IntakeCreate(CamelModel):
    food_id: int
    quantity: conint(ge=1) = 1
    date: Optional[dt.date] = None


class IntakeQuantityUpdate(CamelModel):
    quantity: conint(ge=1)


class IntakeOut(CamelModel):
    id: int
    food_id: int
    quantity: int
    date: dt.date
    food: FoodOut


class IntakeCreateResponse(CamelModel):
    message: str
    intake: IntakeOut


class IntakeEntry(CamelModel):
    """One ledger row annotated with its food's nutritional facts."""

    id: int
    user_id: int
    food_id: int
    quantity: int
    date: dt.date
    created_at: Optional[dt.datetime] = None
    name: str
    calories: int
    protein: float
    carbs: float
    fats: float
    is_veg: bool


class DailyIntakeResponse(CamelModel):
    date: dt.date
    intakes: List[IntakeEntry]
    totals: NutrientTotals


class TodaySummary(CamelModel):
    date: dt.date
    goal: int
    consumed: int
    remaining: int
    percentage: int
    exceeded: bool
    nutrients: MacroNutrients


class HistoryDay(CamelModel):
    date: dt.date
    total_calories: int
    total_protein: float
    total_carbs: float
    total_fats: float
    goal: int
    exceeded: bool


class HistoryResponse(CamelModel):
    history: List[HistoryDay]
    goal: int


class QuantityUpdateResponse(CamelModel):
    message: str
    quantity: int
