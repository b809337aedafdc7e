"""Daily calorie target from a body profile (Mifflin-St Jeor)."""

import math

ACTIVITY_MULTIPLIERS = {
    "low": 1.2,      # sedentary
    "medium": 1.55,  # exercise 3-5 days/week
    "high": 1.9,     # exercise 6-7 days/week
}
DEFAULT_ACTIVITY_LEVEL = "medium"


def round_half_up(value: float) -> int:
    """Round .5 upwards (towards +inf), unlike the builtin banker's ``round``."""
    return int(math.floor(value + 0.5))


def calculate_bmr(weight: float, height: float, age: float, gender: str) -> int:
    """Basal metabolic rate. weight in kg, height in cm, age in years."""
    offset = 5 if gender == "male" else -161
    return round_half_up(10 * weight + 6.25 * height - 5 * age + offset)


def calculate_tdee(bmr: int, activity_level: str) -> int:
    multiplier = ACTIVITY_MULTIPLIERS.get(
        activity_level, ACTIVITY_MULTIPLIERS[DEFAULT_ACTIVITY_LEVEL]
    )
    return round_half_up(bmr * multiplier)


def calculate_daily_calories(
    weight: float, height: float, age: float, gender: str, activity_level: str
) -> int:
    return calculate_tdee(calculate_bmr(weight, height, age, gender), activity_level)
