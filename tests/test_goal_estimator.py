"""Tests for the calorie goal estimator."""

import pytest

from canteen_api.services.goal_estimator import (
    calculate_bmr,
    calculate_daily_calories,
    calculate_tdee,
    round_half_up,
)


def test_reference_profile() -> None:
    expected = round_half_up(round_half_up(10 * 70 + 6.25 * 175 - 5 * 25 + 5) * 1.55)

    assert calculate_bmr(70, 175, 25, "male") == 1674
    assert calculate_daily_calories(70, 175, 25, "male", "medium") == expected == 2595


def test_female_offset() -> None:
    # 600 + 1031.25 - 150 - 161 = 1320.25
    assert calculate_bmr(60, 165, 30, "female") == 1320


@pytest.mark.parametrize(
    ("level", "expected"),
    [("low", 1200), ("medium", 1550), ("high", 1900)],
)
def test_activity_multipliers(level: str, expected: int) -> None:
    assert calculate_tdee(1000, level) == expected


def test_unknown_activity_level_falls_back_to_medium() -> None:
    assert calculate_tdee(1000, "extreme") == 1550


def test_rounds_half_up() -> None:
    assert round_half_up(2.5) == 3
    assert round_half_up(1673.5) == 1674
    assert round_half_up(-0.5) == 0
