"""Nutrition aggregation for a generated day plan."""
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Iterable, Union

from diningplan.domain.Category import CHECKLIST_CATEGORIES, Category
from diningplan.domain.MealPlan import MealPlan
from diningplan.domain.NutritionGoals import NutritionGoals
from diningplan.domain.NutritionTotals import NutritionTotals

Number = Union[int, float]


def aggregate(plan: MealPlan) -> NutritionTotals:
    """Sum per-serving nutrition times quantity over every meal of the plan."""
    calories = protein = carbs = fat = 0
    if plan is None:
        return NutritionTotals()
    for entry in plan.entries():
        calories += entry.calories
        protein += entry.protein
        carbs += entry.carbs
        fat += entry.fat
    return NutritionTotals(calories=calories, protein=protein, carbs=carbs, fat=fat)


def percentage(actual: Number, goal: Number) -> Number:
    """actual/goal as a percentage with one decimal (halves rounded up).

    A zero goal yields 0 instead of dividing by zero.
    """
    if not goal:
        return 0
    raw = Decimal(repr(float(actual) / goal * 100))
    return float(raw.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def goal_percentages(totals: NutritionTotals, goals: NutritionGoals) -> Dict[str, Number]:
    return {
        'calories': percentage(totals.calories, goals.calories),
        'protein': percentage(totals.protein, goals.protein),
    }


def checklist(fulfilled: Iterable[Category]) -> Dict[Category, bool]:
    """Ordered food-group checklist (Misc never appears)."""
    done = set(fulfilled)
    return {cat: cat in done for cat in CHECKLIST_CATEGORIES}


__all__ = ["aggregate", "percentage", "goal_percentages", "checklist"]
