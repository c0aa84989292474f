"""Aggregate nutrition for a plan."""
from dataclasses import dataclass, asdict


@dataclass(frozen=True)
class NutritionTotals:
    calories: int = 0
    protein: int = 0
    carbs: int = 0
    fat: int = 0

    def to_dict(self):
        return asdict(self)
