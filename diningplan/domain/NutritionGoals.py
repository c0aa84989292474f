"""User daily goals."""
from dataclasses import dataclass, asdict


@dataclass(frozen=True)
class NutritionGoals:
    calories: int
    protein: int

    def to_dict(self):
        return asdict(self)
