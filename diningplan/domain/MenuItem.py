"""MenuItem domain entity: one dish served at a meal, with per-serving nutrition."""
from dataclasses import dataclass

from diningplan.domain.Category import Category


@dataclass(frozen=True)
class MenuItem:
    name: str
    category: Category = Category.MISC
    calories: int = 0
    protein: int = 0
    carbs: int = 0
    fat: int = 0
    description: str = ""

    def __str__(self) -> str:
        return f"{self.name} [{self.category}] - {self.calories} cal | {self.protein}g protein"

    @property
    def protein_density(self) -> float:
        '''Protein grams per calorie. Calories are clamped to 1 to avoid division by zero.'''
        return float(self.protein) / max(float(self.calories), 1.0)

    def to_dict(self):
        return {
            "name": self.name,
            "description": self.description,
            "category": self.category.value,
            "calories": self.calories,
            "protein": self.protein,
            "carbs": self.carbs,
            "fat": self.fat,
        }
