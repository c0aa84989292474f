"""Food-group categories assigned to menu items."""
from enum import Enum
from typing import Tuple


class Category(str, Enum):
    PROTEIN = "Protein"
    VEGGIES = "Veggies"
    FRUITS = "Fruits"
    GRAINS = "Grains"
    DAIRY = "Dairy"
    MISC = "Misc"

    def __str__(self) -> str:
        return self.value

    @property
    def is_trackable(self) -> bool:
        """Misc items never count towards the food-group checklist."""
        return self is not Category.MISC


# Checklist enumeration shown to the user (Misc deliberately excluded)
CHECKLIST_CATEGORIES: Tuple[Category, ...] = (
    Category.PROTEIN,
    Category.VEGGIES,
    Category.FRUITS,
    Category.GRAINS,
    Category.DAIRY,
)
