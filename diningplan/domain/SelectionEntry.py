"""SelectionEntry: how many servings of one MenuItem were chosen for a meal."""
from dataclasses import dataclass

from diningplan.domain.MenuItem import MenuItem
from diningplan.utilities.constants import MAX_ITEM_QUANTITY


@dataclass(frozen=True)
class SelectionEntry:
    item: MenuItem
    quantity: int = 1

    def __post_init__(self):
        if not 1 <= self.quantity <= MAX_ITEM_QUANTITY:
            raise ValueError(f"quantity must be between 1 and {MAX_ITEM_QUANTITY}, got {self.quantity}")

    @property
    def calories(self) -> int:
        return self.item.calories * self.quantity

    @property
    def protein(self) -> int:
        return self.item.protein * self.quantity

    @property
    def carbs(self) -> int:
        return self.item.carbs * self.quantity

    @property
    def fat(self) -> int:
        return self.item.fat * self.quantity

    def to_dict(self):
        d = self.item.to_dict()
        d.update({
            "quantity": self.quantity,
            "total_calories": self.calories,
            "total_protein": self.protein,
        })
        return d
