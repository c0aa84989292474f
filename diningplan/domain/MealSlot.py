"""Meal slots of a day, declared in generation order."""
from enum import Enum
from typing import Optional


class MealSlot(str, Enum):
    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"

    def __str__(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @classmethod
    def parse(cls, value: str) -> Optional["MealSlot"]:
        '''Return the slot for a (case-insensitive) name, or None.'''
        try:
            return cls((value or "").strip().lower())
        except ValueError:
            return None
