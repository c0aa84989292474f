"""MealPlan domain entity: selections per meal slot for one day.

Write-once: a plan is assembled slot by slot through MealPlanBuilder and is
read-only afterwards.
"""
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Sequence, Tuple

from diningplan.domain.MealSlot import MealSlot
from diningplan.domain.SelectionEntry import SelectionEntry


class MealPlan:
    def __init__(self, meals: Mapping[MealSlot, Sequence[SelectionEntry]]):
        ordered = {slot: tuple(meals[slot]) for slot in MealSlot if meals.get(slot)}
        self._meals: Mapping[MealSlot, Tuple[SelectionEntry, ...]] = MappingProxyType(ordered)

    @property
    def meals(self) -> Mapping[MealSlot, Tuple[SelectionEntry, ...]]:
        return self._meals

    def get(self, slot: MealSlot) -> Tuple[SelectionEntry, ...]:
        return self._meals.get(slot, ())

    def slots(self) -> List[MealSlot]:
        return list(self._meals.keys())

    def entries(self) -> Iterator[SelectionEntry]:
        for selections in self._meals.values():
            yield from selections

    def __contains__(self, slot) -> bool:
        return slot in self._meals

    def __len__(self) -> int:
        return len(self._meals)

    def __repr__(self) -> str:
        parts = [f"{slot.label}: {len(entries)} items" for slot, entries in self._meals.items()]
        return f"MealPlan({', '.join(parts)})"

    def to_dict(self):
        return {slot.value: [e.to_dict() for e in entries] for slot, entries in self._meals.items()}


class MealPlanBuilder:
    """Collects meal selections in slot order, then freezes them into a MealPlan."""

    def __init__(self):
        self._meals: Dict[MealSlot, List[SelectionEntry]] = {}
        self._built = False

    def add_meal(self, slot: MealSlot, entries: Sequence[SelectionEntry]) -> None:
        if self._built:
            raise RuntimeError("MealPlan already built")
        if slot in self._meals:
            raise ValueError(f"{slot.label} already added")
        if entries:
            self._meals[slot] = list(entries)

    def build(self) -> MealPlan:
        self._built = True
        return MealPlan(self._meals)
