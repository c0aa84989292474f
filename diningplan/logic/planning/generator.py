"""Day plan generation.

Meals are generated one at a time, Breakfast -> Lunch -> Dinner. The order
matters: every slot reads and extends the same fulfilled-category set, so
earlier meals get first claim on covering a food group.
"""
import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, Optional, Protocol, Set

from diningplan.domain.Category import Category
from diningplan.domain.MealPlan import MealPlan, MealPlanBuilder
from diningplan.domain.MealSlot import MealSlot
from diningplan.domain.NutritionGoals import NutritionGoals
from diningplan.domain.NutritionTotals import NutritionTotals
from diningplan.logic.categorize.categorizer import Categorizer
from diningplan.logic.menu.normalizer import normalize
from diningplan.logic.reporting.nutrition import aggregate, checklist, goal_percentages
from diningplan.logic.selection.selector import select_items

logger = logging.getLogger(__name__)


class MenuProvider(Protocol):
    def fetch_items(self, day: date, slot: MealSlot) -> list:
        ...


@dataclass
class DayPlanResult:
    date: date
    goals: NutritionGoals
    plan: MealPlan
    totals: NutritionTotals
    fulfilled: Set[Category] = field(default_factory=set)

    def checklist(self) -> Dict[Category, bool]:
        return checklist(self.fulfilled)

    def percentages(self):
        return goal_percentages(self.totals, self.goals)

    def to_dict(self):
        return {
            "date": self.date.isoformat(),
            "goals": self.goals.to_dict(),
            "meals": self.plan.to_dict(),
            "totals": self.totals.to_dict(),
            "percentages": self.percentages(),
            "checklist": {cat.value: done for cat, done in self.checklist().items()},
        }


def generate_day_plan(provider: MenuProvider, day: date, goals: NutritionGoals,
                      categorizer: Optional[Categorizer] = None) -> DayPlanResult:
    """Fetch, normalize and select items for each meal slot of ``day``."""
    fulfilled: Set[Category] = set()
    builder = MealPlanBuilder()

    for slot in MealSlot:
        logger.info("Fetching %s options for %s", slot, day.isoformat())
        raw_items = provider.fetch_items(day, slot)
        items = normalize(raw_items, categorizer)
        if not items:
            logger.info("No usable %s items for %s; skipping", slot, day.isoformat())
            continue
        entries = select_items(items, goals.calories, fulfilled)
        logger.info("%s: selected %d of %d items", slot.label, len(entries), len(items))
        builder.add_meal(slot, entries)

    plan = builder.build()
    return DayPlanResult(date=day, goals=goals, plan=plan, totals=aggregate(plan), fulfilled=fulfilled)


__all__ = ["MenuProvider", "DayPlanResult", "generate_day_plan"]
