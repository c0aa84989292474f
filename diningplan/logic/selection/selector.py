"""Greedy per-meal item selection.

Each meal aims for a third of the daily calorie goal. Items are ranked so that
food groups nobody has covered yet today come first, then by protein density,
and are added greedily until the running total reaches the lower edge of the
target band (90%). No single addition may push the total past 110%.

The ``fulfilled`` set is shared across the three meals of a run and is updated
in place: once breakfast covers Fruits, lunch and dinner stop prioritizing it.
"""
import logging
import math
from collections import OrderedDict
from typing import Dict, List, MutableSet, Sequence

from diningplan.domain.Category import Category
from diningplan.domain.MenuItem import MenuItem
from diningplan.domain.SelectionEntry import SelectionEntry
from diningplan.utilities.constants import (
    LOWER_BAND,
    MAX_ITEM_QUANTITY,
    MEALS_PER_DAY,
    PER_STEP_SERVING_CAP,
    UPPER_BAND,
)

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Round to the nearest int, halves away from zero."""
    if value < 0:
        return -int(math.floor(-value + 0.5))
    return int(math.floor(value + 0.5))


def meal_calorie_target(daily_calorie_goal: float) -> int:
    """Even split of the daily goal across the meals of the day."""
    return round_half_up(daily_calorie_goal / float(MEALS_PER_DAY))


def is_needed(item: MenuItem, fulfilled) -> bool:
    return item.category.is_trackable and item.category not in fulfilled


def rank_items(items: Sequence[MenuItem], fulfilled) -> List[MenuItem]:
    """Needed categories first, then descending protein density.

    sorted() is stable, so ties keep their input order.
    """
    return sorted(items, key=lambda item: (0 if is_needed(item, fulfilled) else 1, -item.protein_density))


def select_items(items: Sequence[MenuItem], daily_calorie_goal: float,
                 fulfilled: MutableSet[Category]) -> List[SelectionEntry]:
    """Choose servings for one meal.

    Args:
        items: validated, categorized menu items for the slot.
        daily_calorie_goal: the user's daily calorie goal.
        fulfilled: categories already covered today; mutated in place.

    Returns:
        SelectionEntry list in the order items were first picked. Empty when
        the pool is empty or the target is 0.
    """
    target = meal_calorie_target(daily_calorie_goal)
    lower = target * LOWER_BAND
    upper = target * UPPER_BAND

    current_cals = 0
    counts: Dict[str, int] = {}
    picked: "OrderedDict[str, List]" = OrderedDict()

    for item in rank_items(items, fulfilled):
        if current_cals >= lower:
            break
        if item.calories <= 0:
            # normalize() already removes these; skip rather than divide by zero
            continue

        current_count = counts.get(item.name, 0)
        if current_count >= MAX_ITEM_QUANTITY:
            continue

        remaining_quantity = MAX_ITEM_QUANTITY - current_count
        possible_additions = min(remaining_quantity, math.floor((upper - current_cals) / item.calories))
        if possible_additions <= 0:
            logger.debug("Skipping %s: %d cal would overshoot %d", item.name, item.calories, upper)
            continue

        additions = min(possible_additions, PER_STEP_SERVING_CAP - current_count)
        for _ in range(additions):
            current_cals += item.calories
            counts[item.name] = counts.get(item.name, 0) + 1
            if current_count == 0 and item.category.is_trackable and item.category not in fulfilled:
                fulfilled.add(item.category)
                logger.debug("Category %s fulfilled by %s", item.category, item.name)

        if item.name in picked:
            picked[item.name][1] += additions
        else:
            picked[item.name] = [item, additions]
        logger.debug("Added %dx %s (running total %d/%d cal)", additions, item.name, current_cals, target)

    logger.debug("Meal selection finished at %d cal for target %d", current_cals, target)
    return [SelectionEntry(item, quantity) for item, quantity in picked.values()]


__all__ = ["select_items", "rank_items", "meal_calorie_target", "round_half_up", "is_needed"]
