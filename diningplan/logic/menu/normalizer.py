"""Raw menu item normalization.

Turns provider records into validated MenuItem objects:

    { "name": str, "description": str,
      "nutrition": { "calories": num, "g_protein": num, "g_carbs": num, "g_fat": num } }

Every field is optional. Missing or unparseable numbers become 0, duplicates
(by name) keep the first occurrence, and items without positive calories are
dropped.
"""
import logging
import re
from typing import Any, Dict, Iterable, List, Optional

from diningplan.domain.MenuItem import MenuItem
from diningplan.logic.categorize.categorizer import Categorizer, categorize as default_categorize
from diningplan.utilities.constants import UNNAMED_ITEM

logger = logging.getLogger(__name__)

_LEADING_NUMBER = re.compile(r"^\s*[-+]?\d+")


def parse_int(value: Any, default: int = 0) -> int:
    """Parse a nutrition value into an int, truncating toward zero.

    Accepts ints, floats, numeric strings ("12.7" -> 12) and strings with a
    leading number ("15g" -> 15). Anything else yields the default.
    """
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value != value or value in (float("inf"), float("-inf")):
            return default
        return int(value)
    if isinstance(value, str):
        try:
            return int(float(value))
        except ValueError:
            m = _LEADING_NUMBER.match(value)
            return int(m.group(0)) if m else default
    return default


def _item_from_raw(raw: Dict[str, Any], categorizer: Optional[Categorizer]) -> MenuItem:
    name = str(raw.get("name") or UNNAMED_ITEM)
    nutrition = raw.get("nutrition") or {}
    if not isinstance(nutrition, dict):
        nutrition = {}
    category = categorizer.categorize(name) if categorizer else default_categorize(name)
    return MenuItem(
        name=name,
        category=category,
        calories=parse_int(nutrition.get("calories")),
        protein=max(parse_int(nutrition.get("g_protein")), 0),
        carbs=max(parse_int(nutrition.get("g_carbs")), 0),
        fat=max(parse_int(nutrition.get("g_fat")), 0),
        description=str(raw.get("description") or ""),
    )


def normalize(raw_items: Iterable[Any], categorizer: Optional[Categorizer] = None) -> List[MenuItem]:
    """Validate, categorize and dedupe raw items. Returns [] when nothing usable remains."""
    seen = set()
    unique: List[MenuItem] = []
    for raw in raw_items or []:
        if not isinstance(raw, dict):
            logger.debug("Skipping non-dict menu record: %r", raw)
            continue
        item = _item_from_raw(raw, categorizer)
        # Dedupe before the calorie filter: a zero-calorie first occurrence
        # still shadows later records with the same name.
        if item.name in seen:
            continue
        seen.add(item.name)
        unique.append(item)

    valid = [item for item in unique if item.calories > 0]
    dropped = len(unique) - len(valid)
    if dropped:
        logger.debug("Dropped %d items without calorie data", dropped)
    return valid


__all__ = ["normalize", "parse_int"]
